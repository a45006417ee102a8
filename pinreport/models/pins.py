"""Pin set models — the immutable trust store value."""

from __future__ import annotations

import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, field_validator

# RFC 7469 known-pin syntax: token "=" quoted-string
_KNOWN_PIN_RE = re.compile(r'[A-Za-z0-9!#$%&\'*+.^_`|~-]+="[^"]*"')


class TrustedPin(BaseModel):
    """A single expected public-key pin and a human label for it."""

    model_config = ConfigDict(frozen=True)

    token: str  # e.g. pin-sha256="drtmcR2kFkM8qJClsuWgUzxgBkePfRCkRpqUesyDmeE="
    label: str = ""  # "current", "hot", "cold", "proxy main", ...

    @field_validator("token")
    @classmethod
    def _check_syntax(cls, value: str) -> str:
        if not _KNOWN_PIN_RE.fullmatch(value):
            raise ValueError(f"not a known-pin token: {value!r}")
        return value


class PinSet(BaseModel):
    """Ordered, non-empty, read-only set of trusted pins.

    Iterating a PinSet yields pin tokens in declaration order, which is
    also the order they appear in a report's ``known-pins`` list.
    """

    model_config = ConfigDict(frozen=True)

    pins: tuple[TrustedPin, ...]

    @field_validator("pins")
    @classmethod
    def _check_pins(cls, value: tuple[TrustedPin, ...]) -> tuple[TrustedPin, ...]:
        if not value:
            raise ValueError("a pin set must contain at least one pin")
        tokens = [p.token for p in value]
        if len(set(tokens)) != len(tokens):
            raise ValueError("a pin set must not repeat a token")
        return value

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(p.token for p in self.pins)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.pins)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens
