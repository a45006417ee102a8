"""Canonical wire encoding for mismatch reports.

The payload is the report's aliased field dump serialized as canonical
JSON, so the same report always yields the same bytes and the same
digest.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from pinreport.models.report import MismatchReport


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes — deterministic, sorted, compact.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def report_to_wire(report: MismatchReport) -> dict[str, Any]:
    """Return the JSON-ready payload dict keyed by wire field names."""
    return report.model_dump(mode="json", by_alias=True)


def encode_report(report: MismatchReport) -> bytes:
    """Serialize *report* to the canonical wire payload."""
    return canonical_json_bytes(report_to_wire(report))


def decode_report(data: bytes | str) -> MismatchReport:
    """Parse a wire payload back into a ``MismatchReport``.

    Raises ``pydantic.ValidationError`` if the payload does not match the
    report schema.
    """
    return MismatchReport.model_validate_json(data)


def report_digest(payload: bytes) -> str:
    """Return ``sha256:<hex>`` of an encoded payload, for log correlation."""
    return f"sha256:{hashlib.sha256(payload).hexdigest()}"
