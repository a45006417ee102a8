"""Report builder — turns raw mismatch evidence into a ``MismatchReport``.

Building a report never fails.  Evidence that cannot be parsed (a
non-numeric port, say) degrades to a default value so that the report is
still sent.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from pinreport.models.report import MismatchReport

PIN_LIFETIME = timedelta(days=365)

_PORT_RE = re.compile(r"([+-]?)0*([0-9]{1,19})")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_PEM_CERT_RE = re.compile(
    r"-----BEGIN CERTIFICATE-----.*?-----END CERTIFICATE-----",
    re.DOTALL,
)


def parse_port(value: str, default: int = 0) -> int:
    """Parse a port string, returning *default* when it is not an integer.

    Accepts an optionally signed run of ASCII digits and nothing else
    (no surrounding whitespace, no underscores) whose value fits in a
    signed 64-bit integer.  The port range itself is not checked.
    """
    if not isinstance(value, str):
        return default
    match = _PORT_RE.fullmatch(value)
    if match is None:
        return default
    sign, digits = match.groups()
    number = int(sign + digits)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return default
    return number


def format_timestamp(moment: datetime) -> str:
    """Format *moment* as an RFC 3339 timestamp with second precision.

    A zero UTC offset is written as ``Z``.
    """
    text = moment.isoformat(timespec="seconds")
    if moment.utcoffset() == timedelta(0):
        return text[: -len("+00:00")] + "Z"
    return text


def build_report(
    host: str,
    port: str,
    noted_host: str,
    served_chain: Sequence[str],
    known_pins: Sequence[str],
    app_version: str,
    *,
    now: datetime | None = None,
) -> MismatchReport:
    """Build a report for a failed pin validation against *host*.

    Parameters
    ----------
    host:
        Host of the original request that failed pin validation.
    port:
        Port of that request, as a string.  Degrades to ``0`` if it does
        not parse.
    noted_host:
        Host under which the pin set was noted.
    served_chain:
        PEM certificates presented by the peer, leaf first.
    known_pins:
        Pin tokens the client expected for this host.
    app_version:
        Version of the calling application.
    now:
        Observation time; defaults to the current UTC time.  A naive
        datetime is taken to be UTC.

    The validated chain is left empty and includeSubDomains is always
    false.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.replace(microsecond=0)

    return MismatchReport(
        observed_at=format_timestamp(now),
        hostname=host,
        port=parse_port(port),
        pin_expiry=format_timestamp(now + PIN_LIFETIME),
        include_subdomains=False,
        noted_hostname=noted_host,
        served_chain=tuple(served_chain),
        validated_chain=(),
        known_pins=tuple(known_pins),
        app_version=app_version,
    )


def split_pem_chain(text: str) -> tuple[str, ...]:
    """Split a PEM bundle into its certificate blocks, in order."""
    return tuple(m.group(0) for m in _PEM_CERT_RE.finditer(text))
