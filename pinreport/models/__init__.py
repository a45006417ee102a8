"""pinreport data models — all Pydantic v2, all frozen (immutable)."""

from pinreport.models.pins import PinSet, TrustedPin
from pinreport.models.report import MismatchReport

__all__ = [
    # pins
    "PinSet",
    "TrustedPin",
    # report
    "MismatchReport",
]
