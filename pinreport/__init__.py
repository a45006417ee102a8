"""pinreport: Public-Key-Pinning violation reporting.

When certificate-pin validation fails for a trusted host, pinreport builds an
RFC 7469-style mismatch report and posts it, fire-and-forget, to the report
collection endpoint:
  - Immutable trust store of expected pin fingerprints
  - Frozen pydantic report model with the fixed wire field names
  - Canonical JSON wire codec
  - Non-propagating HTTP submitter (httpx), logging only
  - Env-driven configuration via pydantic-settings
"""

__version__ = "0.1.0"
__description__ = "Public-Key-Pinning violation reporter"

from pinreport.core.report_builder import build_report
from pinreport.core.reporter import MismatchReporter, PinMismatchError
from pinreport.core.submitter import ReportSubmitter
from pinreport.core.trust_store import TRUSTED_API_PINS

__all__ = [
    "MismatchReporter",
    "PinMismatchError",
    "ReportSubmitter",
    "TRUSTED_API_PINS",
    "build_report",
    "__version__",
]
