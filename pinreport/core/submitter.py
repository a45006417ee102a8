"""Report submitter — one-way POST of mismatch reports.

Submission is fire-and-forget telemetry.  ``ReportSubmitter.submit``
returns ``None`` on every path: serialization, request construction and
transport failures are logged and absorbed, and a non-OK response is
logged as a diagnostic.  Whatever happens, a response that was obtained is
drained and closed before ``submit`` returns.

``submit`` blocks for the duration of the request.  Callers on a critical
path use ``submit_in_background`` (or their own worker) instead.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext

import httpx
from pydantic_core import PydanticSerializationError

from pinreport.config import ReporterConfig
from pinreport.core.serialization import encode_report, report_digest
from pinreport.models.report import MismatchReport

_UNSAFE_HEADER_CHARS = frozenset("\r\n\x00")


def _check_header_values(headers: dict[str, str]) -> None:
    """Reject header values that would split or truncate the header block."""
    for name, value in headers.items():
        if _UNSAFE_HEADER_CHARS.intersection(value):
            raise ValueError(f"illegal character in {name} header value")


class ReportSubmitter:
    """Posts ``MismatchReport`` payloads to the report collection endpoint.

    Parameters
    ----------
    config:
        Endpoint, header and timeout settings.  Defaults to a fresh
        ``ReporterConfig`` (environment driven).
    client:
        An ``httpx.Client`` to send through.  The submitter does not close
        an injected client.  When omitted, every submission opens and
        closes its own client, so submissions share no connection state.
    logger:
        Where outcome records go.  Defaults to this module's logger.
    """

    def __init__(
        self,
        config: ReporterConfig | None = None,
        *,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or ReporterConfig()
        self._client = client
        self._log = logger if logger is not None else logging.getLogger(__name__)

    @property
    def config(self) -> ReporterConfig:
        return self._config

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self, report: MismatchReport, user_agent: str) -> None:
        """Serialize *report* and POST it.  Never raises.

        The request carries ``Content-Type: application/json``, the given
        ``User-Agent``, the API version header and the application version
        header mirrored from ``report.app_version``.
        """
        try:
            payload = encode_report(report)
        except (PydanticSerializationError, ValueError, TypeError) as exc:
            self._log.error("Failed to serialize pin mismatch report: %s", exc)
            return

        digest = report_digest(payload)
        cfg = self._config

        with self._open_client() as client:
            try:
                headers = {
                    "Content-Type": "application/json",
                    "User-Agent": user_agent,
                    cfg.api_version_header: str(cfg.api_version),
                    cfg.app_version_header: report.app_version,
                }
                _check_header_values(headers)
                request = client.build_request(
                    "POST", cfg.report_uri, content=payload, headers=headers
                )
            except (httpx.InvalidURL, ValueError, TypeError) as exc:
                self._log.error(
                    "Failed to create pin report request for %s: %s", cfg.report_uri, exc
                )
                return

            self._log.warning(
                "Reporting pin mismatch for %s:%d to %s (%s)",
                report.hostname,
                report.port,
                request.url,
                digest,
            )
            self._send(client, request, digest)

    def submit_in_background(
        self, report: MismatchReport, user_agent: str
    ) -> threading.Thread:
        """Run ``submit`` on a daemon thread and return the started thread."""
        thread = threading.Thread(
            target=self.submit,
            args=(report, user_agent),
            name=f"pin-report-{report.hostname}",
            daemon=True,
        )
        thread.start()
        return thread

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _open_client(self) -> AbstractContextManager[httpx.Client]:
        if self._client is not None:
            return nullcontext(self._client)
        return httpx.Client(timeout=self._config.request_timeout_seconds)

    def _send(self, client: httpx.Client, request: httpx.Request, digest: str) -> None:
        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as exc:
            self._log.error("Failed to report pin mismatch (%s): %s", digest, exc)
            return
        except Exception as exc:  # noqa: BLE001
            self._log.error(
                "Unexpected error reporting pin mismatch (%s): %r", digest, exc
            )
            return

        try:
            response.read()
        except httpx.HTTPError as exc:
            self._log.error(
                "Failed to read pin report response (%s): %s", digest, exc
            )
            return
        finally:
            response.close()

        self._log.warning(
            "Reported pin mismatch (%s): HTTP %d", digest, response.status_code
        )
        if response.status_code != httpx.codes.OK:
            self._log.error(
                "Pin report status was not OK (%s): HTTP %d %s",
                digest,
                response.status_code,
                response.reason_phrase,
            )
