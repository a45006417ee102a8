"""MismatchReporter — the single entry point for an upstream pin validator.

A validator that finds no trusted pin in a peer's chain calls
``MismatchReporter.report`` with the evidence it has.  The reporter fills
in the known pins from its injected trust store, builds the report, and
hands it to the submitter.  Nothing is returned and nothing is raised.

Validators that signal a failed check by raising ``PinMismatchError`` can
hand the caught error to ``MismatchReporter.report_error`` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from pinreport.core.report_builder import build_report
from pinreport.core.submitter import ReportSubmitter
from pinreport.core.trust_store import TRUSTED_API_PINS
from pinreport.models.pins import PinSet

logger = logging.getLogger(__name__)


class PinMismatchError(RuntimeError):
    """No TLS fingerprint match was found for a peer.

    Carries the mismatch evidence so that whoever catches it can report it.
    """

    def __init__(
        self,
        host: str,
        port: str,
        noted_host: str,
        served_chain: Sequence[str] = (),
        known_pins: Sequence[str] | None = None,
    ) -> None:
        super().__init__(f"no TLS fingerprint match found for {host}:{port}")
        self.host = host
        self.port = port
        self.noted_host = noted_host
        self.served_chain = tuple(served_chain)
        self.known_pins = None if known_pins is None else tuple(known_pins)


class MismatchReporter:
    """Builds and submits pin mismatch reports for one application.

    Parameters
    ----------
    app_version:
        Version of the calling application, echoed in payload and headers.
    user_agent:
        ``User-Agent`` header sent with every report.
    trust_store:
        Pins the application expects.  Defaults to ``TRUSTED_API_PINS``.
    submitter:
        Submitter to post through.  Defaults to a ``ReportSubmitter`` built
        from the environment configuration.
    """

    def __init__(
        self,
        app_version: str,
        user_agent: str,
        *,
        trust_store: PinSet | None = None,
        submitter: ReportSubmitter | None = None,
    ) -> None:
        self._app_version = app_version
        self._user_agent = user_agent
        self._trust_store = trust_store or TRUSTED_API_PINS
        self._submitter = submitter or ReportSubmitter()

    @property
    def trust_store(self) -> PinSet:
        return self._trust_store

    def report(
        self,
        host: str,
        port: str,
        noted_host: str,
        served_chain: Sequence[str],
        known_pins: Sequence[str] | None = None,
        *,
        background: bool = True,
    ) -> None:
        """Report a pin mismatch for *host*.

        With ``background=True`` (the default) the submission runs on a
        daemon thread and this call returns immediately.  Evidence that
        cannot form a report is logged and dropped.
        """
        pins = self._trust_store.tokens if known_pins is None else known_pins
        try:
            mismatch = build_report(
                host, port, noted_host, served_chain, pins, self._app_version
            )
        except (ValidationError, TypeError) as exc:
            logger.error("Failed to build pin mismatch report for %r: %s", host, exc)
            return

        logger.debug(
            "Pin mismatch for %s:%d (noted %s), %d certs served",
            mismatch.hostname,
            mismatch.port,
            mismatch.noted_hostname,
            len(mismatch.served_chain),
        )
        if background:
            self._submitter.submit_in_background(
                mismatch, self._user_agent
            )
        else:
            self._submitter.submit(mismatch, self._user_agent)

    def report_error(
        self, error: PinMismatchError, *, background: bool = True
    ) -> None:
        """Report the evidence carried by a caught ``PinMismatchError``."""
        self.report(
            error.host,
            error.port,
            error.noted_host,
            error.served_chain,
            error.known_pins,
            background=background,
        )
