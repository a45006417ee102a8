"""Shared test fixtures for pinreport."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from typing import Any

import httpx
import pytest

from pinreport.config import ReporterConfig
from pinreport.core.report_builder import build_report
from pinreport.core.submitter import ReportSubmitter
from pinreport.models.report import MismatchReport

TEST_REPORT_URI = "https://reports.example.test/reports/tls"

LEAF_PEM = "-----BEGIN CERTIFICATE-----\nMIIBleaf\n-----END CERTIFICATE-----"
INTERMEDIATE_PEM = "-----BEGIN CERTIFICATE-----\nMIIBinter\n-----END CERTIFICATE-----"


class RecordingTransport:
    """Handler for ``httpx.MockTransport`` that records every request.

    Thread-safe: concurrent submissions append under a lock.
    """

    def __init__(self, status_code: int = 200, body: bytes = b"{}") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []
        self._lock = threading.Lock()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        with self._lock:
            self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body, request=request)


@pytest.fixture
def reporter_config() -> ReporterConfig:
    """A config pointing at a test endpoint, isolated from the environment."""
    return ReporterConfig(report_uri=TEST_REPORT_URI, request_timeout_seconds=5.0)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mock_client(recording_transport: RecordingTransport) -> Iterator[httpx.Client]:
    """An httpx.Client whose requests land in ``recording_transport``."""
    client = httpx.Client(transport=httpx.MockTransport(recording_transport))
    yield client
    client.close()


@pytest.fixture
def submitter(
    reporter_config: ReporterConfig, mock_client: httpx.Client
) -> ReportSubmitter:
    """A ReportSubmitter wired to the mock client."""
    return ReportSubmitter(reporter_config, client=mock_client)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Report factory, shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_report(fixed_now: datetime) -> Callable[..., MismatchReport]:
    """Factory fixture: build a MismatchReport with sensible defaults."""

    def _factory(**overrides: Any) -> MismatchReport:
        defaults: dict[str, Any] = {
            "host": "mail.example.com",
            "port": "443",
            "noted_host": "example.com",
            "served_chain": [LEAF_PEM, INTERMEDIATE_PEM],
            "known_pins": ['pin-sha256="AAA="'],
            "app_version": "1.0.0",
            "now": fixed_now,
        }
        defaults.update(overrides)
        return build_report(**defaults)

    return _factory


@pytest.fixture
def report(make_report: Callable[..., MismatchReport]) -> MismatchReport:
    """Convenience: a ready-made report with test defaults."""
    return make_report()
