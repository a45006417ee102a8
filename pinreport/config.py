"""Reporter configuration — env-driven.

Centralized config using pydantic-settings for environment variable
support. Reads from .env file and PINREPORT_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from pinreport import __version__

DEFAULT_REPORT_URI = "https://reports.protonmail.ch/reports/tls"


class ReporterConfig(BaseSettings):
    """Reporter configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export PINREPORT_REPORT_URI=https://reports.example.test/tls
        export PINREPORT_LOG_LEVEL=DEBUG

    Or via .env file::

        PINREPORT_REQUEST_TIMEOUT_SECONDS=10
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PINREPORT_",
        env_file_encoding="utf-8",
    )

    # Report collection endpoint
    report_uri: str = DEFAULT_REPORT_URI

    # Headers sent with every report
    api_version: int = 3
    api_version_header: str = "x-pm-apiversion"
    app_version_header: str = "x-pm-appversion"
    user_agent: str = f"pinreport/{__version__}"

    # Transport deadline enforced by the HTTP client, not by submit()
    request_timeout_seconds: float = 30.0

    # Observability
    log_level: str = "INFO"


# Shared instance: `from pinreport.config import config`
config = ReporterConfig()
