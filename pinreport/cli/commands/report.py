"""``pinreport report`` — build and submit a pin mismatch report.

Reads the served chain from a PEM bundle, fills in the known pins (the
trust store unless ``--pin`` is given), and posts the report.  With
``--dry-run`` the payload is printed instead of sent.

Submission is fire-and-forget: the exit code is 0 whether or not the
collection endpoint accepted the report.  Check the log output for the
outcome.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from pinreport import __version__
from pinreport.config import config
from pinreport.core.report_builder import build_report, split_pem_chain
from pinreport.core.serialization import report_to_wire
from pinreport.core.submitter import ReportSubmitter
from pinreport.core.trust_store import default_trust_store

console = Console()


def report_cmd(
    host: str = typer.Argument(..., help="Host that failed pin validation."),
    port: str = typer.Option("443", "--port", "-p", help="Port of the failed request."),
    noted_host: str = typer.Option(
        None,
        "--noted-host",
        "-n",
        help="Host the pins were noted under (defaults to HOST).",
    ),
    chain: Path = typer.Option(
        None,
        "--chain",
        "-c",
        help="PEM bundle with the certificate chain served by the host.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    pins: list[str] = typer.Option(
        None,
        "--pin",
        help="Known pin token (repeatable). Defaults to the trusted pins.",
    ),
    app_version: str = typer.Option(
        __version__, "--app-version", help="Application version to report."
    ),
    user_agent: str = typer.Option(
        None, "--user-agent", help="User-Agent header (defaults to PINREPORT_USER_AGENT)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the payload instead of sending it."
    ),
) -> None:
    """Build a mismatch report for HOST and submit it."""
    served_chain = split_pem_chain(chain.read_text(encoding="utf-8")) if chain else ()
    known_pins = pins or list(default_trust_store().tokens)

    report = build_report(
        host,
        port,
        noted_host or host,
        served_chain,
        known_pins,
        app_version,
    )

    if dry_run:
        console.print_json(data=report_to_wire(report))
        return

    ReportSubmitter(config).submit(report, user_agent or config.user_agent)
    console.print(
        f"[dim]Report for {report.hostname}:{report.port} handed to "
        f"{config.report_uri}[/dim]"
    )
