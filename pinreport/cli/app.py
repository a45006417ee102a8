"""Main Typer application — imports and registers all CLI commands.

Entry point: ``pinreport`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pinreport.cli.commands.pins import pins_cmd
from pinreport.cli.commands.report import report_cmd
from pinreport.config import config

app = typer.Typer(
    name="pinreport",
    help="pinreport: Public-Key-Pinning violation reporter.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="pins", help="List the trusted pin fingerprints.")(pins_cmd)
app.command(name="report", help="Build and submit a pin mismatch report.")(report_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Log level (defaults to PINREPORT_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging for every subcommand."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
