"""pinreport CLI — Typer-based command-line interface.

Provides the ``pinreport`` command with subcommands for listing the
trusted pins and for building (and optionally submitting) a mismatch
report by hand.

All output uses Rich for formatted terminal display.
"""
