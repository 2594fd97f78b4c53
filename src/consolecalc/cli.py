"""Command line entry point."""

from __future__ import annotations

import logging
import sys

import click

from consolecalc import __version__
from consolecalc.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from consolecalc.console import ConsoleSession
from consolecalc.exceptions import CalculatorError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Diagnostics written to stderr.",
)
@click.version_option(__version__, prog_name="consolecalc")
def main(log_level: str) -> None:
    """Interactive calculator that folds expressions left to right."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT, stream=sys.stderr)

    session = ConsoleSession(sys.stdin)
    try:
        status = session.run()
    except CalculatorError as e:
        logging.getLogger(__name__).debug("Session aborted", exc_info=True)
        click.echo(str(e), err=True)
        sys.exit(1)
    sys.exit(status)
