"""Mini README: Typer CLI for launching the personal finance tracker.

This module exposes the ``cli`` Typer application. Its ``run`` command reads
settings from the environment, lets flags override them, configures logging
and hands a fresh in-memory ledger to the interactive console. Nothing is
saved when the command exits.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from ..configuration import get_settings
from ..finance import FinanceLedger
from ..logging_utils import configure_root_logger, get_logger
from .console import FinanceConsole

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track expenses, incomes and a savings goal from the terminal.")


class LogLevel(str, Enum):
    """Logging levels accepted on the command line."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@cli.command()
def run(
    log_level: Optional[LogLevel] = typer.Option(
        None, case_sensitive=False, help="Override the configured logging level."
    ),
    banner: Optional[bool] = typer.Option(
        None, "--banner/--no-banner", help="Show the welcome banner on startup."
    ),
    menu_help: Optional[bool] = typer.Option(
        None, "--menu-help/--no-menu-help", help="Describe each menu option."
    ),
) -> None:
    """Start the interactive finance tracker menu."""

    settings = get_settings()
    configure_root_logger(log_level.value if log_level else settings.log_level)
    LOGGER.debug("Starting finance tracker in %s environment", settings.environment)

    console = FinanceConsole(
        FinanceLedger(),
        show_banner=settings.show_banner if banner is None else banner,
        show_menu_help=settings.show_menu_help if menu_help is None else menu_help,
        timestamp_format=settings.timestamp_format,
    )
    console.run()
