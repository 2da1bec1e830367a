"""Mini README: Terminal interface package for the finance tracker.

Re-exports the Typer ``cli`` application and the ``FinanceConsole`` menu loop
that it launches.
"""

from .cli import cli
from .console import FinanceConsole, MenuOption

__all__ = ["FinanceConsole", "MenuOption", "cli"]
