"""Mini README: Core package initializer for the personal finance tracker.

Exposes the logger factory and the ledger so scripts can reach the main
entry points without knowing the module layout. Kept import-light: the
Typer CLI lives in ``fintrack.interface`` and is only loaded on demand.
"""

from .finance import FinanceLedger
from .logging_utils import get_logger

__all__ = ["FinanceLedger", "get_logger"]
