"""Mini README: Personal finance core for the tracker.

This package holds everything that is not console plumbing: the in-memory
ledger of expenses, incomes and the savings goal, the parse-or-fail amount
conversion it relies on, and the text renderers for listings and progress.
Nothing here reads input or prints output.
"""

from .amounts import AmountValidationError, parse_amount
from .ledger import EntryView, Expense, FinanceLedger, LedgerResult, SavingsProgress
from .reporting import format_amount, format_percent, render_expenses, render_incomes, render_progress

__all__ = [
    "AmountValidationError",
    "EntryView",
    "Expense",
    "FinanceLedger",
    "LedgerResult",
    "SavingsProgress",
    "format_amount",
    "format_percent",
    "parse_amount",
    "render_expenses",
    "render_incomes",
    "render_progress",
]
