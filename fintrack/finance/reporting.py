"""Mini README: Text rendering for ledger listings and progress reports.

Structure:
    * format_amount / format_percent - display helpers that never hide digits.
    * render_expenses / render_incomes - listings with empty-state messages.
    * render_progress - goal, totals, net savings and percentage reached.

Amounts are padded to at least two decimals but keep any finer digits the
user entered, so a listing never disagrees with the stored value. Percentages
are rounded half-up to two decimals. Functions return lists of lines and never
print, so the console decides where output goes and tests can assert on the
exact text.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, List, Sequence

from .ledger import Expense, SavingsProgress

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

CENT = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Render an amount with thousands separators and at least two decimals."""

    if amount.as_tuple().exponent >= -2:
        return f"{amount:,.2f}"
    return f"{amount:,f}"


def format_percent(percent: Decimal) -> str:
    """Round half-up to two decimals without losing integer digits."""

    context = Context(prec=max(28, percent.adjusted() + 3))
    rounded = percent.quantize(CENT, rounding=ROUND_HALF_UP, context=context)
    return f"{rounded:,f}%"


def render_expenses(
    expenses: Sequence[Expense], timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
) -> List[str]:
    """List expenses in insertion order or report that none exist."""

    if not expenses:
        return ["No expenses recorded."]
    lines = ["Expenses:"]
    for expense in expenses:
        lines.append(
            f"Category: {expense.category}, "
            f"Amount: {format_amount(expense.amount)}, "
            f"Date: {expense.timestamp.strftime(timestamp_format)}"
        )
    return lines


def render_incomes(incomes: Sequence[Decimal]) -> List[str]:
    if not incomes:
        return ["No incomes recorded."]
    return ["Incomes:", *_amount_lines(incomes)]


def _amount_lines(amounts: Iterable[Decimal]) -> List[str]:
    return [f"Amount: {format_amount(amount)}" for amount in amounts]


def render_progress(progress: SavingsProgress) -> List[str]:
    """Describe progress, or report the unset goal without any percentage."""

    if not progress.goal_set or progress.percent_of_goal is None:
        return ["No savings goal set."]
    return [
        f"Savings Goal: {format_amount(progress.goal)}",
        f"Total Income: {format_amount(progress.total_income)}",
        f"Total Expenses: {format_amount(progress.total_expenses)}",
        f"Savings Progress: {format_amount(progress.net)}",
        f"Progress toward goal: {format_percent(progress.percent_of_goal)}",
    ]
