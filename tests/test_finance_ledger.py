"""Mini README: Tests covering the in-memory finance ledger.

Structure:
    * recording tests - expenses and incomes append in order with parsed amounts.
    * validation tests - malformed amounts leave stored data untouched.
    * progress tests - totals, signed percentages and the zero-goal sentinel.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

import pytest

from fintrack.finance import AmountValidationError, Expense, FinanceLedger

FIXED_TIME = datetime(2024, 1, 9, 14, 30, 0)


def _ledger() -> FinanceLedger:
    return FinanceLedger(clock=lambda: FIXED_TIME)


def test_add_expense_appends_entry_with_timestamp() -> None:
    """A valid expense should be stored once with its parsed amount and clock time."""

    ledger = _ledger()
    result = ledger.add_expense("Groceries", "50.00")

    assert result.success
    assert result.message == "Expense added successfully."
    expenses = ledger.list_expenses()
    assert len(expenses) == 1
    assert expenses[0] == Expense(category="Groceries", amount=Decimal("50.00"), timestamp=FIXED_TIME)
    assert result.entry == expenses[0]


@pytest.mark.parametrize("raw", ["0", "12.5", "-3.25", "1,250.75", " 7 "])
def test_add_expense_accepts_valid_decimal_text(raw: str) -> None:
    """Any valid decimal text grows the collection by exactly one entry."""

    ledger = _ledger()
    ledger.add_expense("Misc", "1")
    before = len(ledger.list_expenses())

    ledger.add_expense("Rent", raw)

    expenses = ledger.list_expenses()
    assert len(expenses) == before + 1
    assert expenses[-1].category == "Rent"
    assert expenses[-1].amount == Decimal(raw.strip().replace(",", ""))


@pytest.mark.parametrize("raw", ["abc", "", "12..5", "NaN", "Infinity", "1e3"])
def test_add_expense_rejects_non_numeric_amount(raw: str) -> None:
    """Malformed amounts report a validation error and store nothing."""

    ledger = _ledger()
    result = ledger.add_expense("Food", raw)

    assert not result.success
    assert isinstance(result.error, AmountValidationError)
    assert result.error.field_name == "expense amount"
    assert result.message == "Invalid expense amount. Please enter a valid number."
    assert len(ledger.list_expenses()) == 0


def test_add_expense_allows_empty_and_duplicate_categories() -> None:
    """Categories are free text: blanks and repeats are both stored."""

    ledger = _ledger()
    ledger.add_expense("", "5")
    ledger.add_expense("Food", "6")
    ledger.add_expense("Food", "7")

    assert [expense.category for expense in ledger.list_expenses()] == ["", "Food", "Food"]


def test_expense_entries_are_immutable() -> None:
    """Stored expenses cannot be edited after creation."""

    ledger = _ledger()
    ledger.add_expense("Food", "5")

    with pytest.raises(AttributeError):
        ledger.list_expenses()[0].amount = Decimal("1")  # type: ignore[misc]


def test_add_income_preserves_insertion_order() -> None:
    ledger = _ledger()
    ledger.add_income("1000.00")
    ledger.add_income(Decimal("250"))
    ledger.add_income(75)

    assert list(ledger.list_incomes()) == [Decimal("1000.00"), Decimal("250"), Decimal("75")]


def test_add_income_rejects_bad_amount_without_mutation() -> None:
    ledger = _ledger()
    ledger.add_income("10")

    result = ledger.add_income("ten")

    assert not result.success
    assert result.message == "Invalid income amount. Please enter a valid number."
    assert list(ledger.list_incomes()) == [Decimal("10")]


def test_fresh_ledger_lists_are_empty_and_distinguishable() -> None:
    """Empty listings report zero length and are falsy; populated ones are not."""

    ledger = _ledger()
    assert len(ledger.list_expenses()) == 0
    assert len(ledger.list_incomes()) == 0
    assert not ledger.list_expenses()

    ledger.add_expense("Food", "1")
    ledger.add_income("1")
    assert ledger.list_expenses()
    assert len(ledger.list_incomes()) == 1


def test_entry_view_is_restartable_and_read_only() -> None:
    """Listings can be iterated repeatedly and offer no mutation methods."""

    ledger = _ledger()
    ledger.add_income("1")
    ledger.add_income("2")
    incomes = ledger.list_incomes()

    assert list(incomes) == list(incomes)
    assert not hasattr(incomes, "append")
    ledger.add_income("3")
    assert len(incomes) == 3


def test_compute_progress_without_goal_reports_no_goal() -> None:
    """The zero sentinel must never lead to a division."""

    progress = _ledger().compute_progress()

    assert not progress.goal_set
    assert progress.percent_of_goal is None
    assert progress.total_income == Decimal("0")
    assert progress.total_expenses == Decimal("0")
    assert progress.net == Decimal("0")


def test_compute_progress_reports_totals_and_percentage() -> None:
    ledger = _ledger()
    ledger.add_income("1000.00")
    ledger.add_expense("Groceries", "50.00")
    ledger.set_savings_goal("500.00")

    progress = ledger.compute_progress()

    assert progress.goal_set
    assert progress.goal == Decimal("500.00")
    assert progress.total_income == Decimal("1000.00")
    assert progress.total_expenses == Decimal("50.00")
    assert progress.net == Decimal("950.00")
    assert progress.percent_of_goal == Decimal("190.0")


def test_compute_progress_allows_negative_and_over_hundred_percent() -> None:
    """A deficit yields a negative, unclamped percentage."""

    ledger = _ledger()
    ledger.add_expense("Rent", "100.00")
    ledger.set_savings_goal("50.00")

    progress = ledger.compute_progress()

    assert progress.net == Decimal("-100.00")
    assert progress.percent_of_goal == Decimal("-200.0")


def test_set_savings_goal_replaces_previous_value() -> None:
    ledger = _ledger()
    ledger.add_income("600")
    ledger.set_savings_goal("500.00")
    ledger.set_savings_goal("300.00")

    progress = ledger.compute_progress()

    assert ledger.savings_goal == Decimal("300.00")
    assert progress.goal == Decimal("300.00")
    assert progress.percent_of_goal == Decimal("200")


def test_set_savings_goal_to_zero_clears_goal() -> None:
    ledger = _ledger()
    ledger.set_savings_goal("400")

    result = ledger.set_savings_goal("0")

    assert result.success
    assert not ledger.compute_progress().goal_set


def test_invalid_goal_keeps_existing_goal() -> None:
    ledger = _ledger()
    ledger.set_savings_goal("400")

    result = ledger.set_savings_goal("lots")

    assert not result.success
    assert result.message == "Invalid savings goal. Please enter a valid number."
    assert ledger.savings_goal == Decimal("400")


def test_rejected_expense_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="fintrack.finance.ledger")

    _ledger().add_expense("Food", "oops")

    assert "Expense rejected" in caplog.text
