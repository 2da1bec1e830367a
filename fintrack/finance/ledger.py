"""Mini README: In-memory personal finance ledger.

Structure:
    * Expense - immutable expense entry stamped at creation time.
    * LedgerResult - typed outcome of every mutating ledger operation.
    * SavingsProgress - aggregate totals and progress toward the goal.
    * EntryView - read-only live sequence over a ledger collection.
    * FinanceLedger - owns expenses, incomes and the savings goal.

The ledger performs no I/O. Amounts are converted with ``parse_amount`` and a
malformed amount is returned as a failed ``LedgerResult`` rather than raised,
so callers can report it and carry on with the stored data untouched. A goal
of zero means "no goal set" and progress never divides by it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Generic, Iterator, List, Optional, TypeVar, Union

from ..logging_utils import get_logger
from .amounts import AmountInput, AmountValidationError, parse_amount

LOGGER = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

EntryT = TypeVar("EntryT")


@dataclass(frozen=True, slots=True)
class Expense:
    """A single recorded expense."""

    category: str
    amount: Decimal
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class LedgerResult:
    """Outcome of ``add_expense``, ``add_income`` or ``set_savings_goal``."""

    success: bool
    message: str
    entry: Optional[Union[Expense, Decimal]] = None
    error: Optional[AmountValidationError] = None

    @classmethod
    def from_error(cls, error: AmountValidationError) -> "LedgerResult":
        """Wrap a validation error as a failed result."""

        return cls(success=False, message=str(error), error=error)


@dataclass(frozen=True, slots=True)
class SavingsProgress:
    """Totals and progress toward the savings goal.

    ``percent_of_goal`` is ``None`` when no goal is set. Otherwise it is
    signed and unclamped: a deficit gives a negative value and an exceeded
    goal gives more than 100.
    """

    goal: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net: Decimal
    percent_of_goal: Optional[Decimal]

    @property
    def goal_set(self) -> bool:
        return self.goal != ZERO


class EntryView(Sequence, Generic[EntryT]):
    """Read-only view over a ledger collection in insertion order."""

    __slots__ = ("_entries",)

    def __init__(self, entries: List[EntryT]) -> None:
        self._entries = entries

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"EntryView({self._entries!r})"


class FinanceLedger:
    """Record expenses and incomes and track progress toward a savings goal."""

    def __init__(self, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._expenses: List[Expense] = []
        self._incomes: List[Decimal] = []
        self._savings_goal: Decimal = ZERO
        self._clock = clock
        LOGGER.debug("Finance ledger initialised")

    @property
    def savings_goal(self) -> Decimal:
        """Current goal; zero means no goal is set."""

        return self._savings_goal

    def add_expense(self, category: Optional[str], amount: AmountInput) -> LedgerResult:
        """Append an expense stamped with the current time."""

        try:
            parsed = parse_amount(amount, "expense amount")
        except AmountValidationError as error:
            LOGGER.info("Expense rejected: %s", error)
            return LedgerResult.from_error(error)

        expense = Expense(category=category or "", amount=parsed, timestamp=self._clock())
        self._expenses.append(expense)
        LOGGER.info("Recorded expense category=%r amount=%s", expense.category, expense.amount)
        return LedgerResult(success=True, message="Expense added successfully.", entry=expense)

    def add_income(self, amount: AmountInput) -> LedgerResult:
        """Append an income amount."""

        try:
            parsed = parse_amount(amount, "income amount")
        except AmountValidationError as error:
            LOGGER.info("Income rejected: %s", error)
            return LedgerResult.from_error(error)

        self._incomes.append(parsed)
        LOGGER.info("Recorded income amount=%s", parsed)
        return LedgerResult(success=True, message="Income added successfully.", entry=parsed)

    def set_savings_goal(self, amount: AmountInput) -> LedgerResult:
        """Replace the savings goal. Zero clears it."""

        try:
            parsed = parse_amount(amount, "savings goal")
        except AmountValidationError as error:
            LOGGER.info("Savings goal rejected: %s", error)
            return LedgerResult.from_error(error)

        previous, self._savings_goal = self._savings_goal, parsed
        LOGGER.info("Savings goal changed %s -> %s", previous, parsed)
        return LedgerResult(success=True, message="Savings goal set successfully.", entry=parsed)

    def list_expenses(self) -> EntryView[Expense]:
        return EntryView(self._expenses)

    def list_incomes(self) -> EntryView[Decimal]:
        return EntryView(self._incomes)

    def total_income(self) -> Decimal:
        return sum(self._incomes, ZERO)

    def total_expenses(self) -> Decimal:
        return sum((expense.amount for expense in self._expenses), ZERO)

    def compute_progress(self) -> SavingsProgress:
        """Aggregate totals and, when a goal is set, the percentage reached."""

        goal = self._savings_goal
        total_income = self.total_income()
        total_expenses = self.total_expenses()
        net = total_income - total_expenses
        percent: Optional[Decimal] = None
        if goal != ZERO:
            percent = (net / goal) * HUNDRED
        LOGGER.debug(
            "Progress goal=%s income=%s expenses=%s net=%s percent=%s",
            goal,
            total_income,
            total_expenses,
            net,
            percent,
        )
        return SavingsProgress(
            goal=goal,
            total_income=total_income,
            total_expenses=total_expenses,
            net=net,
            percent_of_goal=percent,
        )
