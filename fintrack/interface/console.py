"""Mini README: Interactive text menu driving the finance ledger.

Structure:
    * MenuOption - enum of the seven fixed menu selections.
    * MENU_DESCRIPTIONS - titles and help lines printed with the menu.
    * FinanceConsole - banner, menu loop, prompts and dispatch.

The console owns one ``FinanceLedger`` for the lifetime of the loop. Amount
validation is reported from the ledger's ``LedgerResult`` messages; any other
exception raised while handling a selection is logged with its traceback,
reported generically and the menu is shown again. Only the exit selection
ends the loop.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

import typer

from ..finance import FinanceLedger, render_expenses, render_incomes, render_progress
from ..finance.reporting import DEFAULT_TIMESTAMP_FORMAT
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PromptFn = Callable[[str], str]
EchoFn = Callable[[str], None]

BANNER_LINES = (
    "Welcome to the Personal Finance Tracker!",
    "----------------------------------------",
    "This application helps you track your expenses, incomes, and savings goals.",
    "Please follow these steps to use the application:",
    "1. Choose an option from the menu.",
    "2. Enter the required information when prompted.",
    "3. Review your data by selecting the view options.",
    "4. Exit the application when you are finished.",
)


class MenuOption(str, Enum):
    """Menu selections keyed by the text the user types."""

    ADD_EXPENSE = "1"
    ADD_INCOME = "2"
    SET_GOAL = "3"
    VIEW_EXPENSES = "4"
    VIEW_INCOMES = "5"
    CHECK_PROGRESS = "6"
    EXIT = "7"

    @classmethod
    def from_input(cls, value: str) -> Optional["MenuOption"]:
        """Return the matching option or ``None`` for unknown selections."""

        try:
            return cls(value.strip())
        except ValueError:
            return None


MENU_DESCRIPTIONS: Dict[MenuOption, Tuple[str, str]] = {
    MenuOption.ADD_EXPENSE: ("Add Expense", "Record a new expense by entering its category and amount."),
    MenuOption.ADD_INCOME: ("Add Income", "Log a new income by entering its amount."),
    MenuOption.SET_GOAL: ("Set Savings Goal", "Set a target savings amount."),
    MenuOption.VIEW_EXPENSES: ("View Expenses", "Display all recorded expenses."),
    MenuOption.VIEW_INCOMES: ("View Incomes", "Display all recorded incomes."),
    MenuOption.CHECK_PROGRESS: (
        "Check Savings Progress",
        "See how close you are to reaching your savings goal.",
    ),
    MenuOption.EXIT: ("Exit", "Quit the application."),
}


def prompt_line(text: str) -> str:
    """Read one line, allowing empty answers such as a blank category."""

    return typer.prompt(text, default="", show_default=False)


class FinanceConsole:
    """Run the interactive menu against a single ledger."""

    def __init__(
        self,
        ledger: Optional[FinanceLedger] = None,
        *,
        prompt: PromptFn = prompt_line,
        echo: EchoFn = typer.echo,
        show_banner: bool = True,
        show_menu_help: bool = True,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self.ledger = ledger if ledger is not None else FinanceLedger()
        self._prompt = prompt
        self._echo = echo
        self.show_banner = show_banner
        self.show_menu_help = show_menu_help
        self.timestamp_format = timestamp_format
        self._handlers: Dict[MenuOption, Callable[[], None]] = {
            MenuOption.ADD_EXPENSE: self.add_expense,
            MenuOption.ADD_INCOME: self.add_income,
            MenuOption.SET_GOAL: self.set_savings_goal,
            MenuOption.VIEW_EXPENSES: self.view_expenses,
            MenuOption.VIEW_INCOMES: self.view_incomes,
            MenuOption.CHECK_PROGRESS: self.check_progress,
        }

    def run(self) -> None:
        """Loop over the menu until the user picks the exit option."""

        if self.show_banner:
            self._echo_lines(BANNER_LINES)
        while True:
            self.display_menu()
            choice = self._prompt("Choose an option")
            try:
                if not self.dispatch(choice):
                    LOGGER.info("Exit selected, leaving menu loop")
                    return
            except typer.Abort:
                raise
            except Exception as error:
                LOGGER.exception("Unexpected error while handling menu choice %r", choice)
                self._echo(f"An error occurred: {error}")

    def display_menu(self) -> None:
        self._echo("\nMenu Options:")
        for option, (title, description) in MENU_DESCRIPTIONS.items():
            self._echo(f"{option.value}. {title}")
            if self.show_menu_help:
                self._echo(f"   - {description}")

    def dispatch(self, choice: str) -> bool:
        """Handle one selection. Returns ``False`` once exit is chosen."""

        option = MenuOption.from_input(choice)
        if option is None:
            LOGGER.debug("Unknown menu choice %r", choice)
            self._echo("Invalid choice. Please choose again.")
            return True
        if option is MenuOption.EXIT:
            return False
        self._section(MENU_DESCRIPTIONS[option][0])
        self._handlers[option]()
        return True

    def add_expense(self) -> None:
        category = self._prompt("Enter the category of your expense (e.g., food, entertainment)")
        amount = self._prompt("Enter the amount of your expense")
        self._echo(self.ledger.add_expense(category, amount).message)

    def add_income(self) -> None:
        amount = self._prompt("Enter the amount of your income")
        self._echo(self.ledger.add_income(amount).message)

    def set_savings_goal(self) -> None:
        amount = self._prompt("Enter your target savings amount")
        self._echo(self.ledger.set_savings_goal(amount).message)

    def view_expenses(self) -> None:
        self._echo_lines(render_expenses(self.ledger.list_expenses(), self.timestamp_format))

    def view_incomes(self) -> None:
        self._echo_lines(render_incomes(self.ledger.list_incomes()))

    def check_progress(self) -> None:
        self._echo_lines(render_progress(self.ledger.compute_progress()))

    def _section(self, title: str) -> None:
        self._echo(title)
        self._echo("-" * len(title))

    def _echo_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._echo(line)
