"""Console interface for the daily expense tracker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, TextIO

from expense_core.exceptions import InputFormatError
from expense_core.services import ExpenseStore
from expense_core.storage import TextFileStorage
from expense_core.validators import parse_amount

DATA_FILE = Path("expenses.txt")

MENU = """
Daily Expense Tracker Menu:
1. Add Expense
2. View All Expenses
3. View Daily Summary
4. View Weekly Summary
5. View Monthly Summary
6. Exit"""

EXIT_CHOICE = "6"


class InputClosed(Exception):
    """Raised when the input stream ends while the shell waits for a line."""


class Shell:
    """Numbered menu loop reading one line per prompt from ``stdin``."""

    def __init__(self, store: ExpenseStore, stdin: TextIO, stdout: TextIO) -> None:
        self._store = store
        self._stdin = stdin
        self._stdout = stdout
        self._commands: Dict[str, Callable[[], None]] = {
            "1": self.add_expense,
            "2": self.list_expenses,
            "3": lambda: self.summary("day"),
            "4": lambda: self.summary("week"),
            "5": lambda: self.summary("month"),
        }

    def run(self) -> int:
        while True:
            self._print(MENU)
            try:
                choice = self._prompt("Enter your choice: ").strip()
                if choice == EXIT_CHOICE:
                    self._print("Exiting Daily Expense Tracker. Goodbye!")
                    return 0
                command = self._commands.get(choice)
                if command is None:
                    self._print("Invalid choice. Please try again.")
                    continue
                command()
            except InputClosed:
                self._print("\nInput closed. Exiting.")
                return 1

    def add_expense(self) -> None:
        while True:
            try:
                amount = parse_amount(self._prompt("Enter amount: "))
                break
            except InputFormatError as exc:
                self._print(f"Invalid amount: {exc}")
        category = self._prompt("Enter category: ")
        description = self._prompt("Enter description: ")
        self._store.add(amount, category, description)
        self._print("Expense added successfully!")

    def list_expenses(self) -> None:
        self._print(self._store.list_all())

    def summary(self, period: str) -> None:
        total = self._store.summarize(period)
        self._print(f"Total expenses for the {period}: {total:.2f}")

    def _prompt(self, text: str) -> str:
        self._stdout.write(text)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise InputClosed()
        return line.rstrip("\r\n")

    def _print(self, text: str) -> None:
        print(text, file=self._stdout)


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(
    data_file: Path = DATA_FILE,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    configure_logging()
    store = ExpenseStore(TextFileStorage(data_file))
    shell = Shell(
        store,
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    )
    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
