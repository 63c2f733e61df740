"""Expense store: the in-memory record collection and its persistence."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import MAX_PREC, Decimal, localcontext
from typing import Callable, Dict, List, Tuple

from dateutil.relativedelta import relativedelta

from .exceptions import ParseError, PersistenceError
from .models import Expense
from .storage import LineStorage
from .validators import PERIODS, normalize_period, quantize_two_decimals

logger = logging.getLogger(__name__)

NO_EXPENSES_MESSAGE = "No expenses recorded."


def _period_predicates(today: date) -> Dict[str, Callable[[date], bool]]:
    week_start = today - timedelta(days=7)
    month_start = today - relativedelta(months=1)
    return {
        "day": lambda incurred: incurred == today,
        "week": lambda incurred: incurred > week_start,
        "month": lambda incurred: incurred > month_start,
    }


class ExpenseStore:
    """Owns the ordered expense records and mediates persistence.

    Records are loaded once on construction. Every ``add`` rewrites the whole
    backing storage from the in-memory sequence.
    """

    def __init__(self, storage: LineStorage, today: Callable[[], date] = date.today) -> None:
        self._storage = storage
        self._today = today
        self._expenses: List[Expense] = []
        self._ready = False
        self._load()  # Hydrate in-memory sequence from persistence on construction.

    # Public API -----------------------------------------------------------
    def add(self, amount: Decimal, category: str, description: str) -> Expense:
        expense = Expense(amount, category, description, self._today())
        self._expenses.append(expense)
        self._persist()
        return expense

    def list_all(self) -> str:
        """Return every record in entry order, one serialised line each."""
        if not self._expenses:
            return NO_EXPENSES_MESSAGE
        return "\n".join(expense.to_line() for expense in self._expenses)

    def summarize(self, period: str) -> Decimal:
        """Total the amounts falling inside ``period`` relative to today.

        Unknown periods match nothing and total zero.
        """
        predicate = _period_predicates(self._today()).get(normalize_period(period))
        if predicate is None:
            logger.debug("Unknown summary period %r; expected one of %s", period, PERIODS)
            return quantize_two_decimals(Decimal("0"))
        with localcontext() as ctx:
            # Additions are exact at maximum precision; rounding happens once below.
            ctx.prec = MAX_PREC
            total = sum(
                (expense.amount for expense in self._expenses if predicate(expense.date)),
                start=Decimal("0"),
            )
        return quantize_two_decimals(total)

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def ready(self) -> bool:
        return self._ready

    # Internal helpers -----------------------------------------------------
    def _load(self) -> None:
        """Load existing expenses from persistence. Runs once, from ``__init__``.

        A malformed line stops the load; records read before it are kept.
        """
        self._ready = True
        try:
            lines = self._storage.load()
        except PersistenceError as exc:
            logger.warning("Error loading expenses: %s", exc)
            return
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                self._expenses.append(Expense.from_line(line))
            except ParseError as exc:
                logger.error("Error loading expenses: line %d: %s", number, exc)
                break
        logger.debug("Loaded %d expenses", len(self._expenses))

    def _persist(self) -> None:
        try:
            self._storage.save([expense.to_line() for expense in self._expenses])
        except PersistenceError as exc:
            # In-memory state is kept; it diverges from disk until the next successful save.
            logger.error("Error saving expenses: %s", exc)
            return
        logger.debug("Saved %d expenses", len(self._expenses))
