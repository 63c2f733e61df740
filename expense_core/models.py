"""Data model for the expense tracker domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .exceptions import ParseError
from .validators import parse_decimal, parse_iso_date

__all__ = ["DELIMITER", "Expense"]

DELIMITER = ","


@dataclass(frozen=True)
class Expense:
    amount: Decimal
    category: str
    description: str
    date: date = field(default_factory=date.today)

    def to_line(self) -> str:
        """Serialise the expense to a single delimited line without terminator."""
        return DELIMITER.join(
            (str(self.amount), self.category, self.description, self.date.isoformat())
        )

    @classmethod
    def from_line(cls, line: str) -> "Expense":
        """Hydrate an Expense from a line produced by ``to_line``.

        Only the first four segments are read; anything after them is ignored.
        """
        parts = line.rstrip("\r\n").split(DELIMITER)
        if len(parts) < 4:
            raise ParseError(f"Expected 4 comma-separated fields, got {len(parts)}")
        amount, category, description, day = parts[:4]
        return cls(
            amount=parse_decimal(amount),
            category=category,
            description=description,
            date=parse_iso_date(day),
        )

    def __str__(self) -> str:
        return self.to_line()
