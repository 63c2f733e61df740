"""Parsing helpers shared by the record model and the console shell."""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from .exceptions import InputFormatError, ParseError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

PERIODS = ("day", "week", "month")


def quantize_two_decimals(amount: Decimal) -> Decimal:
    """Round the amount to two decimal places using HALF_UP rounding.

    Precision is widened to fit every integer digit, so large totals round
    instead of overflowing the default 28-digit context.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _to_decimal(raw: str) -> Decimal:
    # Decimal() accepts "1_000"; stored and typed amounts must not.
    if "_" in raw:
        raise InvalidOperation(raw)
    amount = Decimal(raw)
    if not amount.is_finite():
        raise InvalidOperation(raw)
    return amount


def parse_decimal(raw: str) -> Decimal:
    """Parse a stored amount segment, raising ParseError when it is not a number."""
    try:
        return _to_decimal(raw)
    except InvalidOperation as exc:
        raise ParseError(f"Invalid amount '{raw}'") from exc


def parse_amount(raw: object) -> Decimal:
    """Convert typed input to a Decimal.

    Only the numeric form is checked: zero and negative amounts are accepted.
    """
    try:
        return _to_decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise InputFormatError("Amount must be a numeric value") from exc


def parse_iso_date(raw: str) -> date:
    if not DATE_PATTERN.fullmatch(raw):
        raise ParseError(f"Invalid date '{raw}'. Expected format YYYY-MM-DD.")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ParseError(f"Invalid date '{raw}'. Expected format YYYY-MM-DD.") from exc


def normalize_period(raw: str) -> str:
    return raw.lower()
