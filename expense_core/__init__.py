"""Core business logic package for the daily expense tracker."""

from .models import Expense
from .services import ExpenseStore
from .storage import LineStorage, MemoryStorage, TextFileStorage
from .exceptions import InputFormatError, ParseError, PersistenceError

__all__ = [
    "Expense",
    "ExpenseStore",
    "LineStorage",
    "MemoryStorage",
    "TextFileStorage",
    "InputFormatError",
    "ParseError",
    "PersistenceError",
]
