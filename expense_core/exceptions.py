"""Domain-specific exceptions for the expense tracker core."""

class ParseError(ValueError):
    """Raised when a stored expense line cannot be turned back into a record."""


class InputFormatError(ValueError):
    """Raised when interactive input cannot be converted to the expected type."""


class PersistenceError(IOError):
    """Raised when the backing file cannot be read or written."""
