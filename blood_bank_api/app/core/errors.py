"""
Error types raised by the service layer.

Only two kinds of failure exist.  ``EntryValidationError`` signals a
rejected input and carries the exact message shown to the client;
``EntryNotFoundError`` signals that no entry (or no query match)
exists.  The HTTP layer maps them to 400 and 404 respectively.
"""


class EntryValidationError(ValueError):
    """A submitted entry or query parameter violated a rule."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EntryNotFoundError(LookupError):
    """No entry exists for the given id, or a query matched nothing."""

    def __init__(self, message: str = "Entry not found.") -> None:
        super().__init__(message)
        self.message = message
