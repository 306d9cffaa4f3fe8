"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by the server
layer to convert into appropriate HTTP responses.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class StorageError(CoreError):
    """Raised when the record store cannot complete an operation.

    Covers connectivity loss, constraint violations and query failures.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage operation failed ({operation}){detail}")


class StreamLagError(CoreError):
    """Raised when a subscriber fell behind and events were dropped."""

    def __init__(self, missed: int):
        self.missed = missed
        super().__init__(f"Subscriber lagged behind, {missed} event(s) dropped")
