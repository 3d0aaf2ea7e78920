"""Exception types shared across forgefit."""


class ForgefitError(Exception):
    """Base class for forgefit errors."""


class ValidationError(ForgefitError, ValueError):
    """An action was rejected because its input or the current state is invalid.

    Raised before any state is changed, so callers can report the message
    and carry on.
    """


class StorageError(ForgefitError):
    """A read or write against the key-value store failed."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage {operation} failed for '{key}'{detail}")
