"""Domain layer errors.

These are contract violations and infrastructure faults. Expected business
outcomes (validation failures, missing cats) travel through Result/Either
instead.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidOperationError(DomainError):
    """Raised when a domain primitive is used against its contract."""

    pass


class InvalidIdentifierError(DomainError):
    """Raised when an identifier is built from a malformed value."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r} (must be a non-empty string)")


class StorageError(DomainError):
    """Raised by repositories when the backing store fails."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage failure during {operation}: {reason}")
