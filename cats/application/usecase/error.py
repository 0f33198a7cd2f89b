"""Use case errors.

These are returned on the ``Left`` side of a use case result, not raised.
"""

from typing import Any


class UseCaseError(Exception):
    """Base for named, user-facing failure reasons."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def type(self) -> str:
        return type(self).__name__

    def to_primitives(self) -> dict[str, Any]:
        """Serializable view: type, description and any extra attributes."""
        data = {
            key: value
            for key, value in vars(self).items()
            if key not in ("message",) and not key.startswith("_")
        }
        return {"type": self.type, "description": self.message, "data": data}


class ValidationError(UseCaseError):
    """Input or entity invariant violation."""

    pass


class NotFoundError(UseCaseError):
    """Requested identity has no corresponding entity."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
