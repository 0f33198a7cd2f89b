"""In-memory repository implementations."""

from .cat import InMemoryCatRepository

__all__ = [
    "InMemoryCatRepository",
]
