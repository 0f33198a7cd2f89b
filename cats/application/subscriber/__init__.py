"""Domain event subscribers."""

from .cat_activity import CatActivityLogger

__all__ = ["CatActivityLogger"]
