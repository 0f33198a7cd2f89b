"""In-memory cat repository."""

from typing import Optional

import logfire

from cats.domain.model.cat import Cat
from cats.domain.repository.cat import CatRepository
from cats.domain.value import CatId


class InMemoryCatRepository(CatRepository):
    """In-memory implementation of CatRepository.

    Backed by a single dict keyed by the id string, so ``find_all`` returns
    cats in first-save order. Nothing here serializes concurrent callers: a
    find followed by a save in another coroutine is not atomic, and state is
    lost when the process exits.
    """

    def __init__(self) -> None:
        self._cats: dict[str, Cat] = {}

    async def save(self, cat: Cat) -> None:
        """Save or replace a cat."""
        self._cats[str(cat.id)] = cat
        logfire.debug("Cat stored", cat_id=str(cat.id), total=len(self._cats))

    async def find_by_id(self, cat_id: CatId) -> Optional[Cat]:
        """Find a cat by ID."""
        return self._cats.get(str(cat_id))

    async def find_all(self) -> list[Cat]:
        """Return all cats in insertion order."""
        return list(self._cats.values())

    async def delete(self, cat_id: CatId) -> None:
        """Delete a cat, ignoring unknown IDs."""
        self._cats.pop(str(cat_id), None)
