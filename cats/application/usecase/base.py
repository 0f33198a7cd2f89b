"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

Req = TypeVar("Req")
Res = TypeVar("Res")


class BaseUseCase(ABC, Generic[Req, Res]):
    """Base use case for orchestrating domain objects and repositories.

    Expected failures come back through the response (an ``Either``);
    only unexpected infrastructure faults are raised.
    """

    @abstractmethod
    async def execute(self, request: Req) -> Res:
        pass
