"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that ship a production and a test implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of every provider in the container.

    A provider class that has subclasses is a swappable component. It names
    itself in ``__mock_component__`` and each subclass sets ``__is_mock__``
    to say whether it is the test double.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())
