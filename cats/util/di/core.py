"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context

from cats.config import Settings
from cats.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are built once at process start and handed to the container as
    context, never read from a module-level singleton.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)
