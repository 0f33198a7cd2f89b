"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from cats.config import Settings
from cats.util.di import PROVIDERS, get_provider


def create_container(settings: Settings) -> AsyncContainer:
    """Build the container with every component's production provider.

    Args:
        settings: Process-wide settings, resolvable as ``Settings`` at APP scope

    Returns:
        Container ready to hand to ``setup_di``
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider(), context={Settings: settings})


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let ``FromDishka`` route parameters resolve from ``container``."""
    setup_dishka(container, app)
