"""Production container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from satya.config import Settings
from satya.util.di import resolve_providers


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the container with every production implementation.

    Args:
        settings: Settings to serve (read from the environment if omitted)
    """
    providers = [provider() for provider in resolve_providers()]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let routes resolve ``FromDishka[...]`` parameters from ``container``."""
    setup_dishka(container, app)
