"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hunt.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables when first resolved.

    Returns:
        Container with the production implementation of every component
    """
    providers = [base.implementation(use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
