"""Container wiring for the Devnovate API process."""

from collections.abc import AsyncIterator, Collection
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from devnovate.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Assemble a container from PROVIDERS.

    Concrete providers are always used as-is. Mockable components get their
    mock implementation when named in `mocked`, the production one otherwise.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Container that also carries the FastAPI request context

    Raises:
        ValueError: If `mocked` names a component no provider declares
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Production container: PostgreSQL storage and webhook notifications."""
    return build_container()


@asynccontextmanager
async def close_container_on_shutdown(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan that disposes APP-scoped resources such as the engine pool."""
    yield
    container: AsyncContainer = app.state.dishka_container
    await container.close()
    logfire.info("Container closed")


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so `FromDishka` parameters resolve per request."""
    setup_dishka(container, app)
