"""FastAPI dependencies resolved from the dependency injection container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container

T = TypeVar("T")


def inject_provider(provider: Provider[T]) -> Callable[[], T]:
    """Create a FastAPI dependency that resolves a container provider per request."""

    def dependency() -> T:
        return provider()

    return dependency


get_api_handler = inject_provider(container.api_handler)
