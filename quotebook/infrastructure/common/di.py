"""Bridge between FastAPI dependencies and the application container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from quotebook.core import Container, container
from quotebook.database import DatabaseSession

UseCase = TypeVar("UseCase")


def _provider_name(provider: Provider[UseCase]) -> str:
    for name, candidate in container.providers.items():
        if candidate is provider:
            return name
    raise ValueError(f"{provider!r} is not registered on the application container")


def inject_use_case(provider: Provider[UseCase]) -> Callable[[DatabaseSession], UseCase]:
    """
    Wrap a container provider as a FastAPI dependency.

    Each request gets its own container bound to its own session, so
    concurrent requests in the threadpool never see each other's session.
    """
    name = _provider_name(provider)

    def resolve(db: DatabaseSession) -> UseCase:
        request_container = Container(db=db)
        use_case: UseCase = getattr(request_container, name)()
        return use_case

    return resolve
