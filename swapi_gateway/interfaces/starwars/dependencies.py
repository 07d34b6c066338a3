"""
Dependency injection for the Star Wars bounded context.

The upstream client lives on ``app.state``; it is put there by
``create_app`` or by the application lifespan. Use cases are built
per request around it via constructor injection.
"""

from typing import Callable

from fastapi import Depends, Request

from swapi_gateway.application.starwars.get_resource import GetResourceUseCase
from swapi_gateway.application.starwars.list_resources import ListResourcesUseCase
from swapi_gateway.domain.starwars.entities import ResourceKind
from swapi_gateway.domain.starwars.ports import StarWarsClientPort


def get_swapi_client(request: Request) -> StarWarsClientPort:
    """Return the upstream client installed on the running application."""
    return request.app.state.swapi_client


def get_resource_use_case_provider(
    kind: ResourceKind,
) -> Callable[..., GetResourceUseCase]:
    """Build a dependency yielding GetResourceUseCase bound to ``kind``."""

    def provide(
        client: StarWarsClientPort = Depends(get_swapi_client),
    ) -> GetResourceUseCase:
        return GetResourceUseCase(client=client, kind=kind)

    return provide


def list_resources_use_case_provider(
    kind: ResourceKind,
) -> Callable[..., ListResourcesUseCase]:
    """Build a dependency yielding ListResourcesUseCase bound to ``kind``."""

    def provide(
        client: StarWarsClientPort = Depends(get_swapi_client),
    ) -> ListResourcesUseCase:
        return ListResourcesUseCase(client=client, kind=kind)

    return provide
