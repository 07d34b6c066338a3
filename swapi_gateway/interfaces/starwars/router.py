"""
FastAPI routers for the Star Wars bounded context.

Starships and people share one route builder. Each kind gets:
    GET /{kind}/{resource_id}  -> single resource
    GET /{kind} and /{kind}/   -> collection envelope

Routes delegate to use cases. Error mapping is handled by the
centralized error handlers.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from swapi_gateway.application.starwars.dtos import GetResourceQuery
from swapi_gateway.application.starwars.get_resource import GetResourceUseCase
from swapi_gateway.application.starwars.list_resources import ListResourcesUseCase
from swapi_gateway.domain.starwars.entities import ResourceKind
from swapi_gateway.interfaces.starwars.dependencies import (
    get_resource_use_case_provider,
    list_resources_use_case_provider,
)
from swapi_gateway.interfaces.starwars.mappers import (
    person_to_response,
    starship_to_response,
)
from swapi_gateway.interfaces.starwars.schemas import (
    ErrorResponse,
    PersonListResponse,
    PersonResponse,
    StarshipListResponse,
    StarshipResponse,
)

ITEM_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Identifier is not a positive integer"},
    404: {"model": ErrorResponse, "description": "Upstream has no such resource"},
    500: {"model": ErrorResponse, "description": "Upstream failure"},
}

LIST_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Upstream has no such collection"},
    500: {"model": ErrorResponse, "description": "Upstream failure"},
}


def build_resource_router(
    kind: ResourceKind,
    item_model: type[BaseModel],
    list_model: type[BaseModel],
    to_response: Callable[[Any], BaseModel],
) -> APIRouter:
    """Build the by-id and collection routes for one resource kind.

    Args:
        kind: The upstream collection served by these routes.
        item_model: Response schema for a single resource.
        list_model: Response schema for the {count, results} envelope.
        to_response: Maps a domain entity onto ``item_model``.

    Returns:
        A router mounted at ``/{kind.path}``.
    """
    router = APIRouter(prefix=f"/{kind.path}", tags=[kind.path])
    get_use_case = get_resource_use_case_provider(kind)
    list_use_case = list_resources_use_case_provider(kind)

    def list_resources(
        use_case: ListResourcesUseCase = Depends(list_use_case),
    ) -> BaseModel:
        """Fetch the upstream collection envelope for this kind."""
        page = use_case.execute()
        return list_model(
            count=page.count,
            results=[to_response(resource) for resource in page.results],
        )

    router.add_api_route(
        "",
        list_resources,
        methods=["GET"],
        response_model=list_model,
        responses=LIST_ERROR_RESPONSES,
        summary=f"List {kind.path}",
        operation_id=f"list_{kind.path}",
    )
    router.add_api_route(
        "/",
        list_resources,
        methods=["GET"],
        response_model=list_model,
        include_in_schema=False,
    )

    @router.get(
        "/{resource_id}",
        response_model=item_model,
        responses=ITEM_ERROR_RESPONSES,
        summary=f"Get one {kind.singular} by id",
        operation_id=f"get_{kind.path}_by_id",
    )
    def get_resource(
        resource_id: str,
        use_case: GetResourceUseCase = Depends(get_use_case),
    ) -> BaseModel:
        """Fetch one resource. The id is validated before any upstream call."""
        resource = use_case.execute(GetResourceQuery(raw_id=resource_id))
        return to_response(resource)

    return router


router = APIRouter()
router.include_router(
    build_resource_router(
        ResourceKind.STARSHIPS,
        StarshipResponse,
        StarshipListResponse,
        starship_to_response,
    )
)
router.include_router(
    build_resource_router(
        ResourceKind.PEOPLE,
        PersonResponse,
        PersonListResponse,
        person_to_response,
    )
)
