"""
Use case: Retrieve a single Star Wars resource by identifier.

Input: GetResourceQuery (raw path identifier)
Output: Starship or Person entity
Side effects: One upstream call when the identifier is valid.
Failure cases: BadRequestError, ResourceNotFoundError, InternalError.
"""

import logging

from swapi_gateway.application.starwars.dtos import GetResourceQuery
from swapi_gateway.domain.starwars.entities import Resource, ResourceKind
from swapi_gateway.domain.starwars.identifiers import parse_resource_id
from swapi_gateway.domain.starwars.ports import StarWarsClientPort

logger = logging.getLogger(__name__)


class GetResourceUseCase:
    """Validates the identifier, then fetches one resource of a fixed kind.

    An invalid identifier fails before the client port is touched.
    """

    def __init__(self, client: StarWarsClientPort, kind: ResourceKind) -> None:
        self._client = client
        self._kind = kind

    def execute(self, query: GetResourceQuery) -> Resource:
        """Run the retrieval use case.

        Args:
            query: The request carrying the raw identifier.

        Returns:
            The resource entity returned by upstream.
        """
        resource_id = parse_resource_id(query.raw_id)

        logger.info("Fetching %s id=%d", self._kind.singular, resource_id)
        return self._client.fetch_by_id(self._kind, resource_id)
