"""
Use case: Retrieve the full collection of a Star Wars resource kind.

Input: None
Output: ResourcePage (count + results, upstream order)
Side effects: One upstream call.
Failure cases: ResourceNotFoundError, InternalError.
"""

import logging

from swapi_gateway.domain.starwars.entities import ResourceKind, ResourcePage
from swapi_gateway.domain.starwars.ports import StarWarsClientPort

logger = logging.getLogger(__name__)


class ListResourcesUseCase:
    """Fetches the upstream collection envelope for a fixed kind.

    Results are passed through without sorting, filtering or
    deduplication.
    """

    def __init__(self, client: StarWarsClientPort, kind: ResourceKind) -> None:
        self._client = client
        self._kind = kind

    def execute(self) -> ResourcePage:
        """Run the collection use case."""
        logger.info("Fetching %s collection", self._kind.plural)
        page = self._client.fetch_all(self._kind)
        logger.debug(
            "Upstream returned count=%d with %d results",
            page.count,
            len(page.results),
        )
        return page
