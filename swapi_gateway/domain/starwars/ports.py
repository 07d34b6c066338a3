"""
Port interfaces (ABCs) for the Star Wars bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from swapi_gateway.domain.starwars.entities import Resource, ResourceKind, ResourcePage


class StarWarsClientPort(ABC):
    """Port for fetching resources from the upstream data source.

    Implementations raise StarWarsDomainError subclasses on failure:
    ResourceNotFoundError when upstream reports absence, InternalError
    for everything else. They never retry.
    """

    @abstractmethod
    def fetch_by_id(self, kind: ResourceKind, resource_id: int) -> Resource:
        """Return a single resource of the given kind."""
        raise NotImplementedError

    @abstractmethod
    def fetch_all(self, kind: ResourceKind) -> ResourcePage:
        """Return the upstream collection envelope for the given kind."""
        raise NotImplementedError
