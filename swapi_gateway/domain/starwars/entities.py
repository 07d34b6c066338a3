"""
Domain entities for the Star Wars bounded context.

Entities are immutable records built from a single upstream response.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ResourceKind(Enum):
    """A SWAPI collection this gateway re-serves.

    The value is the upstream path segment.
    """

    STARSHIPS = "starships"
    PEOPLE = "people"

    @property
    def path(self) -> str:
        """Path segment under the upstream base URL and under /api/v1."""
        return self.value

    @property
    def singular(self) -> str:
        """Label used when a single resource is missing."""
        return _SINGULAR_LABELS[self]

    @property
    def plural(self) -> str:
        """Label used when the whole collection is missing."""
        return _PLURAL_LABELS[self]


_SINGULAR_LABELS = {
    ResourceKind.STARSHIPS: "starship",
    ResourceKind.PEOPLE: "people",
}

_PLURAL_LABELS = {
    ResourceKind.STARSHIPS: "starships",
    ResourceKind.PEOPLE: "peoples",
}


@dataclass(frozen=True)
class Starship:
    """A starship as reported by SWAPI.

    Physical properties stay strings: upstream mixes numbers with
    values such as "n/a" or "unknown".
    List fields hold URLs of related resources and are None when
    upstream omits them.
    """

    name: str
    model: str
    manufacturer: str
    cost_in_credits: str
    length: str
    max_atmosphering_speed: str
    crew: str
    passengers: str
    cargo_capacity: str
    consumables: str
    hyperdrive_rating: str
    mglt: str
    ship_class: str
    films: Optional[tuple[str, ...]] = None
    pilots: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class Person:
    """A character as reported by SWAPI."""

    name: str
    birth_year: str
    eye_color: str
    gender: str
    hair_color: str
    height: str
    mass: str
    skin_color: str
    homeworld: str
    films: Optional[tuple[str, ...]] = None
    species: Optional[tuple[str, ...]] = None
    starships: Optional[tuple[str, ...]] = None


Resource = Union[Starship, Person]


@dataclass(frozen=True)
class ResourcePage:
    """Collection envelope returned by upstream list endpoints.

    count and results come from upstream as-is. They are not
    required to agree with each other.
    """

    count: int
    results: tuple[Resource, ...] = ()
