"""
Parsers from raw SWAPI JSON payloads to domain entities.

Upstream keys are renamed onto entity fields here. Missing string
fields become "" and missing list fields become None, mirroring how
upstream represents empty values. Unknown keys are ignored.
"""

from typing import Any, Callable, Optional

from swapi_gateway.domain.starwars.entities import (
    Person,
    Resource,
    ResourceKind,
    ResourcePage,
    Starship,
)


class PayloadError(ValueError):
    """Raised when an upstream payload does not have the expected shape."""


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"Field {key!r} must be a string")
    return value


def _links(payload: dict[str, Any], key: str) -> Optional[tuple[str, ...]]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PayloadError(f"Field {key!r} must be a list of strings")
    return tuple(value)


def parse_starship(payload: Any) -> Starship:
    """Build a Starship from a SWAPI starship object."""
    if not isinstance(payload, dict):
        raise PayloadError("Starship payload must be an object")
    return Starship(
        name=_text(payload, "name"),
        model=_text(payload, "model"),
        manufacturer=_text(payload, "manufacturer"),
        cost_in_credits=_text(payload, "cost_in_credits"),
        length=_text(payload, "length"),
        max_atmosphering_speed=_text(payload, "max_atmosphering_speed"),
        crew=_text(payload, "crew"),
        passengers=_text(payload, "passengers"),
        cargo_capacity=_text(payload, "cargo_capacity"),
        consumables=_text(payload, "consumables"),
        hyperdrive_rating=_text(payload, "hyperdrive_rating"),
        mglt=_text(payload, "MGLT"),
        ship_class=_text(payload, "starship_class"),
        films=_links(payload, "films"),
        pilots=_links(payload, "pilots"),
    )


def parse_person(payload: Any) -> Person:
    """Build a Person from a SWAPI people object."""
    if not isinstance(payload, dict):
        raise PayloadError("Person payload must be an object")
    return Person(
        name=_text(payload, "name"),
        birth_year=_text(payload, "birth_year"),
        eye_color=_text(payload, "eye_color"),
        gender=_text(payload, "gender"),
        hair_color=_text(payload, "hair_color"),
        height=_text(payload, "height"),
        mass=_text(payload, "mass"),
        skin_color=_text(payload, "skin_color"),
        homeworld=_text(payload, "homeworld"),
        films=_links(payload, "films"),
        species=_links(payload, "species"),
        starships=_links(payload, "starships"),
    )


PARSERS: dict[ResourceKind, Callable[[Any], Resource]] = {
    ResourceKind.STARSHIPS: parse_starship,
    ResourceKind.PEOPLE: parse_person,
}


def parse_resource(kind: ResourceKind, payload: Any) -> Resource:
    """Build the entity matching ``kind`` from a single-object payload."""
    return PARSERS[kind](payload)


def parse_page(kind: ResourceKind, payload: Any) -> ResourcePage:
    """Build a ResourcePage from a SWAPI list payload.

    Only ``count`` and ``results`` are read. ``next``/``previous`` links
    are not followed.
    """
    if not isinstance(payload, dict):
        raise PayloadError("List payload must be an object")

    count = payload.get("count", 0)
    if isinstance(count, bool) or not isinstance(count, int):
        raise PayloadError("Field 'count' must be an integer")

    results = payload.get("results") or []
    if not isinstance(results, list):
        raise PayloadError("Field 'results' must be a list")

    return ResourcePage(
        count=count,
        results=tuple(parse_resource(kind, item) for item in results),
    )
