"""Entity -> response schema mapping for the Star Wars routes."""

from typing import Optional

from swapi_gateway.domain.starwars.entities import Person, Starship
from swapi_gateway.interfaces.starwars.schemas import PersonResponse, StarshipResponse


def _links(values: Optional[tuple[str, ...]]) -> Optional[list[str]]:
    return None if values is None else list(values)


def starship_to_response(starship: Starship) -> StarshipResponse:
    """Map a Starship entity onto the public schema."""
    return StarshipResponse(
        name=starship.name,
        model=starship.model,
        starship_class=starship.ship_class,
        manufacturer=starship.manufacturer,
        cost_in_credits=starship.cost_in_credits,
        length=starship.length,
        crew=starship.crew,
        passengers=starship.passengers,
        max_atmosphering_speed=starship.max_atmosphering_speed,
        hyperdrive_rating=starship.hyperdrive_rating,
        mglt=starship.mglt,
        cargo_capacity=starship.cargo_capacity,
        consumables=starship.consumables,
        films=_links(starship.films),
        pilots=_links(starship.pilots),
    )


def person_to_response(person: Person) -> PersonResponse:
    """Map a Person entity onto the public schema."""
    return PersonResponse(
        name=person.name,
        birth_year=person.birth_year,
        eye_color=person.eye_color,
        gender=person.gender,
        hair_color=person.hair_color,
        height=person.height,
        mass=person.mass,
        skin_color=person.skin_color,
        homeworld=person.homeworld,
        films=_links(person.films),
        species=_links(person.species),
        starships=_links(person.starships),
    )
