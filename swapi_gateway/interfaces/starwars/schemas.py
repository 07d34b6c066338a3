"""
Pydantic schemas for the Star Wars API responses.

These schemas define the public contract. Field order is the
serialized key order. List fields are nullable: an absent upstream
list is rendered as null, not [].
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    type: str = Field(..., description="Error kind, e.g. NOT_FOUND")
    message: str = Field(..., description="Human-readable reason")


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    upstream: str = Field(..., description="Configured SWAPI base URL")


class StarshipResponse(BaseModel):
    """Public representation of a starship.

    MGLT keeps its upstream spelling on the wire.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    model: str
    starship_class: str
    manufacturer: str
    cost_in_credits: str
    length: str
    crew: str
    passengers: str
    max_atmosphering_speed: str
    hyperdrive_rating: str
    mglt: str = Field(..., alias="MGLT", description="Maximum number of megalights per hour")
    cargo_capacity: str
    consumables: str
    films: Optional[list[str]] = None
    pilots: Optional[list[str]] = None


class StarshipListResponse(BaseModel):
    """Collection envelope for starships."""

    count: int
    results: list[StarshipResponse]


class PersonResponse(BaseModel):
    """Public representation of a character."""

    name: str
    birth_year: str
    eye_color: str
    gender: str
    hair_color: str
    height: str
    mass: str
    skin_color: str
    homeworld: str
    films: Optional[list[str]] = None
    species: Optional[list[str]] = None
    starships: Optional[list[str]] = None


class PersonListResponse(BaseModel):
    """Collection envelope for people."""

    count: int
    results: list[PersonResponse]
