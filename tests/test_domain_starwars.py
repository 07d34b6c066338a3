"""
Tests for the Star Wars domain layer.

Tests entities, identifier parsing and error classes in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError

import pytest

from swapi_gateway.domain.starwars.entities import ResourceKind, ResourcePage
from swapi_gateway.domain.starwars.errors import (
    BadRequestError,
    ErrorKind,
    InternalError,
    ResourceNotFoundError,
    StarWarsDomainError,
)
from swapi_gateway.domain.starwars.identifiers import parse_resource_id
from tests.factories import make_person, make_starship


class TestParseResourceId:
    """Tests for parse_resource_id."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("9", 9), ("42", 42), ("007", 7)])
    def test_plain_digits_are_accepted(self, raw: str, expected: int) -> None:
        """Decimal digit strings parse to their integer value."""
        assert parse_resource_id(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", ":id", "-1", "+1", " 1", "1 ", "1_000", "1.0", "0", "000", "²", "1" * 5000],
    )
    def test_everything_else_is_a_bad_request(self, raw: str) -> None:
        """Signed, padded, fractional, zero, overlong or non-ASCII digits are rejected."""
        with pytest.raises(BadRequestError) as exc_info:
            parse_resource_id(raw)

        assert exc_info.value.message == "Bad request. Reason: invalid id"
        assert exc_info.value.kind is ErrorKind.BAD_REQUEST


class TestResourceKind:
    """Tests for ResourceKind labels."""

    def test_starship_labels(self) -> None:
        """Starships use starship/starships."""
        assert ResourceKind.STARSHIPS.path == "starships"
        assert ResourceKind.STARSHIPS.singular == "starship"
        assert ResourceKind.STARSHIPS.plural == "starships"

    def test_people_labels(self) -> None:
        """People use people/peoples."""
        assert ResourceKind.PEOPLE.path == "people"
        assert ResourceKind.PEOPLE.singular == "people"
        assert ResourceKind.PEOPLE.plural == "peoples"


class TestEntities:
    """Tests for entity immutability and defaults."""

    def test_starship_is_frozen(self) -> None:
        """Starship fields cannot be reassigned."""
        starship = make_starship()
        with pytest.raises(FrozenInstanceError):
            starship.name = "Millennium Falcon"

    def test_absent_lists_default_to_none(self) -> None:
        """Lists not supplied by upstream stay None."""
        assert make_starship().pilots is None
        assert make_person(species=None).species is None

    def test_page_keeps_count_and_results_independent(self) -> None:
        """ResourcePage does not reconcile count with results."""
        page = ResourcePage(count=82, results=(make_person(),))

        assert page.count == 82
        assert len(page.results) == 1


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_all_errors_share_the_base(self) -> None:
        """Every domain error is a StarWarsDomainError."""
        for exc in (BadRequestError("x"), ResourceNotFoundError("starship", "1"), InternalError()):
            assert isinstance(exc, StarWarsDomainError)

    def test_not_found_with_id(self) -> None:
        """By-id absence names the resource and the id."""
        exc = ResourceNotFoundError("starship", "9")

        assert exc.kind is ErrorKind.NOT_FOUND
        assert exc.message == "resource: starship with id: 9 not found"

    def test_not_found_without_id(self) -> None:
        """Collection absence names only the resource."""
        exc = ResourceNotFoundError("starships")

        assert exc.message == "resource: starships not found"
        assert exc.resource_id == ""

    def test_internal_message_is_fixed(self) -> None:
        """The cause is kept aside and never enters the message."""
        exc = InternalError("dns failure")

        assert exc.kind is ErrorKind.INTERNAL
        assert exc.message == "Internal server error."
        assert exc.cause == "dns failure"

    def test_kind_values_are_public_types(self) -> None:
        """ErrorKind values are the strings clients see."""
        assert [k.value for k in ErrorKind] == [
            "BAD_REQUEST",
            "NOT_FOUND",
            "INTERNAL_SERVER_ERROR",
        ]
