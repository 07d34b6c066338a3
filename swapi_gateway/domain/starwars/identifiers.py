"""
Resource identifier parsing.

Path segments arrive as arbitrary strings. Only plain positive
decimal integers are accepted.
"""

import re

from swapi_gateway.domain.starwars.errors import BadRequestError

_DIGITS = re.compile(r"[0-9]+")

INVALID_ID_REASON = "invalid id"


def parse_resource_id(raw: str) -> int:
    """Parse a path segment into a resource identifier.

    Args:
        raw: The raw path segment.

    Returns:
        The identifier as a positive integer.

    Raises:
        BadRequestError: If the segment is empty, signed, non-numeric, zero
            or too long to convert.
    """
    if not _DIGITS.fullmatch(raw):
        raise BadRequestError(INVALID_ID_REASON)
    try:
        resource_id = int(raw)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise BadRequestError(INVALID_ID_REASON) from None
    if resource_id < 1:
        raise BadRequestError(INVALID_ID_REASON)
    return resource_id
