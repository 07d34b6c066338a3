"""
Data Transfer Objects for the Star Wars application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetResourceQuery:
    """Input DTO for fetching a single resource.

    Attributes:
        raw_id: The identifier exactly as it appeared in the path.
    """

    raw_id: str
