"""
GetGeneratorQuery.

Query to fetch a single generator.
"""
from dataclasses import dataclass


@dataclass
class GetGeneratorQuery:
    """Query to get a generator by id."""

    generator_id: int
