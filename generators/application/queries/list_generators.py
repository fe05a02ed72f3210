"""
ListGeneratorsQuery.

Query to list every generator.
"""
from dataclasses import dataclass


@dataclass
class ListGeneratorsQuery:
    """Query to list all generators."""

    pass
