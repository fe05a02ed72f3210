"""
Generator DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from generators.domain.generator import Generator


@dataclass
class GeneratorDTO:
    """DTO for generator information, in response key order."""

    id: int
    name: str
    charset: str
    chunks: int
    chunk_length: int
    times_activated_max: Optional[int]
    separator: Optional[str]
    prefix: Optional[str]
    suffix: Optional[str]
    expires_in: Optional[int]
    created_at: datetime
    created_by: int
    updated_at: Optional[datetime]
    updated_by: Optional[int]

    @classmethod
    def from_entity(cls, generator: Generator) -> "GeneratorDTO":
        return cls(
            id=generator.id,
            name=generator.name,
            charset=generator.charset,
            chunks=generator.chunks,
            chunk_length=generator.chunk_length,
            times_activated_max=generator.times_activated_max,
            separator=generator.separator,
            prefix=generator.prefix,
            suffix=generator.suffix,
            expires_in=generator.expires_in,
            created_at=generator.created_at,
            created_by=generator.created_by,
            updated_at=generator.updated_at,
            updated_by=generator.updated_by,
        )
