"""
UpdateGeneratorCommand.

Command to change fields of an existing generator.
"""
from dataclasses import dataclass

from core.domain.value_objects import ActorId
from generators.domain.generator import GeneratorChanges


@dataclass
class UpdateGeneratorCommand:
    """Command to update a generator."""

    generator_id: int
    changes: GeneratorChanges
    actor: ActorId
