"""
CreateGeneratorCommand.

Command to add a new generator.
"""
from dataclasses import dataclass

from core.domain.value_objects import ActorId
from generators.domain.generator import GeneratorDraft


@dataclass
class CreateGeneratorCommand:
    """Command to create a generator from coerced request values."""

    draft: GeneratorDraft
    actor: ActorId
