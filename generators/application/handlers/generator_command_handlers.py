"""
Generator command handlers.

Handlers for create and update generator commands.
"""
import logging

from core.domain.exceptions import GeneratorValidationError
from core.metrics import generators_created_total, generators_updated_total
from generators.application.commands.create_generator import CreateGeneratorCommand
from generators.application.commands.update_generator import UpdateGeneratorCommand
from generators.application.dto.generator_dto import GeneratorDTO
from generators.ports.generator_repository import GeneratorRepository

logger = logging.getLogger(__name__)


class CreateGeneratorHandler:
    """Handler for CreateGeneratorCommand."""

    def __init__(self, generator_repository: GeneratorRepository):
        """Initialize handler with repository."""
        self.generator_repository = generator_repository

    async def handle(self, command: CreateGeneratorCommand) -> GeneratorDTO:
        """
        Handle create generator command.

        Args:
            command: CreateGeneratorCommand

        Returns:
            GeneratorDTO of the stored generator

        Raises:
            GeneratorValidationError: If a required field is missing
            GeneratorPersistenceError: If the generator could not be stored
        """
        generator = await self.generator_repository.insert(command.draft, command.actor)
        generators_created_total.inc()
        logger.info(
            "Generator created",
            extra={"generator_id": generator.id, "actor_id": int(command.actor)},
        )
        return GeneratorDTO.from_entity(generator)


class UpdateGeneratorHandler:
    """Handler for UpdateGeneratorCommand."""

    def __init__(self, generator_repository: GeneratorRepository):
        """Initialize handler with repository."""
        self.generator_repository = generator_repository

    async def handle(self, command: UpdateGeneratorCommand) -> GeneratorDTO:
        """
        Handle update generator command.

        Args:
            command: UpdateGeneratorCommand

        Returns:
            GeneratorDTO of the updated generator

        Raises:
            GeneratorValidationError: If no fields were supplied
            GeneratorNotFoundError: If the generator does not exist
            GeneratorPersistenceError: If the update could not be stored
        """
        if command.changes.is_empty():
            raise GeneratorValidationError("No parameters were provided.")

        generator = await self.generator_repository.update(
            command.generator_id, command.changes, command.actor
        )
        generators_updated_total.inc()
        logger.info(
            "Generator updated",
            extra={
                "generator_id": generator.id,
                "actor_id": int(command.actor),
                "fields": sorted(command.changes.present()),
            },
        )
        return GeneratorDTO.from_entity(generator)
