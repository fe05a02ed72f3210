"""
Generator query handlers.

Handlers for listing generators and fetching a single generator.
"""
from typing import List

from core.domain.exceptions import GeneratorNotFoundError
from generators.application.dto.generator_dto import GeneratorDTO
from generators.application.queries.get_generator import GetGeneratorQuery
from generators.application.queries.list_generators import ListGeneratorsQuery
from generators.ports.generator_repository import GeneratorRepository


class ListGeneratorsHandler:
    """Handler for ListGeneratorsQuery."""

    def __init__(self, generator_repository: GeneratorRepository):
        """Initialize handler with repository."""
        self.generator_repository = generator_repository

    async def handle(self, query: ListGeneratorsQuery) -> List[GeneratorDTO]:
        """
        Handle list generators query.

        Args:
            query: ListGeneratorsQuery

        Returns:
            List of GeneratorDTO ordered by id

        Raises:
            GeneratorNotFoundError: If no generators exist
        """
        generators = await self.generator_repository.find_all()
        if not generators:
            raise GeneratorNotFoundError("No Generators available")
        return [GeneratorDTO.from_entity(generator) for generator in generators]


class GetGeneratorHandler:
    """Handler for GetGeneratorQuery."""

    def __init__(self, generator_repository: GeneratorRepository):
        """Initialize handler with repository."""
        self.generator_repository = generator_repository

    async def handle(self, query: GetGeneratorQuery) -> GeneratorDTO:
        """
        Handle get generator query.

        Raises:
            GeneratorNotFoundError: If the generator does not exist
        """
        generator = await self.generator_repository.find(query.generator_id)
        return GeneratorDTO.from_entity(generator)
