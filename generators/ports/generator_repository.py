"""
Generator repository port (interface).

This defines the contract for generator persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from core.domain.value_objects import ActorId
from generators.domain.generator import Generator, GeneratorChanges, GeneratorDraft


class GeneratorRepository(ABC):
    """
    Abstract repository for Generator entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Validation is delegated to the Generator entity.
    """

    @abstractmethod
    async def find_all(self) -> List[Generator]:
        """
        List all generators, ordered by id ascending.

        Returns:
            List of Generator entities (empty if none exist)
        """
        pass

    @abstractmethod
    async def find(self, generator_id: int) -> Generator:
        """
        Find a generator by ID.

        Args:
            generator_id: Generator primary key

        Returns:
            Generator entity

        Raises:
            GeneratorNotFoundError: If the id is not positive or does not exist
        """
        pass

    @abstractmethod
    async def insert(self, draft: GeneratorDraft, actor: ActorId) -> Generator:
        """
        Validate and persist a new generator.

        Args:
            draft: Create input
            actor: User creating the generator

        Returns:
            Persisted generator with its assigned id

        Raises:
            GeneratorValidationError: If a required field is missing (nothing is stored)
            GeneratorPersistenceError: If the store fails
        """
        pass

    @abstractmethod
    async def update(
        self, generator_id: int, changes: GeneratorChanges, actor: ActorId
    ) -> Generator:
        """
        Merge changes into a stored generator.

        Args:
            generator_id: Generator primary key
            changes: Supplied fields
            actor: User performing the update

        Returns:
            Updated generator

        Raises:
            GeneratorNotFoundError: If the id does not resolve
            GeneratorValidationError: If the merged generator is invalid
            GeneratorPersistenceError: If the store fails
        """
        pass
