"""
Django implementation of GeneratorRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import logging
from typing import List

from asgiref.sync import sync_to_async
from django.db import DatabaseError, transaction

from core.domain.exceptions import GeneratorNotFoundError, GeneratorPersistenceError
from core.domain.value_objects import ActorId
from generators.domain.generator import Generator, GeneratorChanges, GeneratorDraft
from generators.infrastructure.models import Generator as GeneratorModel
from generators.ports.generator_repository import GeneratorRepository

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = (
    "name",
    "charset",
    "chunks",
    "chunk_length",
    "times_activated_max",
    "separator",
    "prefix",
    "suffix",
    "expires_in",
    "updated_at",
    "updated_by",
)


def _not_found(generator_id) -> GeneratorNotFoundError:
    return GeneratorNotFoundError(f"Generator with ID: {generator_id} could not be found.")


class DjangoGeneratorRepository(GeneratorRepository):
    """
    Django ORM implementation of GeneratorRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Maps database failures to GeneratorPersistenceError
    """

    def _to_domain(self, model: GeneratorModel) -> Generator:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Generator model

        Returns:
            Generator domain entity
        """
        return Generator(
            id=model.id,
            name=model.name,
            charset=model.charset,
            chunks=model.chunks,
            chunk_length=model.chunk_length,
            times_activated_max=model.times_activated_max,
            separator=model.separator,
            prefix=model.prefix,
            suffix=model.suffix,
            expires_in=model.expires_in,
            created_at=model.created_at,
            created_by=model.created_by,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )

    def _to_model(self, generator: Generator) -> GeneratorModel:
        """
        Convert a new domain entity to an unsaved Django model.

        Args:
            generator: Generator domain entity

        Returns:
            Django Generator model
        """
        return GeneratorModel(
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

    @sync_to_async
    def find_all(self) -> List[Generator]:
        """
        List all generators.

        Returns:
            List of Generator entities ordered by id

        Raises:
            GeneratorPersistenceError: If the generators cannot be read
        """
        try:
            # pylint: disable=no-member
            models = list(GeneratorModel.objects.order_by("id"))
        except DatabaseError as e:
            logger.error("Failed to list generators: %s", e)
            raise GeneratorPersistenceError("The Generators could not be retrieved.")
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def find(self, generator_id: int) -> Generator:
        """
        Find a generator by ID.

        Args:
            generator_id: Generator primary key

        Returns:
            Generator entity

        Raises:
            GeneratorNotFoundError: If no generator has this id
            GeneratorPersistenceError: If the generator cannot be read
        """
        if generator_id <= 0:
            raise _not_found(generator_id)
        try:
            # pylint: disable=no-member
            model = GeneratorModel.objects.get(id=generator_id)
        except GeneratorModel.DoesNotExist:  # pylint: disable=no-member
            raise _not_found(generator_id)
        except DatabaseError as e:
            logger.error("Failed to read generator %s: %s", generator_id, e)
            raise GeneratorPersistenceError("The Generator could not be retrieved.")
        return self._to_domain(model)

    @sync_to_async
    def insert(self, draft: GeneratorDraft, actor: ActorId) -> Generator:
        """
        Validate and persist a new generator.

        Args:
            draft: Create input
            actor: User creating the generator

        Returns:
            Persisted generator

        Raises:
            GeneratorValidationError: If a required field is missing
            GeneratorPersistenceError: If the insert fails
        """
        generator = Generator.create(draft, actor)
        model = self._to_model(generator)
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except (DatabaseError, OverflowError) as e:
            logger.error("Failed to insert generator %r: %s", generator.name, e)
            raise GeneratorPersistenceError("The Generator could not be added to the database.")
        return self._to_domain(model)

    @sync_to_async
    def update(self, generator_id: int, changes: GeneratorChanges, actor: ActorId) -> Generator:
        """
        Merge changes into a stored generator.

        Args:
            generator_id: Generator primary key
            changes: Supplied fields
            actor: User performing the update

        Returns:
            Updated generator as re-read from the store

        Raises:
            GeneratorNotFoundError: If no generator has this id
            GeneratorValidationError: If the merged generator is invalid
            GeneratorPersistenceError: If the update fails
        """
        if generator_id <= 0:
            raise _not_found(generator_id)
        try:
            with transaction.atomic():
                try:
                    # pylint: disable=no-member
                    model = GeneratorModel.objects.get(id=generator_id)
                except GeneratorModel.DoesNotExist:  # pylint: disable=no-member
                    raise _not_found(generator_id)

                updated = self._to_domain(model).apply(changes, actor)
                for field_name in WRITABLE_FIELDS:
                    setattr(model, field_name, getattr(updated, field_name))
                model.save(update_fields=list(WRITABLE_FIELDS))
            model.refresh_from_db()
        except (DatabaseError, OverflowError) as e:
            logger.error("Failed to update generator %s: %s", generator_id, e)
            raise GeneratorPersistenceError("The generator could not be updated.")
        return self._to_domain(model)
