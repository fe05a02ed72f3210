"""
Pytest configuration and shared fixtures.
"""

import dataclasses
from typing import Any, Dict, List

import pytest
from asgiref.sync import async_to_sync
from django.conf import settings

from core.domain.exceptions import GeneratorNotFoundError
from core.domain.route_gate import with_route_flags
from core.domain.value_objects import ActorId, RouteCode
from core.infrastructure.repositories.django_settings_repository import (
    DjangoSettingsRepository,
)
from core.ports.settings_repository import SettingsRepository
from generators.domain.generator import Generator, GeneratorChanges, GeneratorDraft
from generators.infrastructure.repositories.django_generator_repository import (
    DjangoGeneratorRepository,
)
from generators.ports.generator_repository import GeneratorRepository

ALL_ROUTES = [route.value for route in RouteCode]


class InMemoryGeneratorRepository(GeneratorRepository):
    """GeneratorRepository keeping generators in a dict, for handler tests."""

    def __init__(self):
        self.generators: Dict[int, Generator] = {}
        self.next_id = 1

    async def find_all(self) -> List[Generator]:
        return [self.generators[key] for key in sorted(self.generators)]

    async def find(self, generator_id: int) -> Generator:
        if generator_id not in self.generators:
            raise GeneratorNotFoundError(f"Generator with ID: {generator_id} could not be found.")
        return self.generators[generator_id]

    async def insert(self, draft: GeneratorDraft, actor: ActorId) -> Generator:
        generator = dataclasses.replace(Generator.create(draft, actor), id=self.next_id)
        self.generators[generator.id] = generator
        self.next_id += 1
        return generator

    async def update(
        self, generator_id: int, changes: GeneratorChanges, actor: ActorId
    ) -> Generator:
        generator = (await self.find(generator_id)).apply(changes, actor)
        self.generators[generator_id] = generator
        return generator


class StaticSettingsRepository(SettingsRepository):
    """SettingsRepository returning fixed settings."""

    def __init__(self, value: Dict[str, Any]):
        self.value = value

    async def load(self, name: str) -> Dict[str, Any]:
        return dict(self.value)

    async def store(self, name: str, value: Dict[str, Any]) -> Dict[str, Any]:
        self.value = dict(value)
        return dict(self.value)


@pytest.fixture
def generator_repository():
    """Fixture for GeneratorRepository."""
    return DjangoGeneratorRepository()


@pytest.fixture
def settings_repository():
    """Fixture for SettingsRepository."""
    return DjangoSettingsRepository()


@pytest.fixture
def memory_repository():
    """Fixture for an in-memory GeneratorRepository."""
    return InMemoryGeneratorRepository()


@pytest.fixture
def actor():
    """Fixture for an authenticated actor."""
    return ActorId(7)


@pytest.fixture
def basic_draft():
    """Fixture for the "Basic" generator create input."""
    return GeneratorDraft(
        name="Basic",
        charset="ABCDEFGH0123456789",
        chunks=4,
        chunk_length=4,
    )


@pytest.fixture
def sample_generator(basic_draft, actor):
    """Fixture for a sample, not yet persisted Generator entity."""
    return Generator.create(basic_draft, actor)


@pytest.fixture
def db_generator(db, generator_repository, basic_draft, actor):
    """Fixture for a Generator saved in database."""
    return async_to_sync(generator_repository.insert)(basic_draft, actor)


@pytest.fixture
def enable_routes(db, settings_repository):
    """
    Store general settings with the given route codes switched on.

    Returns a function; call it with no arguments to enable every route.
    """

    def enable(*codes):
        general = async_to_sync(settings_repository.load)(settings.API_SETTINGS_OPTION)
        general = with_route_flags(general, codes or ALL_ROUTES, enabled=True)
        return async_to_sync(settings_repository.store)(settings.API_SETTINGS_OPTION, general)

    return enable


@pytest.fixture
def all_routes_enabled(enable_routes):
    """Fixture enabling every API route."""
    return enable_routes()


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def static_settings_repository():
    """Fixture for a SettingsRepository with every route enabled, without the database."""
    return StaticSettingsRepository(with_route_flags({}, ALL_ROUTES, enabled=True))
