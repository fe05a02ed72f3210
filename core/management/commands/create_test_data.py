"""
Django management command to create test data for development and testing.

Creates:
- A superuser (admin/admin)
- A sample "Basic" generator
- General settings with every API route enabled
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from core.domain.route_gate import with_route_flags
from core.domain.value_objects import ActorId, RouteCode
from core.infrastructure.repositories.django_settings_repository import (
    DjangoSettingsRepository,
)
from generators.domain.generator import Generator, GeneratorDraft
from generators.infrastructure.models import Generator as GeneratorModel
from generators.infrastructure.repositories.django_generator_repository import (
    DjangoGeneratorRepository,
)

logger = logging.getLogger(__name__)
User = get_user_model()


class Command(BaseCommand):
    """Command to create test data."""

    help = "Create test data (superuser, sample generator, enabled API routes)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-superuser",
            action="store_true",
            help="Skip creating superuser",
        )
        parser.add_argument(
            "--generator-name",
            type=str,
            default="Basic",
            help="Sample generator name (default: Basic)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        actor = ActorId.anonymous()
        if not options["skip_superuser"]:
            actor = ActorId(self.create_superuser().pk)

        generator = async_to_sync(self.create_generator)(options["generator_name"], actor)
        async_to_sync(self.enable_routes)()

        self.print_summary(generator)

    def create_superuser(self):
        """Create a superuser if it doesn't exist."""
        username = "admin"
        email = "admin@example.com"
        password = "admin"

        existing = User.objects.filter(username=username).first()
        if existing:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Superuser '{username}' already exists"))
            return existing

        user = User.objects.create_superuser(username=username, email=email, password=password)
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {username} / {password}"))
        return user

    async def create_generator(self, name: str, actor: ActorId) -> Generator:
        """Create the sample generator unless one with this name exists."""
        repository = DjangoGeneratorRepository()

        for existing in await repository.find_all():
            if existing.name == name:
                # pylint: disable=no-member
                self.stdout.write(
                    self.style.WARNING(f"Generator '{name}' already exists (id: {existing.id})")
                )
                return existing

        generator = await repository.insert(
            GeneratorDraft(
                name=name,
                charset="ABCDEFGH0123456789",
                chunks=4,
                chunk_length=4,
                separator="-",
            ),
            actor,
        )
        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Created generator: {generator.name} (id: {generator.id})")
        )
        return generator

    async def enable_routes(self):
        """Switch on every API route in the general settings."""
        repository = DjangoSettingsRepository()
        option_name = settings.API_SETTINGS_OPTION
        general = await repository.load(option_name)
        await repository.store(
            option_name, with_route_flags(general, [route.value for route in RouteCode], True)
        )
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("Enabled all API routes"))

    def print_summary(self, generator: Generator):
        """Print summary of created data."""
        self.stdout.write("")
        self.stdout.write("Test data summary")
        self.stdout.write(f"  Generator:     {generator.name} (id: {generator.id})")
        total = GeneratorModel.objects.count()  # pylint: disable=no-member
        self.stdout.write(f"  Total stored:  {total}")
        self.stdout.write("  API base:      /api/v1/generators")
