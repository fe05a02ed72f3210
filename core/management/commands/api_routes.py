"""
Django management command to inspect and toggle REST API routes.

Flags are stored in the general settings option under enabled_api_routes.
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.domain.route_gate import is_route_enabled, with_route_flags
from core.domain.value_objects import RouteCode
from core.infrastructure.repositories.django_settings_repository import (
    DjangoSettingsRepository,
)

logger = logging.getLogger(__name__)

ROUTE_CODES = [route.value for route in RouteCode]


class Command(BaseCommand):
    """Command to list, enable or disable API routes."""

    help = "List API route flags, or enable/disable routes by code"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--enable",
            nargs="+",
            metavar="CODE",
            default=[],
            help="Route codes to enable (e.g. 006 008)",
        )
        parser.add_argument(
            "--disable",
            nargs="+",
            metavar="CODE",
            default=[],
            help="Route codes to disable",
        )
        parser.add_argument(
            "--enable-all",
            action="store_true",
            help="Enable every known route",
        )
        parser.add_argument(
            "--disable-all",
            action="store_true",
            help="Disable every known route",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if options["enable_all"] and options["disable_all"]:
            raise CommandError("--enable-all and --disable-all are mutually exclusive")

        enable = ROUTE_CODES if options["enable_all"] else options["enable"]
        disable = ROUTE_CODES if options["disable_all"] else options["disable"]
        self.validate_codes(enable + disable)

        repository = DjangoSettingsRepository()
        option_name = settings.API_SETTINGS_OPTION
        general = async_to_sync(repository.load)(option_name)

        if enable or disable:
            general = with_route_flags(general, enable, enabled=True)
            general = with_route_flags(general, disable, enabled=False)
            general = async_to_sync(repository.store)(option_name, general)
            logger.info(
                "API route flags changed",
                extra={"enabled": list(enable), "disabled": list(disable)},
            )

        self.print_routes(general)

    def validate_codes(self, codes):
        """Reject route codes that no route uses."""
        unknown = sorted(set(codes) - set(ROUTE_CODES))
        if unknown:
            raise CommandError(
                f"Unknown route code(s): {', '.join(unknown)}. "
                f"Known codes: {', '.join(ROUTE_CODES)}"
            )

    def print_routes(self, general):
        """Print one line per route with its state."""
        for route in RouteCode:
            if is_route_enabled(general, route):
                state = self.style.SUCCESS("enabled")  # pylint: disable=no-member
            else:
                state = self.style.WARNING("disabled")  # pylint: disable=no-member
            self.stdout.write(f"{route.value}  {route.name.lower():<18} {state}")
