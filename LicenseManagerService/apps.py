"""
App configuration for License Manager Service.
"""
import logging
import os

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class LicenseManagerServiceConfig(AppConfig):
    """App configuration for LicenseManagerService."""

    name = "LicenseManagerService"
    verbose_name = "License Manager Service"

    def ready(self):
        """Set up tracing once apps are loaded, when enabled."""
        if os.environ.get("OTEL_ENABLED", "false").lower() != "true":
            return

        # Django's autoreloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Failed to setup OpenTelemetry: %s", e)
