"""
ASGI config for LicenseManagerService project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseManagerService.settings.dev")

application = get_asgi_application()
