"""
WSGI config for LicenseManagerService project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseManagerService.settings.dev")

application = get_wsgi_application()
