"""
Model registration for the core app.
"""
from core.infrastructure.models import Option  # noqa: F401
