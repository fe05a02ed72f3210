"""
Model registration for the generators app.
"""
from generators.infrastructure.models import Generator  # noqa: F401
