"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class RouteDisabledError(DomainException):
    """Raised when an API route has been switched off in the settings."""

    def __init__(
        self,
        message: str = "This route is disabled via the plugin settings.",
        route_id: Optional[str] = None,
    ):
        super().__init__(message, code="ROUTE_DISABLED")
        self.route_id = route_id


class GeneratorException(DomainException):
    """Base exception for generator-related errors."""

    pass


class GeneratorNotFoundError(GeneratorException):
    """Raised when a generator is not found."""

    def __init__(self, message: str = "Generator not found", code: str = "GENERATOR_NOT_FOUND"):
        super().__init__(message, code=code)


class InvalidGeneratorIdError(GeneratorNotFoundError):
    """Raised when a generator ID is missing, malformed or not positive."""

    def __init__(self, message: str = "Generator ID is invalid."):
        super().__init__(message, code="INVALID_GENERATOR_ID")


class GeneratorValidationError(GeneratorException):
    """Raised when a generator field is missing or fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, code="GENERATOR_VALIDATION_ERROR")
        self.field = field


class GeneratorPersistenceError(GeneratorException):
    """Raised when the generator store fails to read or write."""

    def __init__(self, message: str = "The generator could not be stored."):
        super().__init__(message, code="GENERATOR_PERSISTENCE_ERROR")
