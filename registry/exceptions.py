"""
Error taxonomy for the registry service.

Services raise the exceptions below; views stay thin and let
``registry.api.exception_handler.api_exception_handler`` render them as
``{"error": <message>}`` with the matching status code.
"""

from rest_framework import status


class RegistryServiceError(Exception):
    """Base class for errors that map to a stable client-facing response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthError(RegistryServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication failed"


class MissingToken(AuthError):
    message = "Access token required"


class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class RegistryError(RegistryServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid registry request"


class DuplicateIdentifier(RegistryError):
    message = "NIN already exists"


class InvalidPageParameters(RegistryError):
    message = "page and limit must be positive integers"


class InvalidCitizenRecord(RegistryError):
    message = "Citizen record rejected by the registry"


class NotFound(RegistryServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Citizen not found"


class ServiceBusy(RegistryServiceError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service temporarily unavailable, please retry"


class InternalError(RegistryServiceError):
    pass
