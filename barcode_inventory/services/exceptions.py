from typing import Any, Optional

from fastapi import status


class ServiceError(Exception):
    """
    Base class for errors raised by the service layer.

    Each subclass maps to one HTTP status code; the API layer renders any
    ServiceError as ``{"detail": message}`` (plus ``details`` when present).
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: Optional[dict] = None

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInput(ServiceError):
    """Malformed or missing fields."""
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ServiceError):
    """Bad credentials or a missing/invalid bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ServiceError):
    """Uniqueness or referential-use violation."""
    status_code = status.HTTP_409_CONFLICT


class ServiceUnavailable(ServiceError):
    """An upstream service could not be reached."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(ServiceError):
    """An upstream service answered with a non-2xx status, which is relayed as-is."""

    def __init__(self, message: str, status_code: int, details: Any = None):
        super().__init__(message, details)
        self.status_code = status_code
