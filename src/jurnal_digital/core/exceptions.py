"""Custom exception classes for Jurnal Digital.

Every domain error carries the HTTP status code it is rendered with, so the
exception handlers registered by the application factory can turn any of
them into the standard response envelope.
"""

from typing import List

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single field-level validation violation."""

    field: str
    message: str


class JurnalDigitalError(Exception):
    """Base exception for all Jurnal Digital errors."""

    status_code: int = 500

    def __init__(self, message: str):
        """Initialize the exception.

        Args:
            message: Human readable message returned to the client.
        """
        self.message = message
        super().__init__(message)


class ValidationError(JurnalDigitalError):
    """Raised when request data violates one or more field constraints."""

    status_code = 400

    def __init__(self, errors: List[FieldError], message: str = "Validation error"):
        """Initialize the exception.

        Args:
            errors: Every violation found in the request.
            message: Summary message for the envelope.
        """
        self.errors = errors
        super().__init__(message)


class UnauthorizedError(JurnalDigitalError):
    """Raised on bad credentials or a missing/invalid bearer token."""

    status_code = 401


class NotFoundError(JurnalDigitalError):
    """Raised when a requested record does not exist."""

    status_code = 404


class ConflictError(JurnalDigitalError):
    """Raised when a write would violate a uniqueness constraint."""

    status_code = 409


class AlreadyRegisteredError(ConflictError):
    """Raised when an identity key (username, email, NIS, NIP) is taken."""

    status_code = 400


class ConfigurationError(JurnalDigitalError):
    """Raised when there is a configuration error."""

    pass
