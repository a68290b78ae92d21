"""
Service-level error taxonomy.

Every error carries the HTTP status it maps to and a fixed, client-safe
message.  The exception handlers in ``api.middleware`` serialize these as
``{"error": message}``; the underlying cause (if any) is only logged.
"""

from __future__ import annotations


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "All fields are required"


class InvalidCredentials(ServiceError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    status_code = 409
    default_message = "Already exists"


class InternalError(ServiceError):
    status_code = 500
