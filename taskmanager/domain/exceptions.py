"""Domain exceptions for the task manager.

Defines domain-level exceptions that represent business rule violations
and infrastructure failures the core surfaces as typed errors. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskManagerException(Exception):
    """Base exception for all task manager errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error, message, details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskManagerException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskManagerException):
    """Raised when a bearer token is missing, invalid, or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidCredentialsException(TaskManagerException):
    """Raised when login fails.

    Unknown email and wrong password share this exception and its message so
    responses cannot be used to enumerate registered accounts.
    """

    MESSAGE = "Invalid email or password"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE, "INVALID_CREDENTIALS")


class DuplicateEmailException(TaskManagerException):
    """Raised when registering an email that is already registered."""

    def __init__(self) -> None:
        super().__init__(
            "Email is already registered",
            "DUPLICATE_EMAIL",
            {},
        )


class ResourceNotFoundException(TaskManagerException):
    """Raised when a requested resource is not found (or not owned by the caller)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StorageUnavailableException(TaskManagerException):
    """Raised when the database cannot be reached (connection loss, timeout).

    Transient: callers may retry the whole operation.
    """

    def __init__(self, reason: str | None = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(
            "Storage is temporarily unavailable; retry the request.",
            "STORAGE_UNAVAILABLE",
            details,
        )
