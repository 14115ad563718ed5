"""
Student Registry Exception Hierarchy.

Defines the custom exceptions raised by the registration core.
Absence of a record is never an exception: lookups return ``None``.
"""

from typing import Any


class StudentRegistryError(Exception):
    """
    Base exception for all Student Registry errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a StudentRegistryError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base


class ValidationFailedError(StudentRegistryError):
    """
    Raised when a business rule on a student's fields is violated.

    Covers:
    - Missing or empty name
    - Missing age
    - Age below the registration minimum
    """

    def __init__(
        self,
        message: str = "Student validation failed",
        *,
        field: str | None = None,
        validation_errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ValidationFailedError.

        Args:
            message: Human-readable error message
            field: First field that failed validation
            validation_errors: Every failure found on the record
            details: Optional structured data for debugging
        """
        details = details or {}
        if field:
            details["field"] = field
        if validation_errors:
            details["validation_errors"] = validation_errors

        super().__init__(message, details=details)
        self.field = field
        self.validation_errors = validation_errors or []


class InvalidStateError(StudentRegistryError):
    """
    Raised when a caller violates a structural precondition.

    Registering a record that already carries an id, and unregistering
    or storing a record without one, both end up here.
    """

    def __init__(
        self,
        message: str,
        *,
        student_id: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if student_id:
            details["student_id"] = student_id
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.student_id = student_id
        self.operation = operation


class ConfigurationError(StudentRegistryError):
    """
    Errors in configuration loading or validation.

    Raised when an environment variable holds a value that cannot
    be parsed into the expected setting.
    """

    def __init__(
        self,
        message: str,
        *,
        env_var: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if env_var:
            details["env_var"] = env_var

        super().__init__(message, details=details)
        self.env_var = env_var


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, StudentRegistryError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
