"""
Student Registry Core Module.

Provides the student record types, validation rules and exceptions.
"""

__all__ = [
    "MINIMUM_AGE",
    "RegisteredStudent",
    "StudentRecord",
    "UnregisteredStudent",
    # Exceptions
    "StudentRegistryError",
    "ValidationFailedError",
    "InvalidStateError",
    "ConfigurationError",
    # Validation
    "validate_age",
    "validate_name",
    "validate_registration",
]

from student_registry.core.exceptions import (
    ConfigurationError,
    InvalidStateError,
    StudentRegistryError,
    ValidationFailedError,
)
from student_registry.core.models import (
    MINIMUM_AGE,
    RegisteredStudent,
    StudentRecord,
    UnregisteredStudent,
)
from student_registry.core.validation import (
    validate_age,
    validate_name,
    validate_registration,
)
