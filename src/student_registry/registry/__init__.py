"""
Student Registry Storage Module.

Provides the in-memory student store and the registration service on top of it.
"""

__all__ = [
    "RegistrationService",
    "StudentStore",
    "generate_student_id",
    "get_registration_service",
]

from student_registry.registry.service import (
    RegistrationService,
    generate_student_id,
    get_registration_service,
)
from student_registry.registry.storage import StudentStore
