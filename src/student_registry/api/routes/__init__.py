"""
API route handlers.

This package contains all route definitions for the Student Registry API.
"""

from student_registry.api.routes import health, students

__all__ = [
    "health",
    "students",
]
