"""
Student Registry API Module.

REST API for registering, looking up and unregistering students.
"""

from student_registry.api.app import create_app

__all__ = ["create_app"]
