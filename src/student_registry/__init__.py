"""
Student Registry - in-memory student registration service.

Registers students, assigns their identifiers and serves lookups and
removals over a credential-gated REST API.
"""

from student_registry.version import __version__

# API module is available but not exported by default
# Import explicitly: from student_registry.api import create_app

__all__ = ["__version__"]
