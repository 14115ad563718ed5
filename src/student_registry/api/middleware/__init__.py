"""
Middleware for Student Registry API.

This module contains all middleware components for request/response processing.
"""

from student_registry.api.middleware.auth import (
    BasicAuthMiddleware,
    credentials_match,
    parse_basic_credentials,
)
from student_registry.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "BasicAuthMiddleware",
    "credentials_match",
    "parse_basic_credentials",
    "RequestLoggingMiddleware",
]
