"""
Pydantic schemas for API request/response validation.

This module exports all request and response schemas used by the API.
"""

from student_registry.api.schemas.exceptions import (
    APIException,
    AuthRequiredError,
    BadRequestError,
    NotFoundError,
    ValidationError,
)
from student_registry.api.schemas.requests import StudentRegistrationRequest
from student_registry.api.schemas.responses import (
    HealthResponse,
    OperationResponse,
    StudentResponse,
)

__all__ = [
    # Exceptions
    "APIException",
    "ValidationError",
    "BadRequestError",
    "NotFoundError",
    "AuthRequiredError",
    # Requests
    "StudentRegistrationRequest",
    # Responses
    "StudentResponse",
    "OperationResponse",
    "HealthResponse",
]
