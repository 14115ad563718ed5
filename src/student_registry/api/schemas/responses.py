"""
Pydantic response schemas for API endpoints.

All API responses conform to these schemas for consistent output.
"""

from pydantic import BaseModel, Field

from student_registry.core.models import RegisteredStudent


class StudentResponse(BaseModel):
    """Response model for a registered student."""

    id: str = Field(..., description="Student identifier")
    name: str = Field(..., description="Student name")
    age: int = Field(..., description="Student age")

    model_config = {"extra": "forbid"}

    @classmethod
    def from_student(cls, student: RegisteredStudent) -> "StudentResponse":
        """Build the response from a stored record."""
        return cls(id=student.id, name=student.name, age=student.age)


class OperationResponse(BaseModel):
    """Response for an operation that returns no resource."""

    status: str = Field(..., description="Operation status")
    operation: str = Field(..., description="Operation performed")
    student_id: str = Field(..., description="Student the operation applied to")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Overall health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Check timestamp")
    registered_students: int = Field(..., description="Students currently registered")

