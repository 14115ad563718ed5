"""
Pydantic request schemas for API endpoints.

All incoming API requests are validated against these schemas.
"""

from pydantic import BaseModel, Field, field_validator

from student_registry.core.models import MINIMUM_AGE, UnregisteredStudent


class StudentRegistrationRequest(BaseModel):
    """Request to register a new student."""

    id: str | None = Field(
        default=None,
        description="Must be absent; identifiers are assigned by the server",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Student name",
        examples=["Student"],
    )
    age: int = Field(
        ...,
        ge=MINIMUM_AGE,
        description=f"Student age, at least {MINIMUM_AGE}",
        examples=[16],
    )

    @field_validator("id")
    @classmethod
    def validate_id_absent(cls, v: str | None) -> None:
        """Reject client-supplied identifiers."""
        if v is not None:
            raise ValueError("id is assigned on registration and must not be provided")
        return None

    def to_student(self) -> UnregisteredStudent:
        """Convert to the core unregistered record."""
        return UnregisteredStudent(name=self.name, age=self.age)

    model_config = {"extra": "forbid"}
