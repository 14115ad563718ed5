"""
Core data models for Student Registry.

A student exists in two shapes: the client-built record that has not been
registered yet, and the stored record carrying the identifier assigned by
the registration service.
"""

from typing import Union

from pydantic import BaseModel, Field

MINIMUM_AGE = 16


class UnregisteredStudent(BaseModel):
    """A student record built by a client, before registration.

    ``name`` and ``age`` are optional here so that an invalid payload can
    still be represented and rejected by the registration service.
    """

    name: str | None = None
    age: int | None = None

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def of(cls, name: str | None, age: int | None) -> "UnregisteredStudent":
        """Build an unregistered student from its two fields."""
        return cls(name=name, age=age)


class RegisteredStudent(BaseModel):
    """A stored student record. Identity is the ``id`` field alone."""

    id: str = Field(min_length=1, description="Identifier assigned at registration")
    name: str = Field(min_length=1)
    age: int = Field(ge=MINIMUM_AGE)

    model_config = {"frozen": True, "extra": "forbid"}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegisteredStudent):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


StudentRecord = Union[UnregisteredStudent, RegisteredStudent]
