"""
Business-rule validation for student records.

Each check returns a list of failure messages; an empty list means the
value is acceptable. ``validate_registration`` composes them and raises.
"""

from typing import Any, Callable

from student_registry.core.exceptions import ValidationFailedError
from student_registry.core.models import MINIMUM_AGE

FieldCheck = Callable[[Any], list[str]]


def validate_name(name: Any) -> list[str]:
    """Name must be present and a non-empty string."""
    if name is None:
        return ["name is required"]
    if not isinstance(name, str):
        return [f"name must be a string, got {type(name).__name__}"]
    if not name:
        return ["name must not be empty"]
    return []


def validate_age(age: Any) -> list[str]:
    """Age must be present, an integer and at least MINIMUM_AGE."""
    if age is None:
        return ["age is required"]
    # bool is an int subclass
    if isinstance(age, bool) or not isinstance(age, int):
        return [f"age must be an integer, got {type(age).__name__}"]
    if age < MINIMUM_AGE:
        return [f"age must be at least {MINIMUM_AGE}, got {age}"]
    return []


FIELD_CHECKS: dict[str, FieldCheck] = {
    "name": validate_name,
    "age": validate_age,
}


def collect_failures(record: Any) -> dict[str, list[str]]:
    """Run every field check against ``record`` and return failures by field."""
    failures: dict[str, list[str]] = {}
    for field, check in FIELD_CHECKS.items():
        errors = check(getattr(record, field, None))
        if errors:
            failures[field] = errors
    return failures


def validate_registration(record: Any) -> None:
    """
    Validate the business fields of a record submitted for registration.

    Args:
        record: Object exposing ``name`` and ``age`` attributes

    Raises:
        ValidationFailedError: If any field check fails
    """
    failures = collect_failures(record)
    if not failures:
        return

    messages = [message for errors in failures.values() for message in errors]
    raise ValidationFailedError(
        f"Student validation failed: {'; '.join(messages)}",
        field=next(iter(failures)),
        validation_errors=messages,
    )
