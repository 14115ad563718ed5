"""
Registration Service - the single entry point to student storage.

Validates incoming records, assigns identifiers and drives the
StudentStore. Transport code talks to storage only through this class.
"""

import logging
import uuid
from functools import lru_cache
from typing import Any, Callable

from student_registry.core.exceptions import InvalidStateError, StudentRegistryError
from student_registry.core.models import RegisteredStudent, StudentRecord
from student_registry.core.validation import validate_registration
from student_registry.registry.storage import StudentStore

logger = logging.getLogger(__name__)

# Attempts at drawing an unused id before giving up
MAX_ID_ATTEMPTS = 5


def generate_student_id() -> str:
    """Return a new random student identifier."""
    return uuid.uuid4().hex


class RegistrationService:
    """
    Registers, finds and unregisters students.

    Lifecycle of a record:
    - Unregistered --register(valid)--> Registered
    - Registered --unregister--> Absent
    - register(invalid) and register(already registered) are rejected
      without touching the store
    """

    def __init__(
        self,
        store: StudentStore | None = None,
        id_factory: Callable[[], str] = generate_student_id,
    ):
        """
        Initialize the service.

        Args:
            store: Backing store (a fresh in-memory store if omitted)
            id_factory: Callable producing candidate identifiers
        """
        self._store = store if store is not None else StudentStore()
        self._id_factory = id_factory

    def count(self) -> int:
        """Return the number of registered students."""
        return len(self._store)

    def register(self, student: StudentRecord) -> RegisteredStudent:
        """
        Register a new student and assign it an identifier.

        Args:
            student: Record without an id

        Returns:
            The stored record carrying its new id

        Raises:
            InvalidStateError: If the record already carries an id
            ValidationFailedError: If name or age break the registration rules
        """
        existing_id = getattr(student, "id", None)
        if existing_id:
            logger.warning(f"Rejected re-registration of student {existing_id}")
            raise InvalidStateError(
                f"Student '{existing_id}' is already registered",
                student_id=existing_id,
                operation="register",
            )

        try:
            validate_registration(student)
        except StudentRegistryError as e:
            logger.warning(f"Rejected student registration: {e.message}")
            raise

        for _ in range(MAX_ID_ATTEMPTS):
            registered = RegisteredStudent(
                id=self._id_factory(),
                name=student.name,
                age=student.age,
            )
            if self._store.put_new(registered):
                logger.info(f"Registered student {registered.id}")
                return registered
            logger.debug(f"Generated id {registered.id} already in use, retrying")

        raise StudentRegistryError(
            "Could not allocate a unique student id",
            details={"attempts": MAX_ID_ATTEMPTS},
        )

    def find(self, student_id: str) -> RegisteredStudent | None:
        """Look up a registered student by id. Returns None if absent."""
        student = self._store.get(student_id)
        logger.debug(f"Lookup of student {student_id}: {'found' if student else 'absent'}")
        return student

    def unregister(self, student: Any) -> None:
        """
        Remove a registered student.

        Removing an id that is no longer stored is not an error; callers
        that need a not-found outcome should ``find`` first.

        Raises:
            InvalidStateError: If the record carries no id
        """
        student_id = getattr(student, "id", None)
        if not student_id:
            raise InvalidStateError(
                "Cannot unregister a student without an id",
                operation="unregister",
            )

        self._store.remove(student_id)
        logger.info(f"Unregistered student {student_id}")


@lru_cache(maxsize=1)
def get_registration_service() -> RegistrationService:
    """Get the process-wide registration service (cached)."""
    return RegistrationService()
