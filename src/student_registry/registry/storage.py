"""
Student Store - in-memory keyed storage of registered students.

Holds registered records for the lifetime of the process. Every operation
runs under a single lock so no caller observes a half-applied mutation.
"""

import logging
import threading

from student_registry.core.exceptions import InvalidStateError
from student_registry.core.models import RegisteredStudent

logger = logging.getLogger(__name__)


class StudentStore:
    """
    Thread-safe in-memory store of registered students.

    Keyed by student id. The backing dict is private; callers only
    see copies of individual records through ``get``.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._students: dict[str, RegisteredStudent] = {}
        self._lock = threading.Lock()

    def put(self, student: RegisteredStudent) -> None:
        """
        Insert or overwrite a student under its id.

        Raises:
            InvalidStateError: If the record is not a RegisteredStudent
        """
        self._require_registered(student)
        with self._lock:
            self._students[student.id] = student
        logger.debug(f"Stored student {student.id}")

    def put_new(self, student: RegisteredStudent) -> bool:
        """
        Insert a student only if its id is not already taken.

        Returns:
            True if the student was stored, False if the id is in use

        Raises:
            InvalidStateError: If the record is not a RegisteredStudent
        """
        self._require_registered(student)
        with self._lock:
            if student.id in self._students:
                return False
            self._students[student.id] = student
        logger.debug(f"Stored new student {student.id}")
        return True

    def get(self, student_id: str) -> RegisteredStudent | None:
        """Return the student stored under ``student_id``, or None."""
        with self._lock:
            return self._students.get(student_id)

    def remove(self, student_id: str) -> None:
        """Remove the student stored under ``student_id`` if present."""
        with self._lock:
            removed = self._students.pop(student_id, None)
        if removed is not None:
            logger.debug(f"Removed student {student_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        with self._lock:
            return student_id in self._students

    @staticmethod
    def _require_registered(student: RegisteredStudent) -> None:
        # RegisteredStudent validation guarantees a non-empty id and valid name/age
        if not isinstance(student, RegisteredStudent):
            raise InvalidStateError(
                "Only registered students with an id can be stored",
                student_id=getattr(student, "id", None),
                operation="put",
            )
