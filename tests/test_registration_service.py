"""Tests for the registration service."""

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

from student_registry.core.exceptions import (
    InvalidStateError,
    StudentRegistryError,
    ValidationFailedError,
)
from student_registry.core.models import RegisteredStudent, UnregisteredStudent
from student_registry.registry.service import (
    MAX_ID_ATTEMPTS,
    RegistrationService,
    generate_student_id,
    get_registration_service,
)
from student_registry.registry.storage import StudentStore


class TestRegister:
    """Tests for RegistrationService.register."""

    def test_assigns_id_and_stores(
        self, service: RegistrationService, store: StudentStore, student: UnregisteredStudent
    ) -> None:
        """A valid student is stored under a new id."""
        registered = service.register(student)

        assert registered.id
        assert registered.name == "Student"
        assert registered.age == 16
        assert len(store) == 1
        assert store.get(registered.id) == registered

    def test_ids_are_distinct(self, service: RegistrationService, student: UnregisteredStudent) -> None:
        first = service.register(student)
        second = service.register(student)
        assert first.id != second.id

    def test_rejects_registered_student(
        self, service: RegistrationService, store: StudentStore, registered_student: RegisteredStudent
    ) -> None:
        """Re-registration raises and leaves the store untouched."""
        with pytest.raises(InvalidStateError, match="already registered"):
            service.register(registered_student)
        assert len(store) == 1

    def test_rejects_any_identified_record(self, service: RegistrationService, store: StudentStore) -> None:
        """An id on the input is rejected even if that id is not stored."""
        with pytest.raises(InvalidStateError):
            service.register(SimpleNamespace(id="some-id", name="Student", age=16))
        assert len(store) == 0

    @pytest.mark.parametrize(
        "student",
        [
            UnregisteredStudent.of("", 16),
            UnregisteredStudent.of(None, 16),
            UnregisteredStudent(age=16),
            UnregisteredStudent.of("S", 15),
            UnregisteredStudent.of("S", None),
            UnregisteredStudent(name="S"),
        ],
        ids=["empty-name", "null-name", "missing-name", "age-15", "null-age", "missing-age"],
    )
    def test_validation_boundary(
        self, service: RegistrationService, store: StudentStore, student: UnregisteredStudent
    ) -> None:
        """Invalid names and ages are rejected without creating state."""
        with pytest.raises(ValidationFailedError):
            service.register(student)
        assert len(store) == 0

    def test_age_sixteen_accepted(self, service: RegistrationService) -> None:
        registered = service.register(UnregisteredStudent.of("S", 16))
        assert registered.age == 16

    def test_revalidates_untrusted_input(self, service: RegistrationService) -> None:
        """Objects that bypassed model validation are still checked."""
        with pytest.raises(ValidationFailedError):
            service.register(SimpleNamespace(name="Student", age=True))

    def test_retries_on_id_collision(self, store: StudentStore) -> None:
        """A colliding generated id is replaced transparently."""
        store.put(RegisteredStudent(id="taken", name="Existing", age=20))
        candidates = iter(["taken", "fresh"])
        service = RegistrationService(store=store, id_factory=lambda: next(candidates))

        registered = service.register(UnregisteredStudent.of("Student", 16))

        assert registered.id == "fresh"
        assert store.get("taken").name == "Existing"

    def test_gives_up_after_repeated_collisions(self, store: StudentStore) -> None:
        store.put(RegisteredStudent(id="taken", name="Existing", age=20))
        calls = []

        def always_taken() -> str:
            calls.append(1)
            return "taken"

        service = RegistrationService(store=store, id_factory=always_taken)

        with pytest.raises(StudentRegistryError, match="unique student id"):
            service.register(UnregisteredStudent.of("Student", 16))
        assert len(calls) == MAX_ID_ATTEMPTS
        assert len(store) == 1

    def test_concurrent_registrations_unique(self, service: RegistrationService, store: StudentStore) -> None:
        """N concurrent registrations yield N distinct retrievable students."""
        count = 200
        students = [UnregisteredStudent.of(f"Student {i}", 16 + i % 50) for i in range(count)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            registered = list(pool.map(service.register, students))

        ids = {r.id for r in registered}
        assert len(ids) == count
        assert len(store) == count
        for r in registered:
            assert service.find(r.id).name == r.name


class TestFind:
    """Tests for RegistrationService.find."""

    def test_round_trip(self, service: RegistrationService, registered_student: RegisteredStudent) -> None:
        found = service.find(registered_student.id)
        assert found == registered_student
        assert found.name == registered_student.name

    def test_unknown_id(self, service: RegistrationService) -> None:
        assert service.find("unknown-id") is None


class TestUnregister:
    """Tests for RegistrationService.unregister."""

    def test_removes_student(self, service: RegistrationService, registered_student: RegisteredStudent) -> None:
        service.unregister(registered_student)
        assert service.find(registered_student.id) is None

    def test_absent_id_is_not_an_error(
        self, service: RegistrationService, store: StudentStore, registered_student: RegisteredStudent
    ) -> None:
        """Unregistering an unknown id leaves the store unchanged."""
        service.unregister(RegisteredStudent(id="unknown-id", name="Ghost", age=30))
        assert len(store) == 1

    def test_twice_is_idempotent(self, service: RegistrationService, registered_student: RegisteredStudent) -> None:
        service.unregister(registered_student)
        service.unregister(registered_student)
        assert service.find(registered_student.id) is None

    def test_requires_id(self, service: RegistrationService, student: UnregisteredStudent) -> None:
        with pytest.raises(InvalidStateError, match="without an id"):
            service.unregister(student)


class TestLifecycle:
    """End-to-end lifecycle through the service."""

    def test_register_find_unregister_not_found(self, service: RegistrationService) -> None:
        registered = service.register(UnregisteredStudent.of("Student", 16))
        assert registered.name == "Student"
        assert registered.age == 16

        assert service.find(registered.id) == registered

        service.unregister(registered)
        assert service.find(registered.id) is None


class TestModuleHelpers:
    """Tests for module-level helpers."""

    def test_generate_student_id(self) -> None:
        first, second = generate_student_id(), generate_student_id()
        assert len(first) == 32
        assert first != second

    def test_default_service_is_cached(self) -> None:
        assert get_registration_service() is get_registration_service()

    def test_default_store_created(self) -> None:
        service = RegistrationService()
        assert service.count() == 0
        assert service.find("x") is None

    def test_store_not_exposed(self, service: RegistrationService) -> None:
        """Storage is reachable only through the service operations."""
        assert not hasattr(service, "store")

    def test_count_tracks_registrations(
        self, service: RegistrationService, student: UnregisteredStudent
    ) -> None:
        first = service.register(student)
        service.register(student)
        assert service.count() == 2

        service.unregister(first)
        assert service.count() == 1
