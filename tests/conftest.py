"""Pytest configuration and fixtures."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from student_registry.api.app import create_app
from student_registry.config import Settings, get_settings
from student_registry.core.models import RegisteredStudent, UnregisteredStudent
from student_registry.registry.service import (
    RegistrationService,
    get_registration_service,
)
from student_registry.registry.storage import StudentStore

TEST_USERNAME = "user"
TEST_PASSWORD = "password"


@pytest.fixture(autouse=True)
def clear_cached_singletons() -> Generator[None, None, None]:
    """Reset cached settings and service between tests."""
    get_settings.cache_clear()
    get_registration_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_registration_service.cache_clear()


@pytest.fixture
def store() -> StudentStore:
    """Provide an empty student store."""
    return StudentStore()


@pytest.fixture
def service(store: StudentStore) -> RegistrationService:
    """Provide a registration service over the test store."""
    return RegistrationService(store=store)


@pytest.fixture
def student() -> UnregisteredStudent:
    """Provide a valid unregistered student."""
    return UnregisteredStudent.of("Student", 16)


@pytest.fixture
def registered_student(service: RegistrationService, student: UnregisteredStudent) -> RegisteredStudent:
    """Provide a student already registered with the test service."""
    return service.register(student)


@pytest.fixture
def settings() -> Settings:
    """Provide settings with known credentials."""
    return Settings(auth_username=TEST_USERNAME, auth_password=TEST_PASSWORD)


@pytest.fixture
def auth() -> tuple[str, str]:
    """Valid HTTP Basic credentials."""
    return TEST_USERNAME, TEST_PASSWORD


@pytest.fixture
def client(settings: Settings, service: RegistrationService) -> Generator[TestClient, None, None]:
    """Create a test client wired to the test service."""
    app = create_app(settings)
    app.dependency_overrides[get_registration_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client
