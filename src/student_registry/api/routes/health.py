"""
Health check endpoints.

Provides health status and version information for the API.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from student_registry.api.schemas.responses import HealthResponse
from student_registry.registry.service import (
    RegistrationService,
    get_registration_service,
)
from student_registry.version import __version__

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(
    service: RegistrationService = Depends(get_registration_service),
) -> HealthResponse:
    """Report API status and the number of registered students."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        registered_students=service.count(),
    )
