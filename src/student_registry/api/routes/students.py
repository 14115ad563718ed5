"""
Student endpoints.

Register, look up and unregister students. Handlers are plain functions so
FastAPI runs them concurrently in its threadpool.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from student_registry.api.schemas.exceptions import BadRequestError, NotFoundError
from student_registry.api.schemas.requests import StudentRegistrationRequest
from student_registry.api.schemas.responses import OperationResponse, StudentResponse
from student_registry.core.exceptions import InvalidStateError, ValidationFailedError
from student_registry.registry.service import (
    RegistrationService,
    get_registration_service,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/{student_id}", response_model=StudentResponse, name="get_student")
def get_student(
    student_id: str,
    service: RegistrationService = Depends(get_registration_service),
) -> StudentResponse:
    """
    Get a registered student.

    Raises:
        NotFoundError: If no student is registered under ``student_id``
    """
    student = service.find(student_id)
    if student is None:
        raise NotFoundError(message=f"Student '{student_id}' not found")

    return StudentResponse.from_student(student)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def register_student(
    payload: StudentRegistrationRequest,
    request: Request,
    response: Response,
    service: RegistrationService = Depends(get_registration_service),
) -> StudentResponse:
    """
    Register a new student.

    Returns the stored student with a ``Location`` header pointing at it.

    Raises:
        BadRequestError: If the service rejects the record
    """
    try:
        student = service.register(payload.to_student())
    except ValidationFailedError as e:
        raise BadRequestError(message=e.message, detail="; ".join(e.validation_errors))
    except InvalidStateError as e:
        raise BadRequestError(message=e.message)

    response.headers["Location"] = str(request.url_for("get_student", student_id=student.id))
    return StudentResponse.from_student(student)


@router.delete("/{student_id}", response_model=OperationResponse)
def unregister_student(
    student_id: str,
    service: RegistrationService = Depends(get_registration_service),
) -> OperationResponse:
    """
    Unregister a student.

    Raises:
        NotFoundError: If no student is registered under ``student_id``
    """
    student = service.find(student_id)
    if student is None:
        raise NotFoundError(message=f"Student '{student_id}' not found")

    service.unregister(student)

    return OperationResponse(
        status="success",
        operation="unregister",
        student_id=student_id,
    )
