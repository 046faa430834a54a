"""
API v1 routes.

Defines REST endpoints for registering, validating and listing registrants.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from regform.api.dependencies import get_registration_service
from regform.api.models import (
    ErrorResponse,
    RegistrantListResponse,
    RegistrantResponse,
    RegistrationRequest,
    ValidationErrorResponse,
    ValidationResponse,
)
from regform.domain.exceptions import (
    DuplicateEmail,
    RegistrantsUnavailable,
    RegistrationRejected,
    ServerUnavailable,
    StoreError,
)
from regform.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.get(
    "/registrants",
    response_model=RegistrantListResponse,
    responses={503: {"model": ErrorResponse, "description": "Registrants unavailable"}},
    summary="List registrants",
)
async def list_registrants(
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrantListResponse:
    """Return every accepted registration, oldest first."""
    try:
        registrants = service.list_registrants()
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from None
    return RegistrantListResponse(
        count=len(registrants),
        registrants=[RegistrantResponse.from_registrant(r) for r in registrants],
    )


@router.post(
    "/registrants",
    response_model=RegistrantResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Email already exists"},
        422: {"model": ValidationErrorResponse, "description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Registration could not be stored"},
        503: {"model": ErrorResponse, "description": "Server is down"},
    },
    summary="Register a new user",
    description="Validate a registration form and store it. "
    "Every failing field is reported in a single response.",
)
async def register(
    request_data: RegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrantResponse:
    """
    Register a new user.

    - **firstName**, **lastName**, **city**: letters only
    - **email**: valid and not already registered
    - **birthDate**: ISO 8601 date
    - **postalCode**: exactly 5 digits
    """
    try:
        registrant = service.register(request_data.to_form())
    except RegistrationRejected as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Validation failed", "errors": e.errors},
        ) from None
    except DuplicateEmail as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from None
    except (ServerUnavailable, RegistrantsUnavailable) as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from None
    except StoreError:
        logger.exception("Registration could not be stored")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Registration failed",
        ) from None

    logger.info("Registered %s", registrant.email)
    return RegistrantResponse.from_registrant(registrant)


@router.post(
    "/validations",
    response_model=ValidationResponse,
    responses={503: {"model": ErrorResponse, "description": "Registrants unavailable"}},
    summary="Validate a registration form",
    description="Run every field check without storing anything.",
)
async def validate(
    request_data: RegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> ValidationResponse:
    """Report which fields of a form would be rejected."""
    try:
        outcome = service.validate(request_data.to_form())
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from None
    return ValidationResponse(is_valid=outcome.is_valid, errors=outcome.errors)
