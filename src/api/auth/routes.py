"""
Auth API routes.

Defines the registration endpoint and the user listing.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import (
    ErrorDetail,
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
    UsersResponse,
)
from src.domain.exceptions import EmailAlreadyRegistered, RegistrationValidationFailed
from src.domain.registration import RegistrationService
from src.domain.validation import EMAIL_ALREADY_REGISTERED, FieldError, FormField

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def error_response(
    status_code: int, message: str, errors: list[FieldError] | None = None
) -> JSONResponse:
    """Build the {success: false, message, errors?} envelope."""
    body = ErrorResponse(
        message=message,
        errors=(
            [ErrorDetail(field=e.field, message=e.message) for e in errors]
            if errors is not None
            else None
        ),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register a new user",
    description="Validate the submitted names, Gmail address and password, "
    "then store the user. Every offending field is reported.",
)
async def register(
    request_data: RegisterRequest | None = None,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    - **firstName** / **lastName**: non-blank
    - **email**: Gmail address not yet registered
    - **password**: 8-30 characters with lower, upper, digit and special character

    The password is never echoed back.
    """
    if request_data is None:
        request_data = RegisterRequest()
    try:
        user = service.register(request_data.to_new_user())
    except RegistrationValidationFailed as e:
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", e.errors)
    except EmailAlreadyRegistered:
        return error_response(
            status.HTTP_409_CONFLICT,
            "Email already registered",
            [FieldError(FormField.EMAIL.value, EMAIL_ALREADY_REGISTERED)],
        )
    except Exception:
        logger.exception("Registration error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return RegisterResponse(
        message="Registration successful",
        data=UserResponse.from_user(user),
    )


@router.get(
    "/users",
    response_model=UsersResponse,
    summary="List registered users",
    description="Returns every stored user without passwords. Intended for testing.",
)
async def list_users(
    service: RegistrationService = Depends(get_registration_service),
) -> UsersResponse:
    """List all registered users."""
    return UsersResponse(data=[UserResponse.from_user(u) for u in service.list_users()])
