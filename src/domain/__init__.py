"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration field rules, the client-side form
state machine and the server-side registration service. It defines its
own port interfaces for infrastructure abstraction, ensuring true
hexagonal architecture decoupling.
"""

from .exceptions import (
    EmailAlreadyRegistered,
    GatewayUnavailable,
    RegistrationError,
    RegistrationValidationFailed,
)
from .form import FormState, RegistrationForm
from .ports import NewUser, RegistrationGateway, SubmitResult, User, UserRepository
from .registration import RegistrationService
from .validation import (
    FieldError,
    FormData,
    FormField,
    ValidationContext,
    to_field_errors,
    validate_field,
    validate_form,
)

__all__ = [
    "EmailAlreadyRegistered",
    "FieldError",
    "FormData",
    "FormField",
    "FormState",
    "GatewayUnavailable",
    "NewUser",
    "RegistrationError",
    "RegistrationForm",
    "RegistrationGateway",
    "RegistrationService",
    "RegistrationValidationFailed",
    "SubmitResult",
    "User",
    "UserRepository",
    "ValidationContext",
    "to_field_errors",
    "validate_field",
    "validate_form",
]
