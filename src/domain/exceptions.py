"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Field-level validation problems are data (see validation.py); these
exceptions only cross the service and gateway boundaries.
"""

from .validation import FieldError


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class RegistrationValidationFailed(RegistrationError):
    """Submitted data violates one or more field rules."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


class EmailAlreadyRegistered(RegistrationError):
    """Email already exists in the user store (case-insensitive)."""

    pass


class GatewayUnavailable(RegistrationError):
    """Registration endpoint could not be reached or answered garbage."""

    pass
