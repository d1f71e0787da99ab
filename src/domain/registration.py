"""
Registration domain service - server-side registration flow.

Re-runs the same field rules the client applies, then enforces email
uniqueness against the live store before creating the user.

Flow:
    validate (all fields, no duplicate check) -> 400 on any error
    find_by_email (case-insensitive)          -> 409 if present
    create                                    -> 201

The duplicate check runs only after format validation passes, so a
malformed email never reports a conflict.
"""

import logging
from dataclasses import dataclass

from .exceptions import EmailAlreadyRegistered, RegistrationValidationFailed
from .ports import NewUser, User, UserRepository
from .validation import FormData, to_field_errors, validate_form

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates validation, the uniqueness check and persistence.
    """

    repository: UserRepository

    def register(self, new_user: NewUser) -> User:
        """
        Register a new user.

        Args:
            new_user: Raw registration input

        Returns:
            The stored user record

        Raises:
            RegistrationValidationFailed: If any field rule fails
            EmailAlreadyRegistered: If the email is already in the store
        """
        form_data = FormData(
            first_name=new_user.first_name,
            last_name=new_user.last_name,
            email=new_user.email,
            password=new_user.password,
        )
        errors = validate_form(form_data)
        if errors:
            logger.info("Registration rejected: %s invalid field(s)", len(errors))
            raise RegistrationValidationFailed(to_field_errors(errors))

        if self.repository.find_by_email(new_user.email) is not None:
            logger.info("Registration rejected: %s already registered", new_user.email)
            raise EmailAlreadyRegistered(new_user.email)

        user = self.repository.create(new_user)
        logger.info("Registered user %s (%s)", user.id, user.email)
        return user

    def list_users(self) -> list[User]:
        """Return all registered users."""
        return self.repository.get_all()
