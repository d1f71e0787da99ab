"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol

from .validation import FieldError, FormData


@dataclass(frozen=True)
class NewUser:
    """Validated registration input, before the store assigns identity."""

    first_name: str
    last_name: str
    email: str
    password: str


@dataclass(frozen=True)
class User:
    """
    Registered user record.

    id and created_at are assigned by the store at creation and never change.
    The password is kept as submitted (no hashing in this sample).
    """

    id: str
    first_name: str
    last_name: str
    email: str
    password: str
    created_at: datetime


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a registration request that reached the server.

    accepted is False for validation (400), conflict (409) and server
    fault (500) responses alike; errors carries whatever field pairs the
    server returned.
    """

    accepted: bool
    message: str
    errors: list[FieldError] = field(default_factory=list)
    user: dict[str, Any] | None = None


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by email.

        Args:
            email: Email address, compared case-insensitively

        Returns:
            The matching user, or None
        """
        ...

    def create(self, new_user: NewUser) -> User:
        """
        Store a new user, assigning id and created_at.

        Does not check uniqueness; callers look up first.
        """
        ...

    def get_all(self) -> list[User]:
        """Return all users in insertion order."""
        ...


class RegistrationGateway(Protocol):
    """Port interface for submitting a registration from the client side."""

    async def register(self, form_data: FormData) -> SubmitResult:
        """
        Send the form to the registration endpoint.

        Returns:
            SubmitResult for any response the server produced

        Raises:
            GatewayUnavailable: If the endpoint could not be reached
        """
        ...
