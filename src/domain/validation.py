"""
Registration field rules - Field and form validators.

Every rule is a pure function of the field value and an optional
ValidationContext. Validators never raise for string input: absence of
an error message (None) is the success signal.

Rule order per field (first failing rule wins):
- firstName / lastName: required
- email: required -> Gmail only -> not already registered
- password: required -> length 8..30 -> lowercase -> uppercase -> digit -> special
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class FormField(str, Enum):
    """Registration form fields, valued by their wire names."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PASSWORD = "password"


GMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@gmail\.com$", re.IGNORECASE)
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 30

FIRST_NAME_REQUIRED = "First name is required"
LAST_NAME_REQUIRED = "Last name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_NOT_GMAIL = "Only Gmail addresses are accepted"
EMAIL_ALREADY_REGISTERED = "This email is already registered"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_LENGTH = (
    f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
)
PASSWORD_LOWERCASE = "Password must contain at least one lowercase letter"
PASSWORD_UPPERCASE = "Password must contain at least one uppercase letter"
PASSWORD_DIGIT = "Password must contain at least one number"
PASSWORD_SPECIAL = "Password must contain at least one special character"


@dataclass(frozen=True)
class FieldError:
    """A single field/message pair as exchanged over the wire."""

    field: str
    message: str


@dataclass
class FormData:
    """Snapshot of the four registration inputs."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""

    def get(self, name: FormField) -> str:
        return getattr(self, _ATTRIBUTES[name])

    def set(self, name: FormField, value: str) -> None:
        setattr(self, _ATTRIBUTES[name], value)

    def to_payload(self) -> dict[str, str]:
        """Return the camelCase JSON body expected by the register endpoint."""
        return {name.value: self.get(name) for name in FormField}


_ATTRIBUTES = {
    FormField.FIRST_NAME: "first_name",
    FormField.LAST_NAME: "last_name",
    FormField.EMAIL: "email",
    FormField.PASSWORD: "password",
}


@dataclass(frozen=True)
class ValidationContext:
    """
    Ambient data for context-dependent rules.

    registered_emails holds lower-cased addresses that must be rejected as
    duplicates. Client-side this is a static hint list; server-side it is
    built from the live store.
    """

    registered_emails: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_emails(cls, emails: Iterable[str]) -> "ValidationContext":
        return cls(registered_emails=frozenset(e.lower() for e in emails))

    def is_registered(self, email: str) -> bool:
        return email.lower() in self.registered_emails


def _validate_name(value: str, message: str) -> str | None:
    if not value.strip():
        return message
    return None


def _validate_email(value: str, context: ValidationContext | None) -> str | None:
    if not value.strip():
        return EMAIL_REQUIRED
    if not GMAIL_PATTERN.fullmatch(value):
        return EMAIL_NOT_GMAIL
    if context is not None and context.is_registered(value):
        return EMAIL_ALREADY_REGISTERED
    return None


def _validate_password(value: str) -> str | None:
    if not value:
        return PASSWORD_REQUIRED
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        return PASSWORD_LENGTH
    if not re.search(r"[a-z]", value):
        return PASSWORD_LOWERCASE
    if not re.search(r"[A-Z]", value):
        return PASSWORD_UPPERCASE
    if not re.search(r"[0-9]", value):
        return PASSWORD_DIGIT
    if not any(char in SPECIAL_CHARACTERS for char in value):
        return PASSWORD_SPECIAL
    return None


def validate_field(
    name: FormField | str, value: str, context: ValidationContext | None = None
) -> str | None:
    """
    Validate one field value.

    Args:
        name: FormField or its wire name; unknown names have no rules
        value: Raw field value as typed (not trimmed)
        context: Registered emails for the duplicate check, or None to skip it

    Returns:
        The first failing rule's message, or None if the value is valid
    """
    try:
        name = FormField(name)
    except ValueError:
        return None

    if name is FormField.FIRST_NAME:
        return _validate_name(value, FIRST_NAME_REQUIRED)
    if name is FormField.LAST_NAME:
        return _validate_name(value, LAST_NAME_REQUIRED)
    if name is FormField.EMAIL:
        return _validate_email(value, context)
    return _validate_password(value)


def validate_form(
    form_data: FormData, context: ValidationContext | None = None
) -> dict[FormField, str]:
    """
    Validate every field of a form snapshot.

    Returns:
        Mapping of failing fields to their message; empty when fully valid
    """
    errors: dict[FormField, str] = {}
    for name in FormField:
        error = validate_field(name, form_data.get(name), context)
        if error:
            errors[name] = error
    return errors


def to_field_errors(errors: Mapping[FormField, str]) -> list[FieldError]:
    """Flatten an error mapping into wire pairs, in form field order."""
    return [FieldError(name.value, errors[name]) for name in FormField if name in errors]
