"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.domain.ports import NewUser, User


class ApiModel(BaseModel):
    """Base model serializing to camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(ApiModel):
    """
    Request model for user registration.

    Missing or null fields become empty strings so the field rules report
    them as required; other non-string values fail request validation.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""

    @field_validator("first_name", "last_name", "email", "password", mode="before")
    @classmethod
    def null_as_missing(cls, value: object) -> object:
        """JSON null is reported like an absent field."""
        return "" if value is None else value

    def to_new_user(self) -> NewUser:
        return NewUser(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password=self.password,
        )


class UserResponse(ApiModel):
    """Public view of a user record (never includes the password)."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
        )


class RegisterResponse(ApiModel):
    """Response model for successful registration."""

    success: bool = True
    message: str
    data: UserResponse


class UsersResponse(ApiModel):
    """Response model for the user listing."""

    success: bool = True
    data: list[UserResponse]


class ErrorDetail(ApiModel):
    """A single offending field."""

    field: str
    message: str


class ErrorResponse(ApiModel):
    """Standard error envelope; errors is omitted for server faults."""

    success: bool = False
    message: str
    errors: list[ErrorDetail] | None = None


class HealthResponse(ApiModel):
    """Response model for the health check."""

    success: bool = True
    message: str
    timestamp: str
