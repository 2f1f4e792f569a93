"""Request/response schemas for auth and user-profile endpoints."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from app.core.security import PASSWORD_MAX_LEN
from app.models.user import Role


# Emails are compared and stored trimmed and lower-cased.
NormalizedEmail = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, max_length=255)
]


class RegisterRequest(BaseModel):
    """Registration body. Required fields are checked by the route so the
    error message can name all of them at once."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, max_length=255)
    email: NormalizedEmail | None = None
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN)
    role: Role | None = Field(default=None, description="Defaults to athlete")


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(extra="ignore")

    email: NormalizedEmail | None = None
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN)


class UserUpdateRequest(BaseModel):
    """Profile update. Only name and role are writable; email must match the stored value."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: NormalizedEmail | None = None
    role: Role | None = None


class CurrentUser(BaseModel):
    """Authenticated caller (id, name, email, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role


class UserResponse(BaseModel):
    """Public user representation (never includes the password hash)."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthResponse(BaseModel):
    """Returned by register and login: a bearer token plus the user."""

    message: str
    token: str
    user: UserResponse


class MeResponse(BaseModel):
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
