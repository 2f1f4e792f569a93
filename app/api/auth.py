"""Registration, login, current-user and logout endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CallerDep, DbDep
from app.core.config import get_settings
from app.core.errors import DuplicateEmailError, forbidden, validation_error
from app.core.security import create_access_token
from app.models.user import Role, User
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)
from app.services.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _issue_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: DbDep) -> AuthResponse:
    """Create an account (role defaults to athlete) and return a session token."""
    if not body.name or not body.email or not body.password:
        raise validation_error(
            "Please provide name, email, and password"
        ).to_http_exception()
    if body.role is not None and not get_settings().ALLOW_ROLE_ON_REGISTER:
        raise forbidden("Roles cannot be chosen at registration").to_http_exception()

    try:
        user = UserStore(db).create(
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role or Role.ATHLETE,
        )
    except DuplicateEmailError as e:
        raise e.to_app_error().to_http_exception() from e

    return AuthResponse(
        message="User registered successfully",
        token=_issue_token(user),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: DbDep) -> AuthResponse:
    """
    Authenticate with email and password; returns a session token valid for 24 hours.
    Include it in the Authorization header as: Bearer <token>
    """
    if not body.email or not body.password:
        raise validation_error("Please provide email and password").to_http_exception()

    store = UserStore(db)
    user = store.find_by_email(body.email)
    if user is None or not store.verify_password(user, body.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return AuthResponse(
        message="Login successful",
        token=_issue_token(user),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
def me(caller: CallerDep, db: DbDep) -> MeResponse:
    user = UserStore(db).find_by_id(caller.id)
    return MeResponse(user=UserResponse.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(caller: CallerDep) -> MessageResponse:
    """Tokens are stateless; the client discards its copy. Nothing is revoked server-side."""
    logger.info("Logout requested by user id=%s", caller.id)
    return MessageResponse(
        message="Logout successful. Please delete the token on client side."
    )
