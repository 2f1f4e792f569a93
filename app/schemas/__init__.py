"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.schemas.goals import GoalCreate, GoalResponse, GoalUpdate
from app.schemas.health import HealthResponse
from app.schemas.workouts import WorkoutCreate, WorkoutResponse, WorkoutUpdate

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "GoalCreate",
    "GoalResponse",
    "GoalUpdate",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserResponse",
    "UserUpdateRequest",
    "WorkoutCreate",
    "WorkoutResponse",
    "WorkoutUpdate",
]
