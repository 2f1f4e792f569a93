"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.goal import Goal
from app.models.user import Role, User
from app.models.workout import Workout

__all__ = ["Base", "Goal", "Role", "User", "Workout"]
