"""ORM model for application users (auth and role-based access control)."""

from enum import StrEnum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin


class Role(StrEnum):
    """Closed set of user roles."""

    ATHLETE = "athlete"
    ADMIN = "admin"


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'athlete' or 'admin'. email is unique and immutable after creation.
    Deleting a user deletes the workouts and goals they own.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.ATHLETE.value)

    workouts = relationship(
        "Workout",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
    goals = relationship(
        "Goal",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
