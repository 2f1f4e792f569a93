"""ORM model for athlete goals."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin

DEFAULT_GOAL_STATUS = "not_started"


class Goal(TimestampMixin, Base):
    """A goal owned by one user (user_id never changes)."""

    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(String(1024), nullable=False)
    status = Column(String(32), nullable=False, default=DEFAULT_GOAL_STATUS)

    owner = relationship("User", back_populates="goals")
