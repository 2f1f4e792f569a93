"""Credential store: user lookup, creation and password verification."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateEmailError
from app.core.security import hash_password, verify_password
from app.models.user import Role, User

logger = logging.getLogger(__name__)

# Profile fields that may be written through UserStore.update.
UPDATABLE_FIELDS = frozenset({"name", "role"})


class UserStore:
    """Thin wrapper over the users table bound to one session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def create(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.ATHLETE,
    ) -> User:
        """Insert a user with a bcrypt-hashed password. Raises DuplicateEmailError."""
        if self.find_by_email(email) is not None:
            raise DuplicateEmailError(email)
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=Role(role).value,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self.db.rollback()
            raise DuplicateEmailError(email) from e
        self.db.refresh(user)
        logger.info("Created user id=%s role=%s", user.id, user.role)
        return user

    def verify_password(self, user: User, plaintext: str) -> bool:
        return verify_password(plaintext, user.password_hash)

    def update(self, user: User, changes: Mapping[str, Any]) -> User:
        """Apply name/role changes; other keys are ignored."""
        for field, value in changes.items():
            if field not in UPDATABLE_FIELDS or value is None:
                continue
            setattr(user, field, Role(value).value if field == "role" else value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Delete the user together with their workouts and goals."""
        user_id = user.id
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user id=%s", user_id)
