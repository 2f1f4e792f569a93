"""Storage for owned records (workouts, goals): one atomic operation per call."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from app.models import Goal, Workout

ModelT = TypeVar("ModelT", Workout, Goal)


class ResourceStore(Generic[ModelT]):
    """
    CRUD over an owned model. Ownership rules live in app.core.policy; this
    class only persists what it is given, restricted to the model's columns.
    """

    def __init__(self, db: Session, model: type[ModelT]) -> None:
        self.db = db
        self.model = model
        self._columns = frozenset(c.key for c in model.__table__.columns)

    def _writable(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return {
            k: v
            for k, v in fields.items()
            if k in self._columns and k not in ("id", "created_at", "updated_at")
        }

    def find_all(self, owner_id: int | None = None) -> list[ModelT]:
        """All records, or only those owned by owner_id when given."""
        query = self.db.query(self.model)
        if owner_id is not None:
            query = query.filter(self.model.user_id == owner_id)
        return query.order_by(self.model.id).all()

    def find_by_id(self, record_id: int) -> ModelT | None:
        return self.db.get(self.model, record_id)

    def create(self, fields: Mapping[str, Any]) -> ModelT:
        record = self.model(**self._writable(fields))
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def update(self, record: ModelT, fields: Mapping[str, Any]) -> ModelT:
        for key, value in self._writable(fields).items():
            setattr(record, key, value)
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete(self, record: ModelT) -> None:
        self.db.delete(record)
        self.db.commit()
