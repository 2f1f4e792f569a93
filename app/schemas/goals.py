"""Request/response schemas for goal endpoints (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class GoalCreate(BaseModel):
    """New goal. user_id is accepted but always replaced with the caller's id."""

    model_config = _WIRE_CONFIG

    description: str | None = Field(default=None, min_length=1, max_length=1024)
    status: str | None = Field(default=None, min_length=1, max_length=32)
    user_id: int | None = None


class GoalUpdate(BaseModel):
    """Partial update; fields left out are unchanged. user_id is ignored."""

    model_config = _WIRE_CONFIG

    description: str | None = Field(default=None, min_length=1, max_length=1024)
    status: str | None = Field(default=None, min_length=1, max_length=32)
    user_id: int | None = None

    @field_validator("description", "status")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("must not be null")
        return v


class GoalResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    user_id: int
    description: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
