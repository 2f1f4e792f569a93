"""Request/response schemas for workout endpoints (camelCase on the wire)."""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class WorkoutCreate(BaseModel):
    """New workout. user_id is accepted but always replaced with the caller's id."""

    model_config = _WIRE_CONFIG

    type: str | None = Field(default=None, min_length=1, max_length=255)
    date: date_type | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None
    user_id: int | None = None


class WorkoutUpdate(BaseModel):
    """Partial update; fields left out are unchanged. user_id is ignored."""

    model_config = _WIRE_CONFIG

    type: str | None = Field(default=None, min_length=1, max_length=255)
    date: date_type | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None
    user_id: int | None = None

    @field_validator("type", "date", "duration_minutes")
    @classmethod
    def not_null(cls, v: object) -> object:
        # Defaults are not validated, so this only fires for an explicit null.
        if v is None:
            raise ValueError("must not be null")
        return v


class WorkoutResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    user_id: int
    type: str
    date: date_type
    duration_minutes: int
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
