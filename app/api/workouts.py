"""Workout endpoints. Athletes see and change only their own; admins see all."""

from fastapi import APIRouter, Response, status
from sqlalchemy.orm import Session

from app.api.deps import CallerDep, DbDep
from app.core.errors import validation_error
from app.core.policy import (
    Action,
    creation_fields,
    decide,
    enforce,
    list_owner_filter,
    update_fields,
)
from app.models import Workout
from app.schemas.auth import CurrentUser
from app.schemas.workouts import WorkoutCreate, WorkoutResponse, WorkoutUpdate
from app.services.resources import ResourceStore

router = APIRouter()

RESOURCE_NAME = "workout"


def _store(db: Session) -> ResourceStore[Workout]:
    return ResourceStore(db, Workout)


def _get_authorized(
    workout_id: int, action: Action, caller: CurrentUser, db: Session
) -> tuple[ResourceStore[Workout], Workout]:
    store = _store(db)
    workout = store.find_by_id(workout_id)
    enforce(decide(caller, action, workout, RESOURCE_NAME))
    return store, workout


@router.get("", response_model=list[WorkoutResponse])
def list_workouts(caller: CallerDep, db: DbDep) -> list[Workout]:
    return _store(db).find_all(owner_id=list_owner_filter(caller))


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
def create_workout(body: WorkoutCreate, caller: CallerDep, db: DbDep) -> Workout:
    """Log a workout for the caller; any userId in the body is ignored."""
    if body.type is None or body.date is None or body.duration_minutes is None:
        raise validation_error(
            "Please provide type, date, and durationMinutes"
        ).to_http_exception()
    enforce(decide(caller, Action.CREATE))
    fields = creation_fields(caller, body.model_dump(exclude_none=True))
    return _store(db).create(fields)


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout(workout_id: int, caller: CallerDep, db: DbDep) -> Workout:
    _, workout = _get_authorized(workout_id, Action.READ, caller, db)
    return workout


@router.put("/{workout_id}", response_model=WorkoutResponse)
def update_workout(
    workout_id: int, body: WorkoutUpdate, caller: CallerDep, db: DbDep
) -> Workout:
    store, workout = _get_authorized(workout_id, Action.UPDATE, caller, db)
    return store.update(workout, update_fields(body.model_dump(exclude_unset=True)))


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, caller: CallerDep, db: DbDep) -> Response:
    store, workout = _get_authorized(workout_id, Action.DELETE, caller, db)
    store.delete(workout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
