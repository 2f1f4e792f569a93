"""Goal endpoints. Athletes see and change only their own; admins see all."""

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
from app.models import Goal
from app.schemas.auth import CurrentUser
from app.schemas.goals import GoalCreate, GoalResponse, GoalUpdate
from app.services.resources import ResourceStore

router = APIRouter()

RESOURCE_NAME = "goal"


def _store(db: Session) -> ResourceStore[Goal]:
    return ResourceStore(db, Goal)


def _get_authorized(
    goal_id: int, action: Action, caller: CurrentUser, db: Session
) -> tuple[ResourceStore[Goal], Goal]:
    store = _store(db)
    goal = store.find_by_id(goal_id)
    enforce(decide(caller, action, goal, RESOURCE_NAME))
    return store, goal


@router.get("", response_model=list[GoalResponse])
def list_goals(caller: CallerDep, db: DbDep) -> list[Goal]:
    return _store(db).find_all(owner_id=list_owner_filter(caller))


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
def create_goal(body: GoalCreate, caller: CallerDep, db: DbDep) -> Goal:
    """Create a goal for the caller; status defaults to not_started."""
    if not body.description:
        raise validation_error("Please provide a description").to_http_exception()
    enforce(decide(caller, Action.CREATE))
    fields = creation_fields(caller, body.model_dump(exclude_none=True))
    return _store(db).create(fields)


@router.get("/{goal_id}", response_model=GoalResponse)
def get_goal(goal_id: int, caller: CallerDep, db: DbDep) -> Goal:
    _, goal = _get_authorized(goal_id, Action.READ, caller, db)
    return goal


@router.put("/{goal_id}", response_model=GoalResponse)
def update_goal(
    goal_id: int, body: GoalUpdate, caller: CallerDep, db: DbDep
) -> Goal:
    store, goal = _get_authorized(goal_id, Action.UPDATE, caller, db)
    return store.update(goal, update_fields(body.model_dump(exclude_unset=True)))


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(goal_id: int, caller: CallerDep, db: DbDep) -> Response:
    store, goal = _get_authorized(goal_id, Action.DELETE, caller, db)
    store.delete(goal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
