"""Authorization policy: who may list, create, read, update or delete what.

Every function here is pure. Callers pass the resolved caller and, where
relevant, the target record; the result is a ``Decision`` that either allows
the action or carries an ``AppError`` describing the denial. Nothing here
touches the database or raises.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.core.errors import AppError, ErrorKind, forbidden, not_found
from app.models.user import Role
from app.schemas.auth import CurrentUser

OWNER_FIELD = "user_id"


class Action(str, Enum):
    LIST = "list"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


# Verb used in "You can only <verb> your own ..." messages.
_ACTION_VERBS = {
    Action.READ: "view",
    Action.UPDATE: "update",
    Action.DELETE: "delete",
}


@dataclass(frozen=True)
class Decision:
    """Outcome of a policy check; ``error`` is set iff the action is denied."""

    error: AppError | None = None

    @property
    def allowed(self) -> bool:
        return self.error is None


ALLOW = Decision()


def deny(error: AppError) -> Decision:
    return Decision(error=error)


def is_admin(caller: CurrentUser) -> bool:
    return caller.role == Role.ADMIN


def owns(caller: CurrentUser, resource: Any) -> bool:
    return getattr(resource, OWNER_FIELD, None) == caller.id


def decide(
    caller: CurrentUser,
    action: Action,
    resource: Any = None,
    resource_name: str = "resource",
) -> Decision:
    """
    Decide whether caller may perform action on an owned resource.

    LIST and CREATE are always allowed (LIST is narrowed by list_owner_filter,
    CREATE by creation_fields). READ/UPDATE/DELETE need the resource to exist
    and the caller to be its owner or an admin.
    """
    if action in (Action.LIST, Action.CREATE):
        return ALLOW
    if resource is None:
        return deny(not_found(f"{resource_name.capitalize()} not found"))
    if is_admin(caller) or owns(caller, resource):
        return ALLOW
    verb = _ACTION_VERBS[action]
    return deny(forbidden(f"You can only {verb} your own {resource_name}"))


def list_owner_filter(caller: CurrentUser) -> int | None:
    """Owner id to filter listings by; None means admins see everything."""
    if is_admin(caller):
        return None
    return caller.id


def creation_fields(caller: CurrentUser, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Fields for a new owned record; the owner is always the caller."""
    fields = dict(payload)
    fields[OWNER_FIELD] = caller.id
    return fields


def update_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Fields allowed in an update; any client-supplied owner is dropped."""
    return {k: v for k, v in payload.items() if k != OWNER_FIELD}


def require_admin(caller: CurrentUser) -> Decision:
    """User listing and user deletion are admin-only."""
    if is_admin(caller):
        return ALLOW
    return deny(forbidden("Insufficient permissions"))


def decide_profile_read(caller: CurrentUser, target_id: int) -> Decision:
    if caller.id == target_id or is_admin(caller):
        return ALLOW
    return deny(forbidden("You can only view your own profile"))


def decide_profile_update(
    caller: CurrentUser,
    target_id: int,
    target: Any,
    changes: Mapping[str, Any],
) -> Decision:
    """
    Self or admin may update a profile. Only admins may change roles, and
    nobody may change an email address once the account exists.
    """
    if caller.id != target_id and not is_admin(caller):
        return deny(forbidden("You can only update your own profile"))
    if target is None:
        return deny(not_found("User not found"))
    if changes.get("role") is not None and not is_admin(caller):
        return deny(forbidden("Only admins can change user roles"))
    email = changes.get("email")
    if email and email != target.email:
        return deny(AppError(ErrorKind.BAD_REQUEST, "Email cannot be changed"))
    return ALLOW


def enforce(decision: Decision) -> None:
    """Raise the HTTPException for a denied decision; no-op when allowed."""
    if decision.error is not None:
        raise decision.error.to_http_exception()
