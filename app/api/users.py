"""User profile endpoints: list/delete (admin only), read/update (self or admin)."""

from fastapi import APIRouter, Response, status

from app.api.deps import CallerDep, DbDep
from app.core.errors import not_found
from app.core.policy import (
    decide_profile_read,
    decide_profile_update,
    enforce,
    require_admin,
)
from app.schemas.auth import UserResponse, UserUpdateRequest
from app.services.users import UserStore

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def list_users(caller: CallerDep, db: DbDep) -> list[UserResponse]:
    """List all users (admin only)."""
    enforce(require_admin(caller))
    return [UserResponse.model_validate(u) for u in UserStore(db).list_all()]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, caller: CallerDep, db: DbDep) -> UserResponse:
    enforce(decide_profile_read(caller, user_id))
    user = UserStore(db).find_by_id(user_id)
    if user is None:
        raise not_found("User not found").to_http_exception()
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    caller: CallerDep,
    db: DbDep,
) -> UserResponse:
    """
    Update a profile. Athletes may rename themselves; admins may also change
    any user's name and role. Email addresses cannot be changed.
    """
    store = UserStore(db)
    target = store.find_by_id(user_id)
    changes = body.model_dump(exclude_unset=True)
    enforce(decide_profile_update(caller, user_id, target, changes))
    return UserResponse.model_validate(store.update(target, changes))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, caller: CallerDep, db: DbDep) -> Response:
    """Delete a user and everything they own (admin only)."""
    enforce(require_admin(caller))
    store = UserStore(db)
    user = store.find_by_id(user_id)
    if user is None:
        raise not_found("User not found").to_http_exception()
    store.delete(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
