"""Authentication gate: resolve the calling user from a Bearer session token."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import unauthenticated
from app.core.security import ExpiredTokenError, TokenError, decode_access_token
from app.schemas.auth import CurrentUser
from app.services.users import UserStore

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer token and return the caller as stored
    in the database (so role changes apply immediately). Raises 401 otherwise.
    """
    if credentials is None:
        raise unauthenticated("No token provided").to_http_exception()
    try:
        claims = decode_access_token(credentials.credentials)
    except ExpiredTokenError:
        raise unauthenticated("Token expired").to_http_exception()
    except TokenError:
        raise unauthenticated("Invalid token").to_http_exception()

    user = UserStore(db).find_by_id(claims.user_id)
    if user is None:
        raise unauthenticated("Invalid token").to_http_exception()
    return CurrentUser.model_validate(user)


CallerDep = Annotated[CurrentUser, Depends(get_current_user)]
DbDep = Annotated[Session, Depends(get_db)]
