"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter

from app import __version__
from app.api.deps import DbDep
from app.core.config import get_settings
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbDep) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; no authentication required.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        version=__version__,
        environment=get_settings().APP_ENV,
        database=db_status,
    )
