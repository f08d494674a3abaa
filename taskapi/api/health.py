"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskapi.api.auth import get_context
from taskapi.core.context import AppContext
from taskapi.core.database import check_db_connected, get_db
from taskapi.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    context: Annotated[AppContext, Depends(get_context)],
) -> HealthResponse:
    """Return service health status and database connectivity."""
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(
        status="ok",
        environment=context.settings.APP_ENV,
        database=db_status,
    )
