from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from tv_api.core.database import Database, get_database
from tv_api.schemas.channel import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(database: Database = Depends(get_database)):
    """Liveness probe. Always 200; store reachability is reported, not enforced."""
    return HealthResponse(
        status="ok",
        dependency_connected=database.ping(),
        timestamp=datetime.now(timezone.utc),
    )
