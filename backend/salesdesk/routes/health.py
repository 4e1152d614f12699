"""
SalesDesk API — Health Check Route
===================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the database through the pool and reports aggregate status.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from salesdesk import __version__
from salesdesk.database import Database, get_database
from salesdesk.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    db: Database = Depends(get_database),
) -> HealthResponse:
    """
    What:    Runs SELECT 1 on a pooled connection and reports the result.
    Returns: HealthResponse; HTTP 503 when the database is unreachable.
    """
    if await db.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
