"""
SalesDesk API — Agent Route Handlers
=====================================

What:  GET /api/agents, every agent ordered by name.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from salesdesk.database import Database, get_database
from salesdesk.schemas.agent import Agent
from salesdesk.schemas.common import ErrorResponse
from salesdesk.services.agent_service import agent_service

router = APIRouter(prefix="/api", tags=["Agents"])


@router.get(
    "/agents",
    response_model=List[Agent],
    responses={
        200: {"description": "Array of agents"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List agents",
)
async def list_agents(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    return await agent_service.list_agents(db)
