"""
SalesDesk API — Agent Service
==============================

What:  Read-only listing of every agent, ordered by name. No row cap.
"""

from typing import Any, Dict, List

from sqlalchemy import select

from salesdesk.database import Database
from salesdesk.models import Agent

agent_table = Agent.__table__


class AgentService:

    async def list_agents(self, db: Database) -> List[Dict[str, Any]]:
        stmt = select(agent_table).order_by(agent_table.c.AGENT_NAME)
        return await db.fetch_all(stmt)


agent_service = AgentService()
