"""
SalesDesk API — Order Service
==============================

What:  Read-only listing of orders, optionally filtered by customer and/or
       agent code.
How:   One SELECT with a WHERE clause assembled from bound comparisons,
       newest first, capped at 50 rows.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from salesdesk.database import Database
from salesdesk.models import Order

logger = logging.getLogger(__name__)

LIST_LIMIT = 50

order_table = Order.__table__


def normalize_filter(value: Optional[str]) -> Optional[str]:
    """Trim and upper-case a code filter; blank means no filter."""
    if value is None:
        return None
    value = value.strip().upper()
    return value or None


class OrderService:
    """Stateless order queries."""

    async def list_orders(
        self,
        db: Database,
        cust_code: Optional[str] = None,
        agent_code: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Orders matching every given filter (AND), ordered by ORD_DATE then
        ORD_NUM, both descending, at most LIST_LIMIT rows.
        """
        stmt = select(order_table)

        cust_code = normalize_filter(cust_code)
        if cust_code:
            stmt = stmt.where(order_table.c.CUST_CODE == cust_code)

        agent_code = normalize_filter(agent_code)
        if agent_code:
            stmt = stmt.where(order_table.c.AGENT_CODE == agent_code)

        stmt = stmt.order_by(
            order_table.c.ORD_DATE.desc(),
            order_table.c.ORD_NUM.desc(),
        ).limit(LIST_LIMIT)

        logger.debug("Listing orders cust_code=%s agent_code=%s", cust_code, agent_code)
        return await db.fetch_all(stmt)


order_service = OrderService()
