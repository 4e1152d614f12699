"""
SalesDesk API — Order Route Handlers
=====================================

What:  GET /api/orders, filterable by cust_code and agent_code.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from salesdesk.database import Database, get_database
from salesdesk.schemas.common import ErrorResponse
from salesdesk.schemas.order import Order
from salesdesk.services.order_service import order_service

router = APIRouter(prefix="/api", tags=["Orders"])


@router.get(
    "/orders",
    response_model=List[Order],
    responses={
        200: {"description": "Array of orders (limited to 50)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List orders (filterable)",
    description="Newest first (ORD_DATE, then ORD_NUM, both descending). Filters combine with AND.",
)
async def list_orders(
    cust_code: Optional[str] = Query(
        default=None,
        description="Only orders of this customer",
        examples=["C00001"],
    ),
    agent_code: Optional[str] = Query(
        default=None,
        description="Only orders handled by this agent",
        examples=["A001"],
    ),
    db: Database = Depends(get_database),
) -> List[Dict[str, Any]]:
    return await order_service.list_orders(db, cust_code=cust_code, agent_code=agent_code)
