"""
SalesDesk API — Order Schema
=============================

What:  Response shape of GET /api/orders items.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Order(BaseModel):
    ORD_NUM: int = Field(examples=[200110])
    ORD_AMOUNT: float = Field(examples=[350.0])
    ADVANCE_AMOUNT: float = Field(examples=[50.0])
    ORD_DATE: date = Field(examples=["2008-07-15"])
    CUST_CODE: str = Field(examples=["C00001"])
    AGENT_CODE: str = Field(examples=["A001"])
    ORD_DESCRIPTION: Optional[str] = Field(default=None, examples=["Widget shipment"])

    model_config = {"from_attributes": True}
