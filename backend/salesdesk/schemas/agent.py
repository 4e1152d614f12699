"""
SalesDesk API — Agent Schema
=============================

What:  Response shape of GET /api/agents items.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Agent(BaseModel):
    AGENT_CODE: str = Field(examples=["A001"])
    AGENT_NAME: Optional[str] = Field(default=None, examples=["John Smith"])
    WORKING_AREA: Optional[str] = Field(default=None, examples=["New York"])
    COMMISSION: Optional[float] = Field(default=None, description="Commission as a fraction", examples=[0.12])
    PHONE_NO: Optional[str] = Field(default=None, examples=["123-456-7890"])
    COUNTRY: Optional[str] = Field(default=None, examples=["USA"])

    model_config = {"from_attributes": True}
