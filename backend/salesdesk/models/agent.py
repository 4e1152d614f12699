"""
SalesDesk API — Agent Table Model
==================================

What:  ORM mapping of the read-only `agents` table.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from salesdesk.database import Base
from salesdesk.models.types import Money


class Agent(Base):
    """One sales agent. COMMISSION is a fraction, e.g. 0.12."""

    __tablename__ = "agents"

    AGENT_CODE: Mapped[str] = mapped_column(String(6), primary_key=True)
    AGENT_NAME: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    WORKING_AREA: Mapped[Optional[str]] = mapped_column(String(35), nullable=True)
    COMMISSION: Mapped[Optional[float]] = mapped_column(Money(10, 2), nullable=True)
    PHONE_NO: Mapped[Optional[str]] = mapped_column(String(15), nullable=True)
    COUNTRY: Mapped[Optional[str]] = mapped_column(String(25), nullable=True)
