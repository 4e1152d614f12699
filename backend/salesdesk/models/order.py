"""
SalesDesk API — Order Table Model
==================================

What:  ORM mapping of the read-only `orders` table.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from salesdesk.database import Base
from salesdesk.models.types import Money


class Order(Base):
    """One order row. CUST_CODE and AGENT_CODE are not checked by the service."""

    __tablename__ = "orders"

    ORD_NUM: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    ORD_AMOUNT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)
    ADVANCE_AMOUNT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)
    ORD_DATE: Mapped[date] = mapped_column(Date, nullable=False)
    CUST_CODE: Mapped[str] = mapped_column(String(6), nullable=False)
    AGENT_CODE: Mapped[str] = mapped_column(String(6), nullable=False)
    ORD_DESCRIPTION: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)
