"""
SalesDesk API — Customer Table Model
=====================================

What:  ORM mapping of the `customer` table.
Who:   Used by CustomerService to build SELECT/INSERT/UPDATE/DELETE statements.

Column names are kept in their upper-case database spelling because they are
also the JSON field names exposed by the API.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from salesdesk.database import Base
from salesdesk.models.types import Money


class Customer(Base):
    """
    One customer row, keyed by CUST_CODE.

    AGENT_CODE references an agent but the service never checks that the
    agent exists; the database decides.
    """

    __tablename__ = "customer"

    CUST_CODE: Mapped[str] = mapped_column(String(6), primary_key=True)
    CUST_NAME: Mapped[str] = mapped_column(String(40), nullable=False)
    CUST_CITY: Mapped[Optional[str]] = mapped_column(String(35), nullable=True)
    WORKING_AREA: Mapped[str] = mapped_column(String(35), nullable=False)
    CUST_COUNTRY: Mapped[str] = mapped_column(String(20), nullable=False)
    GRADE: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Money: DECIMAL in the database, always float once read
    OPENING_AMT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)
    RECEIVE_AMT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)
    PAYMENT_AMT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)
    OUTSTANDING_AMT: Mapped[float] = mapped_column(Money(12, 2), nullable=False)

    PHONE_NO: Mapped[str] = mapped_column(String(17), nullable=False)
    AGENT_CODE: Mapped[Optional[str]] = mapped_column(String(6), nullable=True)

    def __repr__(self) -> str:
        return f"<Customer(CUST_CODE='{self.CUST_CODE}', CUST_NAME='{self.CUST_NAME}')>"
