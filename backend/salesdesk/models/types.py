"""
SalesDesk API — Column Types
=============================

What:  Money, a fixed-point column read back as a Python float.
How:   Numeric(asdecimal=False) hands back whatever the driver returns,
       which is an int for whole amounts on some backends; the result
       processor casts every non-null value to float.
"""

from typing import Any, Optional

from sqlalchemy import Numeric
from sqlalchemy.types import TypeDecorator


class Money(TypeDecorator):
    """DECIMAL(precision, scale) in the database, float in Python."""

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 12, scale: int = 2) -> None:
        super().__init__(precision=precision, scale=scale, asdecimal=False)

    def process_result_value(self, value: Any, dialect: Any) -> Optional[float]:
        if value is None:
            return None
        return float(value)
