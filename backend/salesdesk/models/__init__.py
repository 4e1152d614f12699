"""
SalesDesk API — Table Models
=============================

What:  SQLAlchemy declarative descriptions of the three tables the API reads
       and writes: `customer`, `orders`, `agents`.
Why:   Statements are built from column objects, so every value reaches the
       driver as a bound parameter.

The schema itself belongs to the database (no migrations are shipped).
Amount columns use the Money type (models/types.py).
"""

from salesdesk.models.agent import Agent
from salesdesk.models.customer import Customer
from salesdesk.models.order import Order

__all__ = ["Agent", "Customer", "Order"]
