"""
SalesDesk API — Application Package Initializer
================================================

What: Marks the `salesdesk` directory as a Python package.
Who:  Imported by uvicorn (`salesdesk.main:app`), the console script and pytest.

Architecture Note:
    The service is a thin layered façade over three tables:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (normalize / validate)   │  ← Business rules, SQL building
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │   Database (pooled connections)     │  ← One statement per checkout
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
