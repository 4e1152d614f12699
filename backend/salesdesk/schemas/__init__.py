# Schemas package init
"""
SalesDesk API — Pydantic Schemas
=================================

What:  Response and documentation models for the API contract.

Schema Inventory:
    - customer.py: Customer, CustomerSummary, CustomerCreate, CustomerPatch
    - order.py:    Order
    - agent.py:    Agent
    - common.py:   ErrorResponse, ValidationErrorResponse, HealthResponse
"""
