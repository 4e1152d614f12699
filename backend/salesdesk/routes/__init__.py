# Routes package init
"""
SalesDesk API — API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - customers.py: /api/customers, /api/customers/{code}  (CRUD)
    - orders.py:    GET /api/orders                        (filtered list)
    - agents.py:    GET /api/agents                        (list)
    - health.py:    GET /health                            (service health)

Routes stay thin: extract request data, call a service, pick the status
code. Business rules live in services.
"""
