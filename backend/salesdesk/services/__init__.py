# Services package init
"""
SalesDesk API — Services Layer
===============================

What:  Business logic between routes (HTTP) and the Database (persistence).
How:   Stateless singletons; the Database is passed to every call so the
       pool stays an injected, process-scoped resource.

Service Inventory:
    - customer_payload: normalize / validate / filter customer bodies (pure)
    - CustomerService:  list, get, create, replace, patch, delete customers
    - OrderService:     filtered order listing
    - AgentService:     agent listing
"""
