# Middleware package init
"""
SalesDesk API — Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Access log measures the full handler duration and final status
    3. CORS is FastAPI's CORSMiddleware (handles preflight)
"""
