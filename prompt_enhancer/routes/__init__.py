"""
FastAPI routers for all endpoints.

Each module defines a router for one concern (enhancement API, pages, health).
"""
