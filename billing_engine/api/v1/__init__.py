# billing_engine/api/v1/__init__.py
"""
Versioned API v1 — aggregates all sub-routers under ``/api/v1``.

Usage in ``main.py``::

    from billing_engine.api.v1 import v1_router
    app.include_router(v1_router)
"""

from fastapi import APIRouter

from billing_engine.api.v1.routes.clients import router as clients_router
from billing_engine.api.v1.routes.dashboard import router as dashboard_router
from billing_engine.api.v1.routes.documents import router as documents_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(documents_router)
v1_router.include_router(dashboard_router)
v1_router.include_router(clients_router)

__all__ = ["v1_router"]
