"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  The application mounts this router
under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import connection, rides

router = APIRouter()

router.include_router(rides.router, prefix="/rides", tags=["rides"])
router.include_router(connection.router, prefix="/test", tags=["connection"])
