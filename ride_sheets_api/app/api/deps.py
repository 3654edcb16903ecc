"""
Request‑scoped dependencies.

Each request gets its own ``SheetsBackend`` and services built on top
of it; nothing is cached at module level.  Tests replace
``get_sheets_backend`` through ``app.dependency_overrides`` to run
the handlers against an in‑memory spreadsheet.
"""

from fastapi import Depends

from ride_sheets_api.app.core.config import settings
from ride_sheets_api.app.core.sheets import SheetsBackend
from ride_sheets_api.app.services.connection_service import ConnectionService
from ride_sheets_api.app.services.ride_service import RideService


def get_sheets_backend() -> SheetsBackend:
    return SheetsBackend.from_settings(settings)


def get_ride_service(backend: SheetsBackend = Depends(get_sheets_backend)) -> RideService:
    return RideService(backend, settings.sheet_name)


def get_connection_service(backend: SheetsBackend = Depends(get_sheets_backend)) -> ConnectionService:
    return ConnectionService(backend, settings.sheet_name)
