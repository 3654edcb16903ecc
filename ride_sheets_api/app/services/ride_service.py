"""
Business logic for reading and updating rides.

``RideService`` reads the ride sheet through a ``SheetsBackend`` and
applies the three supported updates: assigning a ride to a user,
changing its status and setting its cost.  Rides are never appended or
deleted here; they are created in the spreadsheet by other means.

Every update follows the same sequence:

1. read the full data range and decode it;
2. find the ride by identifier (``NotFoundError`` if absent, nothing
   is written);
3. locate the ride's sheet row with a separate read of column A;
4. overwrite that row, all 20 cells, with the merged record.

There is no lock or version check between steps 1 and 4.  Two clients
updating the same ride at the same time race, and whichever write
reaches the spreadsheet last wins.

The Google client is blocking; calls are pushed to the threadpool so
that the event loop stays free while a request waits on the API.
"""

import logging
import math
from datetime import datetime
from typing import Callable, List, Optional

from fastapi.concurrency import run_in_threadpool

from ride_sheets_api.app.core.clock import format_timestamp, utc_now
from ride_sheets_api.app.core.exceptions import NotFoundError, ValidationError
from ride_sheets_api.app.core.sheets import SheetsBackend
from ride_sheets_api.app.schemas.ride import FINAL_STATUSES, AssignmentStatus, Ride, RideStatus
from ride_sheets_api.app.services import row_codec
from ride_sheets_api.app.services.row_locator import RowLocator


logger = logging.getLogger(__name__)


class RideService:
    """Service for listing and updating rides stored in the ride sheet."""

    def __init__(
        self,
        backend: SheetsBackend,
        sheet_name: str,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.backend = backend
        self.sheet_name = sheet_name
        self.locator = RowLocator(backend, sheet_name)
        self._clock = clock

    @property
    def data_range(self) -> str:
        # Row 1 holds the column headers.
        return f"{self.sheet_name}!{row_codec.FIRST_COLUMN}2:{row_codec.LAST_COLUMN}"

    def row_range(self, row_number: int) -> str:
        return f"{self.sheet_name}!{row_codec.FIRST_COLUMN}{row_number}:{row_codec.LAST_COLUMN}{row_number}"

    def _now(self) -> str:
        return format_timestamp(self._clock())

    async def list_all(self) -> List[Ride]:
        """Return every well‑formed ride in sheet order.

        Malformed rows (fewer than 15 cells, typically blank separator
        rows) are skipped without error.
        """
        rows = await run_in_threadpool(self.backend.get_values, self.data_range)
        rides = [ride for ride in map(row_codec.decode, rows) if ride is not None]
        logger.debug("Decoded %s rides from %s rows", len(rides), len(rows))
        return rides

    async def list_unassigned(self) -> List[Ride]:
        """Return rides that still need attention.

        A ride qualifies when nobody is assigned to it or when it is
        still in the ``new`` status.
        """
        rides = await self.list_all()
        return [
            ride
            for ride in rides
            if ride.assignment_status == AssignmentStatus.UNASSIGNED.value or ride.status == RideStatus.NEW.value
        ]

    async def get_ride(self, ride_id: str) -> Ride:
        rides = await self.list_all()
        for ride in rides:
            if ride.id == ride_id:
                return ride
        raise NotFoundError(f"Ride with ID {ride_id} not found")

    async def assign(self, ride_id: str, user_id: str) -> Ride:
        """Assign a ride to a user and move it to ``pending``."""
        ride = await self.get_ride(ride_id)
        updated = ride.model_copy(
            update={
                "assigned_to": user_id,
                "assignment_status": AssignmentStatus.ASSIGNED.value,
                "assigned_at": self._now(),
                "status": RideStatus.PENDING.value,
            }
        )
        await self._save(updated)
        logger.info("Ride %s assigned to %s", ride_id, user_id)
        return updated

    async def set_status(self, ride_id: str, status: str) -> Ride:
        """Change the status of a ride.

        Moving to ``completed``, ``cancelled`` or ``no-show`` stamps
        ``completed_at`` with the current time; any other status keeps
        the previous ``completed_at``.
        """
        ride = await self.get_ride(ride_id)
        changes = {"status": status}
        if status in FINAL_STATUSES:
            changes["completed_at"] = self._now()
        updated = ride.model_copy(update=changes)
        await self._save(updated)
        logger.info("Ride %s status changed from %s to %s", ride_id, ride.status, status)
        return updated

    async def set_cost(self, ride_id: str, cost: Optional[float]) -> Ride:
        if cost is not None:
            cost = float(cost)
            if not math.isfinite(cost):
                raise ValidationError(f"Cost must be a finite number, got {cost}")
        ride = await self.get_ride(ride_id)
        updated = ride.model_copy(update={"cost": cost})
        await self._save(updated)
        logger.info("Ride %s cost set to %s", ride_id, cost)
        return updated

    async def _save(self, ride: Ride) -> None:
        row_number = await run_in_threadpool(self.locator.locate, ride.id)
        await run_in_threadpool(self.backend.update_values, self.row_range(row_number), [row_codec.encode(ride)])
