"""
Checks that the service account can reach the spreadsheet.

``test_connection`` runs two independent checks.  The read check
fetches a small corner of the ride sheet.  The write check adds a new
tab named ``test-sheet-YYYY-MM-DD`` and writes a 2x2 block into it.
A failing check is logged and reported in the result instead of
aborting the request; only an authentication failure, which would make
both checks meaningless, is raised.

The write check leaves its tab in place.  Clients remove it with
``delete_test_sheet`` once they have seen the report.  Because the
tab name only carries the date, a second write check on the same day
fails until the earlier tab is deleted.
"""

import logging
from datetime import datetime
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from ride_sheets_api.app.core.clock import format_timestamp, utc_now
from ride_sheets_api.app.core.exceptions import NotFoundError, UpstreamError, ValidationError
from ride_sheets_api.app.core.sheets import SheetsBackend
from ride_sheets_api.app.schemas.connection import ConnectionReport, DeleteSheetResult


logger = logging.getLogger(__name__)


class ConnectionService:
    """Read/write checks against the configured spreadsheet."""

    def __init__(
        self,
        backend: SheetsBackend,
        sheet_name: str,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.backend = backend
        self.sheet_name = sheet_name
        self._clock = clock

    def _read_check(self) -> bool:
        try:
            values = self.backend.get_values(f"{self.sheet_name}!A1:C3")
        except UpstreamError as e:
            logger.warning("Read permission test failed: %s", e)
            return False
        return bool(values)

    def _write_check(self, test_sheet_name: str) -> bool:
        try:
            self.backend.add_sheet(test_sheet_name)
            self.backend.update_values(
                f"{test_sheet_name}!A1:B2",
                [["Test", "Data"], [format_timestamp(self._clock()), "Connection Test"]],
            )
        except UpstreamError as e:
            logger.warning("Write permission test failed: %s", e)
            return False
        return True

    async def test_connection(self) -> ConnectionReport:
        await run_in_threadpool(self.backend.authorize)

        read_success = await run_in_threadpool(self._read_check)
        test_sheet_name = f"test-sheet-{self._clock().date().isoformat()}"
        write_success = await run_in_threadpool(self._write_check, test_sheet_name)

        success = read_success and write_success
        message = "Connection to Google Sheets {}. Read: {}, Write: {}".format(
            "successful" if success else "partially successful",
            "Success" if read_success else "Failed",
            "Success" if write_success else "Failed",
        )
        logger.info(message)
        return ConnectionReport(
            success=success,
            read_success=read_success,
            write_success=write_success,
            test_sheet_name=test_sheet_name if write_success else None,
            message=message,
        )

    async def delete_test_sheet(self, sheet_name: str) -> DeleteSheetResult:
        """Delete the tab called ``sheet_name``.

        The ride sheet itself is never deleted through this path.
        """
        if sheet_name == self.sheet_name:
            raise ValidationError(f"Sheet {sheet_name} holds the ride data and cannot be deleted")
        sheet_id = await run_in_threadpool(self.backend.find_sheet_id, sheet_name)
        if sheet_id is None:
            raise NotFoundError(f"Sheet {sheet_name} not found for deletion")
        await run_in_threadpool(self.backend.delete_sheet, sheet_id)
        logger.info("Deleted test sheet %s (id %s)", sheet_name, sheet_id)
        return DeleteSheetResult(success=True, message=f"Sheet {sheet_name} successfully deleted")
