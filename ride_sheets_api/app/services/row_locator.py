"""
Lookup of the sheet row that holds a given ride.

Ride identifiers live in column A.  ``RowLocator.locate`` reads the
whole column on every call and returns the 1‑based row number of the
first exact match, which is what A1 ranges such as ``A7:T7`` expect.
The header row is part of the fetched column, so the position in the
returned list plus one is the sheet row number.  Cells are compared as
text, the same way the row codec reads them.
"""

import logging

from ride_sheets_api.app.core.exceptions import NotFoundError
from ride_sheets_api.app.core.sheets import SheetsBackend


logger = logging.getLogger(__name__)


class RowLocator:
    """Find sheet rows by ride identifier."""

    def __init__(self, backend: SheetsBackend, sheet_name: str) -> None:
        self.backend = backend
        self.sheet_name = sheet_name

    def locate(self, ride_id: str) -> int:
        rows = self.backend.get_values(f"{self.sheet_name}!A:A")
        for index, row in enumerate(rows):
            if row and str(row[0]) == ride_id:
                return index + 1
        logger.warning("Ride %s not found in column A of %s", ride_id, self.sheet_name)
        raise NotFoundError(f"Ride with ID {ride_id} not found")
