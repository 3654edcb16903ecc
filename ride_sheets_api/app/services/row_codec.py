"""
Mapping between spreadsheet rows and ``Ride`` records.

The ride sheet has one ride per row in columns A..T.  The column
layout is declared once in ``RIDE_COLUMNS``; ``decode`` and ``encode``
both walk that tuple, so the position of a field is never spelled out
as a bare index anywhere else.

Absent values have a single representation per layer: ``None`` on the
``Ride`` model, an empty string in the sheet.  ``encode`` turns
``None`` into ``""`` and ``decode`` turns a blank cell back into the
column default (``None`` for nullable columns), so a decoded row
survives an encode/decode cycle unchanged.

Rows with fewer than ``MIN_ROW_LENGTH`` cells are treated as malformed
and decode to ``None``.  The Sheets API drops trailing blank cells, so
a row whose last five columns (driver through cost) are empty comes
back with only 15 cells; those columns then take their defaults.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from ride_sheets_api.app.schemas.ride import AssignmentStatus, Ride, RideStatus, Urgency


TEXT = "text"
NUMBER = "number"


@dataclass(frozen=True)
class RideColumn:
    """One column of the ride sheet.

    Attributes:
        attribute: Name of the ``Ride`` attribute stored in the column.
        default: Value used when the cell is blank or missing.
        kind: ``"text"`` or ``"number"``.
    """

    attribute: str
    default: Any = ""
    kind: str = TEXT

    def parse(self, cell: Any) -> Any:
        text = "" if cell is None else str(cell)
        if text == "":
            return self.default
        if self.kind == NUMBER:
            try:
                number = float(text)
            except ValueError:
                return None
            return number if math.isfinite(number) else None
        return text

    def format(self, value: Any) -> Any:
        if value is None:
            return ""
        if self.kind == NUMBER:
            number = float(value)
            if not math.isfinite(number):
                raise ValueError(f"Cannot store non-finite number {value!r} in {self.attribute}")
            if number.is_integer():
                return int(number)
        return value


# Column order of the ride sheet, A through T.
RIDE_COLUMNS = (
    RideColumn("id"),
    RideColumn("booking_id"),
    RideColumn("name"),
    RideColumn("email"),
    RideColumn("phone_number"),
    RideColumn("service_type"),
    RideColumn("date"),
    RideColumn("time"),
    RideColumn("pickup"),
    RideColumn("dropoff"),
    RideColumn("transmission"),
    RideColumn("urgency", Urgency.MEDIUM.value),
    RideColumn("additional_notes"),
    RideColumn("status", RideStatus.NEW.value),
    RideColumn("assigned_to", None),
    RideColumn("driver", None),
    RideColumn("assignment_status", AssignmentStatus.UNASSIGNED.value),
    RideColumn("assigned_at", None),
    RideColumn("completed_at", None),
    RideColumn("cost", None, NUMBER),
)

ROW_WIDTH = len(RIDE_COLUMNS)
MIN_ROW_LENGTH = 15
FIRST_COLUMN = "A"
LAST_COLUMN = "T"


def decode(row: Optional[Sequence[Any]]) -> Optional[Ride]:
    """Build a ``Ride`` from a sheet row, or return ``None`` if the row is malformed."""
    if row is None or len(row) < MIN_ROW_LENGTH:
        return None
    values = {}
    for index, column in enumerate(RIDE_COLUMNS):
        cell = row[index] if index < len(row) else None
        values[column.attribute] = column.parse(cell)
    return Ride(**values)


def encode(ride: Ride) -> List[Any]:
    """Return the ``ROW_WIDTH`` cell values for ``ride`` in column order."""
    return [column.format(getattr(ride, column.attribute)) for column in RIDE_COLUMNS]
