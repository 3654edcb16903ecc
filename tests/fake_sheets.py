"""
In-memory stand-in for ``SheetsBackend`` used by the test suite.

Tabs are plain lists of rows (row 1 first).  Ranges are A1 strings of
the forms the service uses: ``Tab!A2:T``, ``Tab!A:A``, ``Tab!A5:T5``.
Like the real API, reads drop trailing blank cells and rows.
"""

import re
from typing import Any, Dict, List, Optional

from ride_sheets_api.app.core.exceptions import UpstreamError


RANGE_RE = re.compile(r"^(?P<sheet>[^!]+)!(?P<c1>[A-Z]+)(?P<r1>\d*):(?P<c2>[A-Z]+)(?P<r2>\d*)$")

HEADER = [
    "ID", "Booking ID", "Name", "Email", "Phone", "Service", "Date", "Time", "Pickup", "Dropoff",
    "Transmission", "Urgency", "Notes", "Status", "Assigned To", "Driver", "Assignment Status",
    "Assigned At", "Completed At", "Cost",
]


def column_index(letters: str) -> int:
    index = 0
    for letter in letters:
        index = index * 26 + (ord(letter) - ord("A") + 1)
    return index - 1


def make_row(ride_id: str, **overrides: Any) -> List[Any]:
    """Return a fully populated 20-cell ride row."""
    cells = {
        "booking_id": f"BK-{ride_id}",
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone_number": "+15550100",
        "service_type": "airport",
        "date": "2024-05-02",
        "time": "09:30",
        "pickup": "Terminal 1",
        "dropoff": "Main Street 5",
        "transmission": "automatic",
        "urgency": "high",
        "additional_notes": "two suitcases",
        "status": "new",
        "assigned_to": "",
        "driver": "",
        "assignment_status": "unassigned",
        "assigned_at": "",
        "completed_at": "",
        "cost": "",
    }
    cells.update(overrides)
    return [ride_id] + list(cells.values())


class FakeSheetsBackend:
    """Records every call and keeps tab contents in memory."""

    def __init__(self, spreadsheet: Optional[Dict[str, List[List[Any]]]] = None) -> None:
        self.tabs: Dict[str, List[List[Any]]] = {}
        self.sheet_ids: Dict[str, int] = {}
        self.reads: List[str] = []
        self.writes: List[tuple] = []
        self.deleted: List[int] = []
        self.fail_on: set = set()
        for title, rows in (spreadsheet or {}).items():
            self._create(title, [list(row) for row in rows])

    def _create(self, title: str, rows: List[List[Any]]) -> None:
        self.sheet_ids[title] = len(self.sheet_ids)
        self.tabs[title] = rows

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise UpstreamError(f"{operation} failed: The caller does not have permission")

    def _parse(self, range_name: str):
        match = RANGE_RE.match(range_name)
        assert match, f"unsupported range {range_name}"
        sheet = match.group("sheet")
        if sheet not in self.tabs:
            raise UpstreamError(f"Unable to parse range: {range_name}")
        first_row = int(match.group("r1") or 1) - 1
        last_row = int(match.group("r2")) if match.group("r2") else None
        return sheet, first_row, last_row, column_index(match.group("c1")), column_index(match.group("c2"))

    def authorize(self) -> None:
        self._check("authorize")

    def get_values(self, range_name: str) -> List[List[Any]]:
        self._check("get_values")
        self.reads.append(range_name)
        sheet, first_row, last_row, first_col, last_col = self._parse(range_name)
        rows = self.tabs[sheet][first_row:last_row]
        values = []
        for row in rows:
            cells = list(row[first_col:last_col + 1])
            while cells and cells[-1] in ("", None):
                cells.pop()
            values.append(cells)
        while values and not values[-1]:
            values.pop()
        return values

    def update_values(self, range_name: str, values: List[List[Any]]) -> None:
        self._check("update_values")
        self.writes.append((range_name, values))
        sheet, first_row, _, first_col, _ = self._parse(range_name)
        rows = self.tabs[sheet]
        for offset, new_row in enumerate(values):
            target = first_row + offset
            while len(rows) <= target:
                rows.append([])
            row = rows[target]
            while len(row) < first_col + len(new_row):
                row.append("")
            row[first_col:first_col + len(new_row)] = new_row

    def add_sheet(self, title: str) -> None:
        self._check("add_sheet")
        if title in self.tabs:
            raise UpstreamError(f'A sheet with the name "{title}" already exists.')
        self._create(title, [])

    def delete_sheet(self, sheet_id: int) -> None:
        self._check("delete_sheet")
        self.deleted.append(sheet_id)
        for title, existing in list(self.sheet_ids.items()):
            if existing == sheet_id:
                del self.sheet_ids[title]
                del self.tabs[title]

    def find_sheet_id(self, title: str) -> Optional[int]:
        self._check("find_sheet_id")
        return self.sheet_ids.get(title)
