"""
Pydantic models for the spreadsheet connection check.

``ConnectionReport`` is returned by ``GET /test`` and tells the client
whether the service account can read the ride sheet and write to the
spreadsheet.  A successful write check leaves a throwaway tab behind,
whose name is reported so the client can remove it with
``POST /test/delete``.
"""

from typing import Optional

from pydantic import Field

from .ride import CamelModel


class ConnectionReport(CamelModel):
    success: bool
    read_success: bool
    write_success: bool
    # Only present when the write check succeeded.
    test_sheet_name: Optional[str] = None
    message: str


class DeleteSheetRequest(CamelModel):
    sheet_name: Optional[str] = Field(default=None, examples=["test-sheet-2024-05-01"])


class DeleteSheetResult(CamelModel):
    success: bool
    message: str
