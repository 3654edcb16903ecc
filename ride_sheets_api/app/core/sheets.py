"""
Thin wrapper around the Google Sheets v4 API.

``SheetsBackend`` exposes the handful of spreadsheet operations the
service needs (range read, range write, add/delete a tab and tab
lookup by title) and hides the ``googleapiclient`` resource chain.
Every failure coming out of Google's libraries or the httplib2
transport underneath them, including missing or invalid service
account credentials, is re‑raised as
``UpstreamError`` so route handlers only deal with one error type for
the remote side.

The API client is built lazily on first use.  A backend instance is
meant to live for a single request; nothing is shared between
requests.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .config import Settings
from .exceptions import UpstreamError


logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def _describe(error: Exception) -> str:
    """Return a short human readable message for an upstream error."""
    if isinstance(error, HttpError):
        reason = getattr(error, "reason", None)
        status = error.resp.status if error.resp is not None else "?"
        return f"HTTP {status}: {reason or error}"
    return str(error) or error.__class__.__name__


class SheetsBackend:
    """Google Sheets client bound to one spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_file: str = "credentials.json",
        credentials_json: str = "",
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self._credentials_file = credentials_file
        self._credentials_json = credentials_json
        self._credentials = None
        self._service = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsBackend":
        return cls(
            spreadsheet_id=settings.spreadsheet_id,
            credentials_file=settings.credentials_file,
            credentials_json=settings.credentials_json,
        )

    def _load_credentials(self):
        if self._credentials_json:
            info = json.loads(self._credentials_json)
            return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        if not os.path.exists(self._credentials_file):
            raise FileNotFoundError(f"Credentials file {self._credentials_file} does not exist")
        return service_account.Credentials.from_service_account_file(self._credentials_file, scopes=SCOPES)

    def _get_service(self):
        """Lazy-load the Sheets API resource."""
        if self._service is None:
            try:
                self._credentials = self._load_credentials()
                self._service = build("sheets", "v4", credentials=self._credentials, cache_discovery=False)
            except (GoogleAuthError, httplib2.HttpLib2Error, OSError, ValueError) as e:
                logger.error("Authentication error: %s", e)
                raise UpstreamError(f"Failed to authenticate with Google Sheets API: {_describe(e)}") from e
        return self._service

    def _execute(self, request, action: str) -> Dict[str, Any]:
        try:
            return request.execute()
        except (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            logger.error("Sheets API call failed while %s: %s", action, _describe(e))
            raise UpstreamError(_describe(e)) from e

    def authorize(self) -> None:
        """Obtain an access token, surfacing credential problems early."""
        self._get_service()
        try:
            self._credentials.refresh(Request())
        except (GoogleAuthError, OSError) as e:
            logger.error("Authentication error: %s", e)
            raise UpstreamError(f"Failed to authenticate with Google Sheets API: {_describe(e)}") from e

    def get_values(self, range_name: str) -> List[List[Any]]:
        """Read ``range_name`` and return its rows.

        Trailing empty cells and rows are omitted by the API, so rows
        may be shorter than the requested width.  An empty range yields
        an empty list.
        """
        service = self._get_service()
        request = service.spreadsheets().values().get(spreadsheetId=self.spreadsheet_id, range=range_name)
        response = self._execute(request, f"reading {range_name}")
        return response.get("values", [])

    def update_values(self, range_name: str, values: List[List[Any]]) -> None:
        """Overwrite ``range_name`` with ``values`` as raw (unparsed) input."""
        service = self._get_service()
        request = service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption="RAW",
            body={"values": values},
        )
        self._execute(request, f"writing {range_name}")

    def add_sheet(self, title: str) -> None:
        self._batch_update([{"addSheet": {"properties": {"title": title}}}], f"adding sheet {title}")

    def delete_sheet(self, sheet_id: int) -> None:
        self._batch_update([{"deleteSheet": {"sheetId": sheet_id}}], f"deleting sheet {sheet_id}")

    def find_sheet_id(self, title: str) -> Optional[int]:
        """Return the internal id of the tab named ``title``, or ``None``.

        Note that the first tab of a spreadsheet usually has id ``0``.
        """
        service = self._get_service()
        request = service.spreadsheets().get(spreadsheetId=self.spreadsheet_id)
        metadata = self._execute(request, "reading spreadsheet metadata")
        for sheet in metadata.get("sheets", []):
            properties = sheet.get("properties", {})
            if properties.get("title") == title:
                return properties.get("sheetId")
        return None

    def _batch_update(self, requests: List[Dict[str, Any]], action: str) -> None:
        service = self._get_service()
        request = service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id,
            body={"requests": requests},
        )
        self._execute(request, action)
