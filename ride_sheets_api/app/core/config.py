"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can start locally with only a ``credentials.json`` file next
to the working directory.  In a deployment you should override these
via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ride Sheets API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Spreadsheet holding the ride rows and the name of the tab inside it.
    # Row 1 of the tab is a header row; rides start at row 2.
    spreadsheet_id: str = os.getenv("SPREADSHEET_ID", "1tXpIX3SJsRXexVd4xp83uPVTyVATiPvBjKLrltA4XUA")
    sheet_name: str = os.getenv("SHEET_NAME", "Booking_database")

    # Service account credentials.  ``GOOGLE_CREDENTIALS_JSON`` takes
    # precedence and must contain the key file contents; otherwise the
    # file at ``GOOGLE_CREDENTIALS_FILE`` is read.
    credentials_file: str = os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json")
    credentials_json: str = os.getenv("GOOGLE_CREDENTIALS_JSON", "")

    # Prefix under which all routes are mounted, e.g. ``/sheets``.
    api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")
    # Comma‑separated list of origins allowed by CORS.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
