"""
Application package initializer.

The API is split into a few small layers: ``core`` holds settings,
logging and the Google Sheets client, ``schemas`` the pydantic
models exchanged with clients, ``services`` the row mapping and ride
operations, and ``api`` the HTTP routes grouped by version.
"""

from .main import app  # noqa: F401
