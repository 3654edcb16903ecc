"""
Top‑level package for the Ride Sheets API.

This file makes ``ride_sheets_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``ride_sheets_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
