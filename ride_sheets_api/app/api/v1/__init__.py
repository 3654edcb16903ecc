"""
Version 1 of the API.

The routes keep the paths the booking front‑end already calls
(``/rides``, ``/test``), so the version is not part of the URL.
"""
