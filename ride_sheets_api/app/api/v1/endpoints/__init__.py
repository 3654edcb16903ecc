"""
Endpoint subpackage for API v1.

``rides`` exposes ride listing and updates, ``connection`` the
spreadsheet connection check.  Both routers are aggregated in
``router.py``.
"""
