"""
Pydantic schema definitions for API payloads.

``ride`` holds the ride record and the bodies of ride update requests;
``connection`` the models used by the spreadsheet connection check.
"""
