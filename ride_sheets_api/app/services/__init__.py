"""
Service layer abstraction.

``row_codec`` and ``row_locator`` deal with the layout of the ride
sheet; ``ride_service`` and ``connection_service`` hold the logic the
API handlers delegate to.  Services receive their ``SheetsBackend``
in the constructor and keep no state between requests.
"""
