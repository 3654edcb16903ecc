"""
Error types raised by the service layer.

Route handlers translate these into HTTP responses: ``ValidationError``
becomes 400, ``NotFoundError`` 404 and ``UpstreamError`` 500.  The
first two subclass ``ValueError`` so that callers which only care
about "bad input" can keep catching ``ValueError``.
"""


class RideSheetsError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(RideSheetsError, ValueError):
    """A request is missing required fields or carries invalid values."""


class NotFoundError(RideSheetsError, ValueError):
    """No ride row or sheet matches the requested identifier."""


class UpstreamError(RideSheetsError, RuntimeError):
    """The Google Sheets API (or authentication against it) failed."""
