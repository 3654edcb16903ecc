"""
Spreadsheet connection check for API v1.

``GET /test`` reports whether the service account can read the ride
sheet and write to the spreadsheet.  The write check creates a tab;
``POST /test/delete`` removes it again.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ride_sheets_api.app.api.deps import get_connection_service
from ride_sheets_api.app.api.validation import require_fields
from ride_sheets_api.app.core.exceptions import NotFoundError, UpstreamError, ValidationError
from ride_sheets_api.app.schemas.connection import ConnectionReport, DeleteSheetRequest, DeleteSheetResult
from ride_sheets_api.app.services.connection_service import ConnectionService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ConnectionReport, response_model_exclude_none=True)
async def test_connection(service: ConnectionService = Depends(get_connection_service)) -> ConnectionReport:
    """Check read and write access to the spreadsheet.

    Partial failures are reported in the body with status 200;
    ``success`` is true only when both checks pass.  A failure to
    authenticate returns 500.
    """
    try:
        return await service.test_connection()
    except UpstreamError as e:
        logger.error("Sheet connection test failed: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Connection test failed: {e}")


@router.post("/delete", response_model=DeleteSheetResult)
async def delete_test_sheet(
    body: DeleteSheetRequest | None = None,
    service: ConnectionService = Depends(get_connection_service),
) -> DeleteSheetResult:
    """Delete a tab created by the connection check."""
    try:
        require_fields(body, ["sheet_name"])
        return await service.delete_test_sheet(body.sheet_name)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamError as e:
        logger.error("Failed to delete test sheet: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete test sheet: {e}",
        )
