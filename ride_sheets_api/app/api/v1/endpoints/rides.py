"""
Ride endpoints for API v1.

These routes list rides and apply the three supported updates
(assignment, status, cost).  They delegate to ``RideService``, which
reads and writes the ride sheet, and map its errors onto HTTP status
codes: missing body fields give 400, an unknown ride 404 and any
Google Sheets failure 500 with the upstream message in ``detail``.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ride_sheets_api.app.api.deps import get_ride_service
from ride_sheets_api.app.api.validation import require_fields
from ride_sheets_api.app.core.exceptions import NotFoundError, UpstreamError, ValidationError
from ride_sheets_api.app.schemas.ride import (
    AssignRideRequest,
    Ride,
    RideCostRequest,
    RideStatus,
    RideStatusRequest,
)
from ride_sheets_api.app.services.ride_service import RideService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Ride])
async def list_rides(service: RideService = Depends(get_ride_service)) -> List[Ride]:
    """Return every ride in the sheet, skipping malformed rows."""
    try:
        return await service.list_all()
    except UpstreamError as e:
        logger.error("Error fetching rides: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch rides: {e}")


@router.get("/unassigned", response_model=List[Ride])
async def list_unassigned_rides(service: RideService = Depends(get_ride_service)) -> List[Ride]:
    """Return rides that are unassigned or still ``new``."""
    try:
        return await service.list_unassigned()
    except UpstreamError as e:
        logger.error("Error fetching unassigned rides: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch unassigned rides: {e}",
        )


@router.post("/assign", response_model=Ride)
async def assign_ride(
    body: AssignRideRequest | None = None,
    service: RideService = Depends(get_ride_service),
) -> Ride:
    """Assign a ride to a user.

    The ride moves to ``pending`` with ``assignmentStatus`` set to
    ``assigned`` and ``assignedAt`` set to the current time.  Returns
    the updated ride.
    """
    try:
        require_fields(body, ["ride_id", "user_id"])
        return await service.assign(body.ride_id, body.user_id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamError as e:
        logger.error("Error assigning ride: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to assign ride: {e}")


@router.post("/status", response_model=Ride)
async def update_ride_status(
    body: RideStatusRequest | None = None,
    service: RideService = Depends(get_ride_service),
) -> Ride:
    """Change the status of a ride.

    ``completed``, ``cancelled`` and ``no-show`` also set
    ``completedAt``.  Unknown status values are rejected with 400.
    """
    allowed = [item.value for item in RideStatus]
    try:
        require_fields(body, ["ride_id", "status"])
        if body.status not in allowed:
            raise ValidationError(f"Invalid status {body.status}; expected one of: {', '.join(allowed)}")
        return await service.set_status(body.ride_id, body.status)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamError as e:
        logger.error("Error updating ride status: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update ride status: {e}",
        )


@router.post("/cost", response_model=Ride)
async def update_ride_cost(
    body: RideCostRequest | None = None,
    service: RideService = Depends(get_ride_service),
) -> Ride:
    """Set the cost of a ride; ``null`` clears it."""
    try:
        require_fields(body, ["ride_id", "cost"], nullable=["cost"])
        return await service.set_cost(body.ride_id, body.cost)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamError as e:
        logger.error("Error updating ride cost: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update ride cost: {e}",
        )
