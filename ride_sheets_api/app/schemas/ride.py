"""
Pydantic models for rides and ride update requests.

Rides are exchanged with the front‑end using camelCase keys
(``bookingId``, ``assignedTo`` and so on), while Python code uses
snake_case attributes.  The alias generator takes care of the
translation in both directions.

Enumerated fields (urgency, status, assignment status) are typed as
plain strings on ``Ride``: the rows are edited by hand in the
spreadsheet and an unexpected value must not make a row unreadable.
The allowed values are listed in the enums below and are enforced
where the API accepts them as input.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RideStatus(str, Enum):
    NEW = "new"
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class AssignmentStatus(str, Enum):
    UNASSIGNED = "unassigned"
    ASSIGNED = "assigned"


# Statuses that close a ride and stamp ``completed_at``.
FINAL_STATUSES = frozenset({RideStatus.COMPLETED.value, RideStatus.CANCELLED.value, RideStatus.NO_SHOW.value})


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Ride(CamelModel):
    """One booking row of the ride sheet."""

    id: str
    booking_id: str = ""
    name: str = ""
    email: str = ""
    phone_number: str = ""
    service_type: str = ""
    date: str = ""
    time: str = ""
    pickup: str = ""
    dropoff: str = ""
    transmission: str = ""
    urgency: str = Urgency.MEDIUM.value
    additional_notes: str = ""
    status: str = RideStatus.NEW.value
    assigned_to: Optional[str] = None
    driver: Optional[str] = None
    assignment_status: str = AssignmentStatus.UNASSIGNED.value
    assigned_at: Optional[str] = None
    completed_at: Optional[str] = None
    cost: Optional[float] = None

    @field_validator("assigned_to", "driver", "assigned_at", "completed_at", "cost", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        # A blank cell and a missing value mean the same thing.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AssignRideRequest(CamelModel):
    ride_id: Optional[str] = Field(default=None, examples=["R-1001"])
    user_id: Optional[str] = Field(default=None, examples=["driver-7"])


class RideStatusRequest(CamelModel):
    ride_id: Optional[str] = Field(default=None, examples=["R-1001"])
    status: Optional[str] = Field(default=None, examples=["completed"])


class RideCostRequest(CamelModel):
    """Body of a cost update.

    ``cost`` may be sent as ``null`` to clear a previously stored
    cost; only a body that omits the key entirely is rejected.  NaN and
    infinite values are refused.
    """

    ride_id: Optional[str] = Field(default=None, examples=["R-1001"])
    cost: Optional[float] = Field(default=None, allow_inf_nan=False, examples=[45.5])
