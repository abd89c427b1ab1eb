"""Pydantic schemas for location API and serialization. Strict validation, no DB or infrastructure."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.models.location import LocationUpdateStatus


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class AddLocationRequest(BaseModel):
    """Request schema for registering a location. No id; storage assigns it."""

    type: str = Field(..., min_length=1, description="Ingestion mechanism, e.g. 'url'")
    target: str = Field(..., min_length=1, description="Where to read from, e.g. a URI")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class LocationSchema(BaseModel):
    """Persisted location fields."""

    id: str
    type: str
    target: str

    model_config = {"from_attributes": True}


class CurrentStatusSchema(BaseModel):
    """Latest update-log fields of a location. All None until the location is first ingested."""

    message: Optional[str] = None
    status: Optional[LocationUpdateStatus] = None
    timestamp: Optional[datetime] = None


class LocationResponse(BaseModel):
    """Read-side projection: current status and location data, partitioned with no overlap."""

    current_status: CurrentStatusSchema = Field(..., alias="currentStatus")
    data: LocationSchema

    model_config = {"populate_by_name": True}


class LocationUpdateLogEventResponse(BaseModel):
    """One entry of a location's update history."""

    id: int
    location_id: str = Field(..., alias="locationId")
    status: LocationUpdateStatus
    message: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}
