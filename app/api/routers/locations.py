"""Locations API router: register, list, read, history, remove."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_location_registrar
from app.application.location_registrar import LocationRegistrar
from app.domain.models.location import AddLocation, LocationUpdateLogEvent
from app.domain.schemas.location import (
    AddLocationRequest,
    LocationResponse,
    LocationSchema,
    LocationUpdateLogEventResponse,
)

router = APIRouter()


def _event_to_response(event: LocationUpdateLogEvent) -> LocationUpdateLogEventResponse:
    return LocationUpdateLogEventResponse(
        id=event.id,
        location_id=event.location_id,
        status=event.status,
        message=event.message,
        created_at=event.created_at,
    )


@router.post("/", response_model=LocationSchema, status_code=status.HTTP_201_CREATED)
async def add_location(
    body: AddLocationRequest,
    registrar: Annotated[LocationRegistrar, Depends(get_location_registrar)],
):
    """Register a location. ValidationError (unknown type, unreadable target) maps to 400."""
    added = await registrar.add_location(AddLocation(type=body.type, target=body.target))
    return LocationSchema.model_validate(added)


@router.get("/", response_model=List[LocationResponse])
async def list_locations(
    registrar: Annotated[LocationRegistrar, Depends(get_location_registrar)],
):
    return await registrar.locations()


@router.get("/{location_id}", response_model=LocationResponse)
async def get_location(
    location_id: str,
    registrar: Annotated[LocationRegistrar, Depends(get_location_registrar)],
):
    return await registrar.location(location_id)


@router.get("/{location_id}/history", response_model=List[LocationUpdateLogEventResponse])
async def get_location_history(
    location_id: str,
    registrar: Annotated[LocationRegistrar, Depends(get_location_registrar)],
):
    """Update log of a location, oldest first."""
    events = await registrar.location_history(location_id)
    return [_event_to_response(e) for e in events]


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_location(
    location_id: str,
    registrar: Annotated[LocationRegistrar, Depends(get_location_registrar)],
):
    await registrar.remove_location(location_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
