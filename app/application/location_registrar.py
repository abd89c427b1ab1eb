"""Location application service. Validates a candidate against ingestion, then persists it."""

import logging
from typing import List

from app.application.location_repository import LocationRepository
from app.domain.exceptions import ValidationError
from app.domain.models.location import (
    AddLocation,
    Location,
    LocationUpdateLogEvent,
    StoredLocationRecord,
)
from app.domain.schemas.location import CurrentStatusSchema, LocationResponse, LocationSchema
from app.domain.validators.location_validator import (
    validate_add_location,
    validate_reader_outputs,
)
from app.ingestion.interface import IngestionModel


def _record_to_response(record: StoredLocationRecord) -> LocationResponse:
    return LocationResponse(
        current_status=CurrentStatusSchema(
            message=record.current_status.message,
            status=record.current_status.status,
            timestamp=record.current_status.timestamp,
        ),
        data=LocationSchema(
            id=record.data.id,
            type=record.data.type,
            target=record.data.target,
        ),
    )


class LocationRegistrar:
    """
    Application-layer orchestration only. No HTTP, no direct infrastructure.
    Stateless: all state lives in the repository. Failures are never retried.
    """

    def __init__(
        self,
        repository: LocationRepository,
        ingestion_model: IngestionModel,
        logger: logging.Logger,
    ) -> None:
        self._repository = repository
        self._ingestion_model = ingestion_model
        self._logger = logger

    async def add_location(self, candidate: AddLocation) -> Location:
        """
        Read the candidate through ingestion and persist it only if every output is data.
        Raises ValidationError for unknown types or unreadable targets; nothing is persisted then.
        """
        try:
            validate_add_location(candidate)
            outputs = await self._ingestion_model.read_location(candidate.type, candidate.target)
            validate_reader_outputs(candidate, outputs)
        except ValidationError as e:
            self._logger.warning(
                "location_validation_failed",
                extra={
                    "location_type": candidate.type,
                    "target": candidate.target,
                    "error": e.message,
                },
            )
            raise

        added = await self._repository.add_location(candidate)
        self._logger.info(
            "location_added",
            extra={
                "location_id": added.id,
                "location_type": added.type,
                "target": added.target,
            },
        )
        return added

    async def remove_location(self, location_id: str) -> None:
        await self._repository.remove_location(location_id)
        self._logger.info("location_removed", extra={"location_id": location_id})

    async def locations(self) -> List[LocationResponse]:
        """All stored locations projected into {current_status, data}, in storage order."""
        records = await self._repository.locations()
        return [_record_to_response(r) for r in records]

    async def location_history(self, location_id: str) -> List[LocationUpdateLogEvent]:
        return await self._repository.location_history(location_id)

    async def location(self, location_id: str) -> LocationResponse:
        """One stored location projected into {current_status, data}. Raises NotFoundError if unknown."""
        record = await self._repository.location(location_id)
        return _record_to_response(record)
