"""FastAPI dependency injection: DB session, ingestion model, LocationRegistrar."""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.location_registrar import LocationRegistrar
from app.ingestion.file_reader import FileReader
from app.ingestion.interface import IngestionModel
from app.ingestion.reader_model import ReaderIngestionModel
from app.ingestion.url_reader import UrlReader
from app.infrastructure.database.location_repository_db import DbLocationRepository
from app.infrastructure.database.session import get_db

_ingestion_model: IngestionModel | None = None


def get_ingestion_model() -> IngestionModel:
    """Return singleton ingestion model over the built-in readers."""
    global _ingestion_model
    if _ingestion_model is None:
        _ingestion_model = ReaderIngestionModel([UrlReader(), FileReader()])
    return _ingestion_model


async def get_location_registrar(
    session: Annotated[AsyncSession, Depends(get_db)],
    ingestion_model: Annotated[IngestionModel, Depends(get_ingestion_model)],
) -> LocationRegistrar:
    """Build LocationRegistrar with injected repository, ingestion model, logger."""
    repository = DbLocationRepository(session=session)
    logger = logging.getLogger(__name__)
    return LocationRegistrar(
        repository=repository,
        ingestion_model=ingestion_model,
        logger=logger,
    )
