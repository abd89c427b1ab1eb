# Ingestion layer: readers that check a location's content is readable.

from app.ingestion.file_reader import FileReader
from app.ingestion.interface import IngestionModel, LocationReader
from app.ingestion.reader_model import ReaderIngestionModel
from app.ingestion.url_reader import UrlReader

__all__ = [
    "FileReader",
    "IngestionModel",
    "LocationReader",
    "ReaderIngestionModel",
    "UrlReader",
]
