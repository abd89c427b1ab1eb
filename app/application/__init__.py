# Application layer: services that orchestrate domain and infrastructure.

from app.application.location_registrar import LocationRegistrar
from app.application.location_repository import LocationRepository

__all__ = [
    "LocationRegistrar",
    "LocationRepository",
]
