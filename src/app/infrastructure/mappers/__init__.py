"""Infrastructure mappers for converting between domain models and stored records."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper

__all__ = [
    "ClientMapper",
]
