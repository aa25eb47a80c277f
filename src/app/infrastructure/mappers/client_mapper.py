from datetime import date

from src.shared.storage.base_mapper import BaseRecordMapper
from src.app.core.domain.models import Client, Gender
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseRecordMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and the stored ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (stored record)."""
        return ClientEntity(
            id=model_instance.id,
            full_name=model_instance.full_name,
            age=model_instance.age,
            gender=model_instance.gender.value if model_instance.gender else "",
            email=model_instance.email,
            phone=model_instance.phone,
            goal=model_instance.goal,
            start_date=model_instance.start_date.isoformat(),
            end_date=model_instance.end_date.isoformat() if model_instance.end_date else "",
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (stored record) to Client (domain model)."""
        return Client(
            id=entity.id,
            full_name=entity.full_name,
            age=entity.age,
            gender=Gender(entity.gender) if entity.gender else None,
            email=entity.email,
            phone=entity.phone,
            goal=entity.goal,
            start_date=date.fromisoformat(entity.start_date),
            end_date=date.fromisoformat(entity.end_date) if entity.end_date else None,
        )
