"""Persistent store for the client list: one JSON blob under one fixed key."""
import json
import logging

from pydantic import TypeAdapter

from src.app.core.domain.models import Client
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.shared.storage.local_store import LocalKeyValueStore

logger = logging.getLogger(__name__)

CLIENTS_STORAGE_KEY = "fitCRM_clients"

_client_list_adapter = TypeAdapter(list[ClientEntity])


class ClientStore:
    """
    Serializes the ordered client list to the local key-value store.

    A save is always a full snapshot that overwrites the previous blob.
    """

    def __init__(self, store: LocalKeyValueStore, mapper: ClientMapper, key: str = CLIENTS_STORAGE_KEY):
        self.store = store
        self.mapper = mapper
        self.key = key

    def load(self) -> list[Client]:
        """
        Load the client list.

        Returns:
            Clients in stored order; an empty list when the key is absent or the
            blob cannot be parsed (the failure is logged, never raised).
        """
        stored = self.store.get_item(self.key)
        if not stored:
            return []

        try:
            entities = _client_list_adapter.validate_json(stored)
            return self.mapper.to_models(entities)
        except ValueError as e:
            logger.error("Could not parse stored clients under '%s': %s", self.key, e)
            return []

    def save(self, clients: list[Client]) -> None:
        """Serialize the full ordered client list, replacing whatever was stored."""
        records = [
            entity.model_dump(mode="json", by_alias=True)
            for entity in self.mapper.to_entities(clients)
        ]
        self.store.set_item(self.key, json.dumps(records))
        logger.debug("Saved %d clients under '%s'", len(records), self.key)
