import logging
import time
from typing import Callable, Optional

from src.app.core.domain.models import Client
from src.app.infrastructure.client_store import ClientStore
from src.shared.exceptions import ConflictingEntityFound, EntityNotFound

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


class ClientRepository:
    """
    In-memory working copy of the client list for the current session.

    The list is read from the store once, at construction. Every mutation is
    flushed to the store as a full snapshot. Order is insertion order; edits
    keep a record's position and deletes remove it in place.
    """

    def __init__(self, store: ClientStore, clock: Callable[[], int] = _now_millis):
        self.store = store
        self.clock = clock
        self._clients: list[Client] = store.load()
        logger.info("Loaded %d clients from local storage", len(self._clients))

    def get_all(self) -> list[Client]:
        """Get all clients in insertion order (a copy, safe to filter)."""
        return list(self._clients)

    def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID."""
        return next((c for c in self._clients if c.id == client_id), None)

    def count(self) -> int:
        return len(self._clients)

    def next_id(self) -> int:
        """
        Get a fresh client ID derived from the current timestamp.

        Two clients created within the same millisecond still get distinct ids.
        """
        candidate = self.clock()
        highest = max((c.id for c in self._clients), default=0)
        return max(candidate, highest + 1)

    def add(self, client: Client) -> Client:
        """Append a client and persist."""
        if self.get_by_id(client.id) is not None:
            raise ConflictingEntityFound("Client", "id", client.id)
        self._flush([*self._clients, client])
        return client

    def update(self, client: Client) -> Client:
        """Replace the stored record with the same ID, keeping its position, and persist."""
        for index, existing in enumerate(self._clients):
            if existing.id == client.id:
                updated = list(self._clients)
                updated[index] = client
                self._flush(updated)
                return client
        raise EntityNotFound("Client", client.id)

    def remove(self, client_id: int) -> bool:
        """
        Remove a client by ID and persist.

        Returns:
            True if a record was removed, False if no record had that ID
        """
        remaining = [c for c in self._clients if c.id != client_id]
        if len(remaining) == len(self._clients):
            return False
        self._flush(remaining)
        return True

    def _flush(self, clients: list[Client]) -> None:
        """Persist a candidate list, then adopt it; a failed save leaves the working copy as it was."""
        self.store.save(clients)
        self._clients = clients
