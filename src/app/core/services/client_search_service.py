"""Service for filtering the client list by name."""
import logging

from src.app.core.domain.models import Client, ClientTable
from src.app.core.services.client_table import build_client_table
from src.app.infrastructure.client_repository import ClientRepository

logger = logging.getLogger(__name__)


def filter_by_name(clients: list[Client], query: str | None) -> list[Client]:
    """
    Case-insensitive substring match of the query against full names.

    A blank query returns every client in insertion order.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(clients)
    return [c for c in clients if c.full_name and needle in c.full_name.lower()]


class ClientSearchService:
    """
    Produces the (possibly filtered) client table.

    Filtering only shapes the rendered projection; the repository is never
    touched beyond a read.
    """

    def __init__(self, repository: ClientRepository):
        self.repository = repository

    def search(self, query: str | None = None) -> list[Client]:
        clients = self.repository.get_all()
        matches = filter_by_name(clients, query)
        if query and query.strip():
            logger.info("Client search for '%s' matched %d of %d", query.strip(), len(matches), len(clients))
        return matches

    def table(self, query: str | None = None) -> ClientTable:
        """Render the client table for a search query (blank shows everyone)."""
        return build_client_table(self.search(query))
