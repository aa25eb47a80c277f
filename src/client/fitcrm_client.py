"""FitCRM HTTP Client for consuming the FitCRM API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    ClientDetailResponse,
    ClientFormRequest,
    ClientTableResponse,
    DeleteClientResponse,
    ExerciseSuggestionsResponse,
    FormStateResponse,
    SessionResponse,
    SubmitClientResponse,
)


class FitCRMClient:
    """HTTP client for interacting with the FitCRM API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the FitCRM client.

        Args:
            base_url: Base URL of the FitCRM API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying HTTP client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with FitCRMClient(...) as client:'")
        return self._client

    async def list_clients(self, query: str | None = None) -> ClientTableResponse:
        """
        Get the client table, optionally filtered by name.

        Args:
            query: Case-insensitive name filter; None or "" shows everyone

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params = {"q": query} if query is not None else None
        response: Response = await self.client.get("/api/v1/clients/", params=params)
        response.raise_for_status()
        return ClientTableResponse(**response.json())

    async def view_client(self, client_id: int) -> ClientDetailResponse:
        """
        Open a client's detail view.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/api/v1/clients/{client_id}")
        response.raise_for_status()
        return ClientDetailResponse(**response.json())

    async def suggest_exercises(self, client_id: int) -> ExerciseSuggestionsResponse:
        """
        Get suggested exercises for a client's next session.

        Raises:
            httpx.HTTPStatusError: If the request fails (409 if the view changed meanwhile)
        """
        response: Response = await self.client.get(f"/api/v1/clients/{client_id}/exercises")
        response.raise_for_status()
        return ExerciseSuggestionsResponse(**response.json())

    async def begin_edit(self, client_id: int) -> FormStateResponse:
        """
        Put the form in Edit mode for a client.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.post(f"/api/v1/clients/{client_id}/edit")
        response.raise_for_status()
        return FormStateResponse(**response.json())

    async def delete_client(self, client_id: int, confirm: bool) -> DeleteClientResponse:
        """
        Delete a client.

        Args:
            client_id: ID of the client
            confirm: Answer to the confirmation prompt; nothing is deleted when False

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.delete(
            f"/api/v1/clients/{client_id}",
            params={"confirm": str(confirm).lower()},
        )
        response.raise_for_status()
        return DeleteClientResponse(**response.json())

    async def get_form(self) -> FormStateResponse:
        response: Response = await self.client.get("/api/v1/form/")
        response.raise_for_status()
        return FormStateResponse(**response.json())

    async def new_client_form(self) -> FormStateResponse:
        response: Response = await self.client.post("/api/v1/form/new")
        response.raise_for_status()
        return FormStateResponse(**response.json())

    async def submit_form(self, request: ClientFormRequest) -> SubmitClientResponse:
        """
        Submit the client form (adds or saves changes depending on the form mode).

        Args:
            request: Raw form fields

        Raises:
            httpx.HTTPStatusError: If the request fails (400 carries the validation message)
        """
        response: Response = await self.client.post(
            "/api/v1/form/submit",
            json=request.model_dump(mode="json"),
        )
        response.raise_for_status()
        return SubmitClientResponse(**response.json())

    async def cancel_edit(self) -> FormStateResponse:
        response: Response = await self.client.post("/api/v1/form/cancel")
        response.raise_for_status()
        return FormStateResponse(**response.json())

    async def edit_viewed_client(self) -> FormStateResponse:
        """
        Edit the client shown in the detail view.

        Raises:
            httpx.HTTPStatusError: 400 if no client is selected, 404 if it was deleted
        """
        response: Response = await self.client.post("/api/v1/detail/edit")
        response.raise_for_status()
        return FormStateResponse(**response.json())

    async def get_session(self) -> SessionResponse:
        response: Response = await self.client.get("/api/v1/session")
        response.raise_for_status()
        return SessionResponse(**response.json())
