"""HTTP client for the wger exercise catalog (read-only)."""
import logging
from typing import Optional

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.app.core.domain.models import ExerciseInfo
from src.shared.exceptions import ExerciseCatalogError

logger = logging.getLogger(__name__)


class ExerciseCatalogSettings(BaseModel):
    """Settings for the exercise catalog endpoint."""
    base_url: str = Field(default="https://wger.de/api/v2", description="Catalog API root")
    language_id: int = Field(default=2, description="Catalog language id (2 = English)")
    limit: int = Field(default=50, gt=0, description="Maximum items requested per fetch")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class ExerciseCatalogPage(BaseModel):
    """Body of an exerciseinfo listing."""
    results: list[ExerciseInfo] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    @field_validator("results", mode="before")
    @classmethod
    def missing_results_are_empty(cls, v):
        return [] if v is None else v


class ExerciseCatalog:
    """
    Fetches exercises from the wger exerciseinfo endpoint.

    One GET per call, no retries and no caching. Failures surface as
    ExerciseCatalogError so callers can turn them into placeholder text.
    """

    def __init__(self, settings: ExerciseCatalogSettings, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the catalog client.

        Args:
            settings: Endpoint configuration
            client: Optional httpx.AsyncClient. If not provided, a short-lived one
                    is opened for every fetch.
        """
        self.settings = settings
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.settings.base_url.rstrip('/')}/exerciseinfo/"

    @property
    def params(self) -> dict[str, int]:
        return {"language": self.settings.language_id, "limit": self.settings.limit}

    async def fetch_exercises(self) -> list[ExerciseInfo]:
        """
        Fetch one page of exercises.

        Returns:
            The catalog items, possibly empty

        Raises:
            ExerciseCatalogError: On network failure (no status code), a
                non-success status, or a body that is not a catalog listing
        """
        if self._client is not None:
            return await self._fetch(self._client)

        async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> list[ExerciseInfo]:
        try:
            response = await client.get(self.url, params=self.params)
        except httpx.RequestError as e:
            logger.error("Error loading exercises from %s: %s", self.url, e)
            raise ExerciseCatalogError(f"Failed to fetch: {e}") from e

        if not response.is_success:
            logger.error("Exercise catalog %s answered %d", self.url, response.status_code)
            raise ExerciseCatalogError(
                f"API request failed with status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            page = ExerciseCatalogPage.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("Exercise catalog %s returned an unexpected body: %s", self.url, e)
            raise ExerciseCatalogError(
                "API returned an unexpected response body",
                status_code=response.status_code,
            ) from e

        logger.info("Fetched %d exercises from the catalog", len(page.results))
        return page.results
