"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class StorageSettings(BaseModel):
    """
    Local key-value storage settings.

    path: JSON file standing in for browser local storage.
    clients_key: Key holding the serialized client list.
    """

    path: Path = Path(".fitcrm/local_storage.json")
    clients_key: str = "fitCRM_clients"


class ExerciseApiSettings(BaseModel):
    """
    Exercise catalog settings (wger).

    language_id: Catalog language id; 2 is English.
    limit: Items requested per fetch.
    suggestion_count: Exercises shown per detail view visit.
    """

    base_url: str = "https://wger.de/api/v2"
    language_id: int = 2
    limit: int = 50
    suggestion_count: int = 5
    timeout: float = 10.0


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: STORAGE__PATH=/tmp/fitcrm.json, EXERCISE_API__LANGUAGE_ID=2
    """

    # Application metadata
    app_name: str = "FitCRM API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Nested settings groups
    storage: StorageSettings = StorageSettings()
    exercise_api: ExerciseApiSettings = ExerciseApiSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
