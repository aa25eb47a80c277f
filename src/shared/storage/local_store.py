"""Local key-value storage adapter backed by a single JSON document file."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class LocalStoreSettings(BaseModel):
    """Settings for the local key-value store."""
    path: Path = Field(..., description="JSON file holding every key of the store")
    encoding: str = Field(default="utf-8", description="File encoding")


class LocalKeyValueStore:
    """
    Synchronous string key-value store persisted to one JSON file.

    Behaves like browser local storage: keys and values are strings, every
    write replaces the whole document, and a missing file is an empty store.
    The document is read lazily on first access and cached afterwards.
    """

    def __init__(self, settings: LocalStoreSettings):
        """
        Initialize the local store.

        Args:
            settings: Local store configuration
        """
        self.settings = settings
        self._items: Optional[dict[str, str]] = None

    @property
    def items(self) -> dict[str, str]:
        """Get the cached key-value document (lazy initialization)."""
        if self._items is None:
            self._items = self._read_document()
        return self._items

    def _read_document(self) -> dict[str, str]:
        path = self.settings.path
        if not path.exists():
            return {}

        try:
            raw = path.read_text(encoding=self.settings.encoding)
            document = json.loads(raw) if raw.strip() else {}
        except (OSError, ValueError) as e:
            logger.error("Could not read local store %s, starting empty: %s", path, e)
            return {}

        if not isinstance(document, dict):
            logger.error("Local store %s does not hold a JSON object, starting empty", path)
            return {}

        return {str(key): value for key, value in document.items() if isinstance(value, str)}

    def _write_document(self, document: dict[str, str]) -> None:
        """Write the whole document atomically via a temp file in the same directory."""
        path = self.settings.path
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=self.settings.encoding) as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise RuntimeError(f"Failed to write local store {path}: {str(e)}") from e

    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Store key

        Returns:
            The stored string, or None if the key is absent
        """
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, overwriting any previous value.

        Args:
            key: Store key
            value: String value to store

        Raises:
            RuntimeError: If the store file cannot be written
        """
        document = {**self.items, key: value}
        self._write_document(document)
        self._items = document

