"""Durable key-value storage backed by a JSON file."""

import json
from dataclasses import dataclass
from pathlib import Path

from gallery_sync.services.identity import KeyValueStore


@dataclass
class JsonFileStore(KeyValueStore):
    """Stores string values in a single JSON object on disk."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        value = self._read().get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        """Persist a value for a key."""
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text(encoding="utf-8"))
