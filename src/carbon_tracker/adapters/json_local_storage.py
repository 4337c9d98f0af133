"""File-backed key-value storage for guest sessions."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from carbon_tracker.services.storage import LocalStorage

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileLocalStorage(LocalStorage):
    """Stores string values in a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return a stored value."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store a value and rewrite the file."""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Remove a value and rewrite the file."""
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning("Ignoring unreadable local storage at %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        tmp_path.replace(self.path)
