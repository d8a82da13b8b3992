"""File-based key-value store.

All keys live in a single JSON object file:

{
    "quinnjr.todomvc.self": "[{\"description\": \"buy milk\", ...}]"
}
"""

import json
import logging
from pathlib import Path

from todolist.todos.errors import PersistenceUnavailable

logger = logging.getLogger(__name__)


class JSONFileStore:
    """Key-value store persisted to one JSON file.

    Uses atomic writes (write to temp file, then rename) for safety.
    """

    def __init__(self, path: Path):
        """Open the store, creating its parent directory.

        Args:
            path: Location of the JSON file.

        Raises:
            PersistenceUnavailable: If the parent directory cannot be created
                or the path is not a regular file.
        """
        self._path = path
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceUnavailable(f"cannot open store at {path}: {e}") from e
        if self._path.exists() and not self._path.is_file():
            raise PersistenceUnavailable(f"store path is not a file: {path}")

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        """Load all keys, returning an empty mapping if the file is missing."""
        if not self._path.exists():
            return {}

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            logger.warning(
                "Store file is corrupt, starting fresh",
                extra={"path": str(self._path), "error": str(e)},
            )
            return {}
        except OSError as e:
            raise PersistenceUnavailable(f"cannot read {self._path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning(
                "Store file is not a JSON object, starting fresh",
                extra={"path": str(self._path)},
            )
            return {}
        dropped = sorted(k for k, v in data.items() if not isinstance(v, str))
        if dropped:
            logger.warning(
                "Dropping non-string values from store file: %s",
                ", ".join(dropped),
                extra={"path": str(self._path)},
            )
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        temp_file = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with temp_file.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            temp_file.replace(self._path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise PersistenceUnavailable(f"cannot write {self._path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        return True
