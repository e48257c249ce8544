# src/taskpad/storage/json_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Key-value storage kept in a single JSON object file.

    Every set() rewrites the whole file through a temporary sibling and
    os.replace, so readers never see a half-written file. A missing or
    unreadable file reads as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def close(self) -> None:
        """Compatibility hook for shutdown (the file is not held open)."""
        return

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError, RecursionError):
            logger.warning("Storage file %s is unreadable; treating as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; treating as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Failed to write {self._path}: {e}") from e
        with contextlib.suppress(Exception):
            # Best-effort: keep the task list private on disk.
            os.chmod(self._path, 0o600)
