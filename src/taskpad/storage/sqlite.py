# src/taskpad/storage/sqlite.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class SqliteStorage:
    """
    SQLite key-value storage.

    One table, created if missing:
      kv(key TEXT PRIMARY KEY, value TEXT NOT NULL, updated_at REAL NOT NULL)

    Each method opens its own SQLite connection, so there is nothing to close.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._ensure_schema()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open {self._db_path}: {e}") from e
        logger.info("SqliteStorage ready db=%s", self._db_path)

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def get(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
            try:
                cur = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
                row = cur.fetchone()
                return str(row["value"]) if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read key={key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv(key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE
                        SET value = excluded.value,
                            updated_at = excluded.updated_at
                    """,
                    (key, value, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write key={key!r}: {e}") from e
        logger.debug("Stored key=%s bytes=%d", key, len(value))
