"""Stockage clé-valeur SQLite des données de l'application."""
from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Protocol

from walkaround_checks.core.config import settings

RECORDS_DB_NAME = "walkaround.db"

logger = logging.getLogger(__name__)


def default_db_path() -> Path:
    return settings.DATA_DIR / RECORDS_DB_NAME


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes | None:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...


def _connect(path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def _managed_connection(path: Path) -> Iterator[sqlite3.Connection]:
    """Yield a SQLite connection that is always closed on exit."""

    conn = _connect(path)
    try:
        yield conn
        conn.commit()
    except Exception:
        if conn.in_transaction:
            conn.rollback()
        raise
    finally:
        conn.close()


class SqliteKeyValueStore:
    """Blobs indexed by a text key in a single SQLite table."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_db_path()
        self._initialized = False

    def connection(self) -> ContextManager[sqlite3.Connection]:
        if not self._initialized:
            self._init_schema()
        return _managed_connection(self.path)

    def _init_schema(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with _managed_connection(self.path) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
        logger.debug("[DB] kv_store ready at %s", self.path)
        self._initialized = True

    def get(self, key: str) -> bytes | None:
        with self.connection() as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        value = row["value"]
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    def set(self, key: str, value: bytes) -> None:
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, sqlite3.Binary(value)),
            )
