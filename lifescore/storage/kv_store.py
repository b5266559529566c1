"""
Key-value stores backing the standing cache.

The cache only needs get/set/delete on string keys and values, so the
backend is injected: an in-memory dict for tests and single-process use,
PostgreSQL (psycopg2 thread-safe connection pool) for durable storage.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from psycopg2 import pool


class KeyValueStore(ABC):
    """String key-value storage used by the standing cache."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, overwriting any existing one."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Contents live as long as the process."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()


class PostgresKeyValueStore(KeyValueStore):
    """
    PostgreSQL key-value storage.
    Why: Keep cached standings across restarts and API workers.
    """

    def __init__(self, connection_string: Optional[str] = None):
        """
        Initialize store with database connection.

        Args:
            connection_string: PostgreSQL connection string.
                             Defaults to DATABASE_URL env var.
        """
        self.connection_string = connection_string or os.getenv('DATABASE_URL')
        self._pool: Optional[pool.ThreadedConnectionPool] = None

    def _get_connection(self):
        """Get a connection from the pool."""
        if not self._pool:
            self._pool = pool.ThreadedConnectionPool(
                1, 10,  # min 1, max 10 connections
                self.connection_string
            )
        return self._pool.getconn()

    def _release_connection(self, conn):
        """Return connection to pool."""
        if self._pool:
            self._pool.putconn(conn)

    def init_schema(self) -> None:
        """Create the lifescore_kv table if it doesn't exist."""
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    CREATE TABLE IF NOT EXISTS lifescore_kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMP NOT NULL
                    );
                """)
                conn.commit()
        finally:
            self._release_connection(conn)

    def get(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT value FROM lifescore_kv WHERE key = %s",
                    (key,)
                )
                row = cur.fetchone()
                return row[0] if row else None
        finally:
            self._release_connection(conn)

    def set(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO lifescore_kv (key, value, updated_at)
                    VALUES (%s, %s, NOW())
                    ON CONFLICT (key) DO UPDATE SET
                        value = EXCLUDED.value,
                        updated_at = EXCLUDED.updated_at
                """, (key, value))
                conn.commit()
        finally:
            self._release_connection(conn)

    def delete(self, key: str) -> None:
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM lifescore_kv WHERE key = %s", (key,))
                conn.commit()
        finally:
            self._release_connection(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool:
            self._pool.closeall()
            self._pool = None
