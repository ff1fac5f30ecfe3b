"""Durable ordered key-value store for car records."""

import contextlib
import logging
import sqlite3
import threading
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import StoreError
from ..models.car import Car
from .schema import init_db

logger = logging.getLogger(__name__)


class CarStore:
    """Ordered map from listing ID to ``Car``, persisted in SQLite.

    Values come back in insertion order. Overwriting an existing key keeps
    its original position. Every write is committed immediately, so the
    contents survive a process restart.

    ``lock`` is shared by every caller of this store. Hold it across a
    read-modify-write sequence to make it atomic per store.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path
        self.lock = threading.RLock()
        try:
            self._conn: sqlite3.Connection | None = init_db(db_path)
        except sqlite3.Error as e:
            raise StoreError(f"Could not open store at {db_path}: {e}") from e

    @property
    def conn(self) -> sqlite3.Connection:
        """Get the open connection, raising if the store was closed."""
        if self._conn is None:
            raise StoreError("Store is closed")
        return self._conn

    def get(self, key: str) -> Car | None:
        """Get a record by key.

        Args:
            key: The listing ID.

        Returns:
            The stored car, or None if the key is absent.
        """
        with self.lock:
            try:
                row = self.conn.execute(
                    "SELECT value FROM cars WHERE id = ?", (key,)
                ).fetchone()
            except sqlite3.Error as e:
                raise StoreError(f"Failed to read {key}: {e}", key=key) from e
        if row is None:
            return None
        return self._decode(key, row["value"])

    def insert(self, key: str, value: Car) -> Car | None:
        """Insert or overwrite a record.

        Args:
            key: The listing ID.
            value: The record to store under ``key``.

        Returns:
            The previous record stored under ``key``, or None.
        """
        with self.lock:
            previous = self.get(key)
            try:
                self.conn.execute(
                    """
                    INSERT INTO cars (id, value) VALUES (?, ?)
                    ON CONFLICT(id) DO UPDATE SET value = excluded.value
                    """,
                    (key, value.to_json()),
                )
                self.conn.commit()
            except sqlite3.Error as e:
                with contextlib.suppress(sqlite3.Error):
                    self.conn.rollback()
                raise StoreError(f"Failed to write {key}: {e}", key=key) from e
        logger.debug("Stored %s (overwrite=%s)", key, previous is not None)
        return previous

    def values(self) -> list[Car]:
        """Get every record in insertion order."""
        with self.lock:
            try:
                rows = self.conn.execute(
                    "SELECT id, value FROM cars ORDER BY seq"
                ).fetchall()
            except sqlite3.Error as e:
                raise StoreError(f"Failed to enumerate records: {e}") from e
        return [self._decode(row["id"], row["value"]) for row in rows]

    def last(self) -> Car | None:
        """Get the most recently inserted record, or None if empty."""
        with self.lock:
            try:
                row = self.conn.execute(
                    "SELECT id, value FROM cars ORDER BY seq DESC LIMIT 1"
                ).fetchone()
            except sqlite3.Error as e:
                raise StoreError(f"Failed to read last record: {e}") from e
        if row is None:
            return None
        return self._decode(row["id"], row["value"])

    def close(self) -> None:
        """Close the database connection."""
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _decode(self, key: str, raw: str) -> Car:
        try:
            return Car.model_validate_json(raw)
        except ValidationError as e:
            raise StoreError(f"Corrupt record {key}: {e}", key=key) from e

    def __len__(self) -> int:
        with self.lock:
            try:
                (count,) = self.conn.execute("SELECT COUNT(*) FROM cars").fetchone()
            except sqlite3.Error as e:
                raise StoreError(f"Failed to count records: {e}") from e
        return count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
