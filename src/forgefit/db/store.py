"""JSON key-value store backed by a single SQLite table."""

import json
import logging
from pathlib import Path
from typing import Any

import aiosqlite

from ..errors import StorageError
from .engine import get_db_path

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Opaque blob store: one JSON value per logical key.

    Reads and writes either complete or raise ``StorageError``. A stored value
    that is not valid JSON is reported as absent. There are no transactions
    across keys.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str) -> Any | None:
        """Get the decoded value for ``key``, or None if absent or unreadable JSON."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(key, "read", e) from e

        if row is None:
            return None

        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.warning("Discarding unparseable value for %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any) -> None:
        """Serialize ``value`` as JSON and store it under ``key``."""
        payload = json.dumps(value)
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, payload),
                )
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(key, "write", e) from e
        logger.debug("Stored %s (%d bytes)", key, len(payload))

    async def delete(self, *keys: str) -> None:
        """Remove one or more keys. Missing keys are ignored."""
        if not keys:
            return
        placeholders = ", ".join("?" for _ in keys)
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    f"DELETE FROM kv_store WHERE key IN ({placeholders})", keys
                )
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(",".join(keys), "delete", e) from e
