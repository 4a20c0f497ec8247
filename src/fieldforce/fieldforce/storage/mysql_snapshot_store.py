from __future__ import annotations

from typing import Optional

from ..core.constants import STORAGE_KEY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..state import snapshot as codec
from ..state.snapshot import AppSnapshot
from .repository import SnapshotStore


class MySQLSnapshotStore(SnapshotStore):
    """Snapshot kept as one row of the ``kv_store`` table.

    The single-row upsert is the atomic unit; nothing beyond it is promised.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, key: str = STORAGE_KEY):
        self._conn_factory = conn_factory
        self._key = key

    def load(self) -> Optional[AppSnapshot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT store_value
                FROM kv_store
                WHERE store_key=%s
                """,
                (self._key,),
            )
            row = fetchone(cur)
        if not row:
            return None
        return codec.loads(row["store_value"])

    def save(self, snapshot: AppSnapshot) -> None:
        blob = codec.dumps(snapshot)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store (store_key, store_value)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (self._key, blob),
            )
