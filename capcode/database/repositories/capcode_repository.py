import psycopg
from psycopg import sql

from capcode.database.connection import get_connection
from capcode.storage.base import BaseStorageGateway
from capcode.storage.exceptions import StorageError
from capcode.storage.models import Record


class CapcodeRepository(BaseStorageGateway):
    """Writes derived capcodes to the configured PostgreSQL table.

    Expected schema::

        CREATE TABLE capcodes (
            id BIGSERIAL PRIMARY KEY,
            capcode TEXT NOT NULL,
            timestamp TIMESTAMPTZ NOT NULL
        );
    """

    def __init__(self, table_name: str) -> None:
        if not table_name:
            raise ValueError("table_name must be a non-empty string")
        self._table_name = table_name

    @property
    def table_name(self) -> str:
        return self._table_name

    def put(self, record: Record) -> None:
        """Insert one row. Driver and pool errors are raised as StorageError."""
        item = record.to_item()
        query = sql.SQL("INSERT INTO {} (capcode, timestamp) VALUES (%s, %s)").format(
            sql.Identifier(self._table_name)
        )
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, (item["capcode"], record.created_at))
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            raise StorageError(f"Failed to save to database: {exc}") from exc
