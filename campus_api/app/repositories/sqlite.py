"""
SQLite-backed repository.

Columns are derived from the pydantic model's field names, so the
table created by the migrations in ``core/db.py`` must use the same
snake_case names.  Every call opens its own connection and closes it
before returning; storage errors (``sqlite3.Error``) propagate to the
caller unchanged.
"""

import logging
import sqlite3
from contextlib import closing
from typing import Any, Callable, List, Optional, Type

from .base import RecordT, Repository
from ..core.db import get_connection

logger = logging.getLogger(__name__)


class SqliteRepository(Repository[RecordT]):
    def __init__(
        self,
        table: str,
        model: Type[RecordT],
        key_field: str = "id",
        connection_factory: Callable[[], sqlite3.Connection] = get_connection,
    ) -> None:
        super().__init__(model, key_field)
        self.table = table
        self.connection_factory = connection_factory
        self.columns = list(model.model_fields)

    def _row_to_record(self, row: sqlite3.Row) -> RecordT:
        return self.model.model_validate(dict(row))

    def _values(self, record: RecordT, columns: List[str]) -> List[Any]:
        data = record.model_dump()
        # Timestamps are stored as ISO-8601 text without timezone.
        return [data[c].isoformat() if hasattr(data[c], "isoformat") else data[c] for c in columns]

    def find_all(self) -> List[RecordT]:
        with closing(self.connection_factory()) as conn:
            rows = conn.execute(f"SELECT * FROM {self.table} ORDER BY {self.key_field}").fetchall()
        return [self._row_to_record(row) for row in rows]

    def find_by_id(self, key: Any) -> Optional[RecordT]:
        with closing(self.connection_factory()) as conn:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE {self.key_field} = ?",
                (key,),
            ).fetchone()
        return self._row_to_record(row) if row else None

    def save(self, record: RecordT) -> RecordT:
        key = self.key_of(record)
        columns = self.columns if key is not None else [c for c in self.columns if c != self.key_field]
        placeholders = ", ".join("?" for _ in columns)
        verb = "INSERT OR REPLACE" if key is not None else "INSERT"
        with closing(self.connection_factory()) as conn:
            cursor = conn.execute(
                f"{verb} INTO {self.table} ({', '.join(columns)}) VALUES ({placeholders})",
                self._values(record, columns),
            )
            conn.commit()
            if key is None:
                key = cursor.lastrowid
                record = record.model_copy(update={self.key_field: key})
        logger.debug("Saved %s row %s", self.table, key)
        return record

    def delete(self, key: Any) -> None:
        with closing(self.connection_factory()) as conn:
            conn.execute(f"DELETE FROM {self.table} WHERE {self.key_field} = ?", (key,))
            conn.commit()
