"""
In-memory repository.

Keeps records in an insertion-ordered dict and hands out integer keys
from a counter.  Used as the test double for ``SqliteRepository`` and
handy for running the API without a database file.
"""

import itertools
from typing import Any, Dict, List, Optional, Type

from .base import RecordT, Repository


class InMemoryRepository(Repository[RecordT]):
    def __init__(self, model: Type[RecordT], key_field: str = "id") -> None:
        super().__init__(model, key_field)
        self._records: Dict[Any, RecordT] = {}
        self._ids = itertools.count(1)

    def find_all(self) -> List[RecordT]:
        return list(self._records.values())

    def find_by_id(self, key: Any) -> Optional[RecordT]:
        return self._records.get(key)

    def save(self, record: RecordT) -> RecordT:
        key = self.key_of(record)
        if key is None:
            key = next(self._ids)
            while key in self._records:
                key = next(self._ids)
            record = record.model_copy(update={self.key_field: key})
        self._records[key] = record
        return record

    def delete(self, key: Any) -> None:
        self._records.pop(key, None)
