"""
Abstract repository contract shared by all resource types.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(ABC, Generic[RecordT]):
    """Storage for records of a single model, addressed by ``key_field``.

    Each call is atomic for the single row it touches; nothing spans
    two calls.
    """

    def __init__(self, model: Type[RecordT], key_field: str = "id") -> None:
        self.model = model
        self.key_field = key_field

    def key_of(self, record: RecordT) -> Any:
        return getattr(record, self.key_field)

    @abstractmethod
    def find_all(self) -> List[RecordT]:
        """Return every stored record in store order."""

    @abstractmethod
    def find_by_id(self, key: Any) -> Optional[RecordT]:
        """Return the record stored under ``key`` or ``None``."""

    @abstractmethod
    def save(self, record: RecordT) -> RecordT:
        """Insert or replace ``record`` and return the stored value.

        A record whose key is ``None`` is inserted and receives a
        store-assigned key.
        """

    @abstractmethod
    def delete(self, key: Any) -> None:
        """Remove the record stored under ``key``."""
