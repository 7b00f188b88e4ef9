"""
Generic CRUD service shared by every resource type.

One ``ResourceService`` is built per resource type around that type's
repository.  Id-addressed operations (``get_by_id``, ``update`` and
``delete``) always look the record up first and raise
``EntityNotFoundError`` on a miss, so the repository never receives a
save or delete for a key it cannot resolve.  Authorization is checked
by the API layer before any of these methods is called.

The lookup and the following save or delete are two separate
repository calls with no lock between them: a concurrent delete in
that window makes an update re-create the row, or a delete a no-op.
"""

import logging
from typing import Any, Generic, List, Type

from pydantic import BaseModel

from ..core.errors import EntityNotFoundError
from ..repositories.base import RecordT, Repository

logger = logging.getLogger(__name__)


class ResourceService(Generic[RecordT]):
    """CRUD operations for one resource type.

    Parameters
    ----------
    kind : str
        Name used in messages, e.g. ``"MenuItemReview"``.
    record_model : Type[RecordT]
        Pydantic model of a stored record.
    repository : Repository
        Storage for the records.
    key_field : str
        Name of the key attribute (``"id"`` or ``"code"``).
    """

    def __init__(
        self,
        kind: str,
        record_model: Type[RecordT],
        repository: Repository[RecordT],
        key_field: str = "id",
    ) -> None:
        self.kind = kind
        self.record_model = record_model
        self.repository = repository
        self.key_field = key_field

    async def list_all(self) -> List[RecordT]:
        """Return every stored record; an empty store yields ``[]``."""
        return self.repository.find_all()

    async def get_by_id(self, key: Any) -> RecordT:
        """Return the record stored under ``key``.

        Raises
        ------
        EntityNotFoundError
            If no record has that key.
        """
        record = self.repository.find_by_id(key)
        if record is None:
            logger.info("%s with id %s not found", self.kind, key)
            raise EntityNotFoundError(self.kind, key)
        return record

    async def create(self, fields: BaseModel) -> RecordT:
        """Persist a new record built from ``fields``.

        For store-keyed resources the record is built without a key and
        the repository assigns one; for resources keyed by a caller
        supplied value (dining commons) ``fields`` carries it.
        """
        record = self.record_model(**fields.model_dump())
        saved = self.repository.save(record)
        logger.info("Created %s with id %s", self.kind, getattr(saved, self.key_field))
        return saved

    async def update(self, key: Any, fields: BaseModel) -> RecordT:
        """Replace every field of the record under ``key`` with ``fields``.

        Nothing of the old record survives except its key.
        """
        await self.get_by_id(key)
        data = fields.model_dump()
        data[self.key_field] = key
        saved = self.repository.save(self.record_model(**data))
        logger.info("Updated %s with id %s", self.kind, key)
        return saved

    async def delete(self, key: Any) -> str:
        """Remove the record under ``key`` and return a confirmation message."""
        await self.get_by_id(key)
        self.repository.delete(key)
        logger.info("Deleted %s with id %s", self.kind, key)
        return f"{self.kind} with id {key} deleted"
