"""
Persistence layer.

A repository owns the stored records of one resource type and
exposes ``find_all``, ``find_by_id``, ``save`` and ``delete``.  The
service layer depends only on this contract, so the SQLite
implementation can be swapped for the in-memory one in tests.
"""

from .base import Repository  # noqa: F401
from .memory import InMemoryRepository  # noqa: F401
from .sqlite import SqliteRepository  # noqa: F401
