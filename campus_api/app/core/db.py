"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  It uses SQLite as a lightweight embedded database; to
switch to another DBMS you would replace the connection logic and the
repository implementation in ``repositories/sqlite.py``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Tuple

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS help_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            requester_email TEXT NOT NULL,
            team_id TEXT NOT NULL,
            table_or_breakout_room TEXT NOT NULL,
            request_time TEXT NOT NULL,
            explanation TEXT NOT NULL,
            solved INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS menu_item_reviews (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            item_id INTEGER NOT NULL,
            reviewer_email TEXT NOT NULL,
            stars INTEGER NOT NULL,
            date_reviewed TEXT NOT NULL,
            comments TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS recommendation_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            requester_email TEXT NOT NULL,
            professor_email TEXT NOT NULL,
            explanation TEXT NOT NULL,
            date_requested TEXT NOT NULL,
            date_needed TEXT NOT NULL,
            done INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS articles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            url TEXT NOT NULL,
            explanation TEXT NOT NULL,
            email TEXT NOT NULL,
            date_added TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS dining_commons (
            code TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            has_sack_meal INTEGER NOT NULL,
            has_take_out_meal INTEGER NOT NULL,
            has_dining_cam INTEGER NOT NULL,
            latitude REAL NOT NULL,
            longitude REAL NOT NULL
        );
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path (or the special
    ``:memory:`` name), use it directly.  Otherwise resolve it relative
    to the package root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # campus_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    Timestamps are stored as ISO-8601 text and parsed by the pydantic
    schemas, so SQLite's own type detection is left disabled.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] or 0
        for version, script in MIGRATIONS:
            if version <= current_version:
                continue
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            conn.commit()
            logger.info("Applied migration %s", version)
    finally:
        conn.close()
