"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``) and for creating the schema on application start
(``init_db``).  It uses SQLite as a lightweight embedded database; to
switch to another DBMS you would replace the connection logic and adapt
the SQL in the gateways.

Gateways never call ``get_connection`` directly.  They receive a
connection factory, which defaults to this function in production and is
replaced in tests.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Callable, Optional

from .config import settings


logger = logging.getLogger(__name__)

ConnectionFactory = Callable[[], sqlite3.Connection]

SCHEMA = """
CREATE TABLE IF NOT EXISTS account (
    account_id INTEGER PRIMARY KEY AUTOINCREMENT,
    username VARCHAR(255) NOT NULL UNIQUE,
    password VARCHAR(255) NOT NULL
);

CREATE TABLE IF NOT EXISTS message (
    message_id INTEGER PRIMARY KEY AUTOINCREMENT,
    posted_by INTEGER NOT NULL,
    message_text VARCHAR(255) NOT NULL,
    time_posted_epoch BIGINT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message (posted_by);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.
    """
    conn = sqlite3.connect(database_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def connection_factory(database_path: str) -> ConnectionFactory:
    """Return a zero-argument factory bound to ``database_path``."""

    def _connect() -> sqlite3.Connection:
        return get_connection(database_path)

    return _connect


def init_db(database_path: Optional[str] = None) -> None:
    """Create the ``account`` and ``message`` tables if they are missing."""
    path = database_path or get_database_path()
    conn = get_connection(path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
        logger.info("Database ready at %s", path)
    finally:
        conn.close()
