"""
Shared statement runner for the SQLite gateways.

Each call opens a connection from the injected factory, executes one
parameterized statement, commits on success and rolls back on failure,
then closes the connection.  ``sqlite3`` errors are translated into the
service error taxonomy here so no gateway leaks driver exceptions.
Parameters SQLite cannot bind (integers outside the signed 64-bit range,
strings with lone surrogates) cannot match any stored row: reads report
nothing found and writes raise ``ValidationError``.
"""

import logging
import sqlite3
from typing import Any, List, Optional, Sequence

from ..core.db import ConnectionFactory
from ..core.errors import ConflictError, StorageError, ValidationError


logger = logging.getLogger(__name__)

UNBINDABLE = (OverflowError, UnicodeEncodeError)


class SqliteGateway:
    """Base class holding the connection factory and statement helpers."""

    table: str = ""

    def __init__(self, connect: ConnectionFactory):
        self._connect = connect

    def _open(self) -> sqlite3.Connection:
        try:
            return self._connect()
        except sqlite3.Error as exc:
            logger.error("Could not connect for %s: %s", self.table, exc)
            raise StorageError("Database unavailable") from exc

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        """Run a write statement in its own transaction.

        The returned cursor has already been committed; callers read
        ``lastrowid`` or ``rowcount`` from it.
        """
        conn = self._open()
        try:
            cursor = conn.execute(sql, tuple(params))
            conn.commit()
            return cursor
        except UNBINDABLE as exc:
            conn.rollback()
            logger.info("Unbindable parameter for %s: %s", self.table, exc)
            raise ValidationError("Value out of range or not encodable") from exc
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if "UNIQUE" in str(exc):
                logger.info("Unique constraint rejected write to %s: %s", self.table, exc)
                raise ConflictError(f"Duplicate value in {self.table}") from exc
            logger.error("Constraint violation on %s: %s", self.table, exc)
            raise StorageError(f"Constraint violation on {self.table}") from exc
        except sqlite3.Error as exc:
            conn.rollback()
            logger.error("Write to %s failed: %s", self.table, exc)
            raise StorageError(f"Could not write to {self.table}") from exc
        finally:
            conn.close()

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        conn = self._open()
        try:
            return conn.execute(sql, tuple(params)).fetchone()
        except UNBINDABLE:
            return None
        except sqlite3.Error as exc:
            logger.error("Read from %s failed: %s", self.table, exc)
            raise StorageError(f"Could not read from {self.table}") from exc
        finally:
            conn.close()

    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        conn = self._open()
        try:
            return conn.execute(sql, tuple(params)).fetchall()
        except UNBINDABLE:
            return []
        except sqlite3.Error as exc:
            logger.error("Read from %s failed: %s", self.table, exc)
            raise StorageError(f"Could not read from {self.table}") from exc
        finally:
            conn.close()
