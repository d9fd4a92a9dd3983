"""
SQLite gateway for the ``message`` table.

``posted_by`` is stored by value.  Deleting an account leaves its
messages in place.
"""

import sqlite3
from typing import List, Optional

from ..schemas.message import Message
from .sqlite_base import SqliteGateway


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


class SqliteMessageGateway(SqliteGateway):
    """Message persistence backed by SQLite."""

    table = "message"

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> Message:
        return Message(
            message_id=row["message_id"],
            posted_by=row["posted_by"],
            message_text=row["message_text"],
            time_posted_epoch=row["time_posted_epoch"],
        )

    def get_by_id(self, record_id: int) -> Optional[Message]:
        row = self._fetch_one(
            f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
            (record_id,),
        )
        return self._row_to_message(row) if row else None

    def get_all(self) -> List[Message]:
        rows = self._fetch_all(f"SELECT {_COLUMNS} FROM message ORDER BY message_id")
        return [self._row_to_message(row) for row in rows]

    def find_by_account_id(self, account_id: int) -> List[Message]:
        rows = self._fetch_all(
            f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
            (account_id,),
        )
        return [self._row_to_message(row) for row in rows]

    def insert(self, record: Message) -> Message:
        cursor = self._execute(
            "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
            (record.posted_by, record.message_text, record.time_posted_epoch),
        )
        return record.model_copy(update={"message_id": cursor.lastrowid})

    def update(self, record: Message) -> bool:
        cursor = self._execute(
            "UPDATE message SET posted_by = ?, message_text = ?, time_posted_epoch = ? "
            "WHERE message_id = ?",
            (record.posted_by, record.message_text, record.time_posted_epoch, record.message_id),
        )
        return cursor.rowcount == 1

    def delete(self, record: Message) -> bool:
        cursor = self._execute(
            "DELETE FROM message WHERE message_id = ?",
            (record.message_id,),
        )
        return cursor.rowcount == 1
