"""
SQLite gateway for the ``account`` table.
"""

import sqlite3
from typing import List, Optional

from ..schemas.account import Account
from .sqlite_base import SqliteGateway


class SqliteAccountGateway(SqliteGateway):
    """Account persistence backed by SQLite."""

    table = "account"

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            account_id=row["account_id"],
            username=row["username"],
            password=row["password"],
        )

    def get_by_id(self, record_id: int) -> Optional[Account]:
        row = self._fetch_one(
            "SELECT account_id, username, password FROM account WHERE account_id = ?",
            (record_id,),
        )
        return self._row_to_account(row) if row else None

    def get_all(self) -> List[Account]:
        rows = self._fetch_all(
            "SELECT account_id, username, password FROM account ORDER BY account_id"
        )
        return [self._row_to_account(row) for row in rows]

    def find_by_username(self, username: str) -> Optional[Account]:
        row = self._fetch_one(
            "SELECT account_id, username, password FROM account WHERE username = ?",
            (username,),
        )
        return self._row_to_account(row) if row else None

    def username_exists(self, username: str) -> bool:
        row = self._fetch_one(
            "SELECT 1 FROM account WHERE username = ? LIMIT 1",
            (username,),
        )
        return row is not None

    def insert(self, record: Account) -> Account:
        """Insert an account and return it with the generated id.

        A duplicate username raises ``ConflictError`` from the UNIQUE
        constraint, even if a concurrent registration slipped past the
        service's ``username_exists`` check.
        """
        cursor = self._execute(
            "INSERT INTO account (username, password) VALUES (?, ?)",
            (record.username, record.password),
        )
        return record.model_copy(update={"account_id": cursor.lastrowid})

    def update(self, record: Account) -> bool:
        cursor = self._execute(
            "UPDATE account SET username = ?, password = ? WHERE account_id = ?",
            (record.username, record.password, record.account_id),
        )
        return cursor.rowcount == 1

    def delete(self, record: Account) -> bool:
        cursor = self._execute(
            "DELETE FROM account WHERE account_id = ?",
            (record.account_id,),
        )
        return cursor.rowcount == 1
