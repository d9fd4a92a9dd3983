"""
Persistence gateway contracts.

Services depend on these protocols, never on a concrete storage class.
The SQLite implementations in this package satisfy them structurally and
are handed to the services by ``api.deps`` (or by tests).

Every operation is a single statement.  ``insert`` returns the record
with its generated id; ``update`` and ``delete`` report whether exactly
one row matched the record's id.  Failures surface as ``ConflictError``
(unique constraint) or ``StorageError`` (anything else).
"""

from typing import List, Optional, Protocol, TypeVar

from ..schemas.account import Account
from ..schemas.message import Message


T = TypeVar("T")


class Gateway(Protocol[T]):
    """CRUD primitives for one record type."""

    def get_by_id(self, record_id: int) -> Optional[T]: ...

    def get_all(self) -> List[T]: ...

    def insert(self, record: T) -> T: ...

    def update(self, record: T) -> bool: ...

    def delete(self, record: T) -> bool: ...


class AccountGateway(Gateway[Account], Protocol):
    """Account storage with username lookups."""

    def find_by_username(self, username: str) -> Optional[Account]: ...

    def username_exists(self, username: str) -> bool: ...


class MessageGateway(Gateway[Message], Protocol):
    """Message storage with per-author listing."""

    def find_by_account_id(self, account_id: int) -> List[Message]: ...
