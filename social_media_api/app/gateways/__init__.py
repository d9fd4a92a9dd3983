"""
Persistence gateways.

``base`` defines the protocols the services depend on; the ``Sqlite*``
classes implement them on top of ``core.db`` connections.
"""

from .account_gateway import SqliteAccountGateway
from .message_gateway import SqliteMessageGateway

__all__ = ["SqliteAccountGateway", "SqliteMessageGateway"]
