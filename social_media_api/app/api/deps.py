"""
FastAPI dependencies that wire gateways into services.

Handlers ask for services through ``Depends``.  Gateways connect to the
database file that ``create_app`` recorded on ``app.state``; tests may
instead replace ``get_account_gateway`` and ``get_message_gateway``
through ``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasicCredentials

from ..core.db import connection_factory
from ..core.security import resolve_acting_account, security
from ..gateways import SqliteAccountGateway, SqliteMessageGateway
from ..schemas.account import Account
from ..services.account_service import AccountService
from ..services.message_service import MessageService


def get_account_gateway(request: Request) -> SqliteAccountGateway:
    return SqliteAccountGateway(connection_factory(request.app.state.database_path))


def get_message_gateway(request: Request) -> SqliteMessageGateway:
    return SqliteMessageGateway(connection_factory(request.app.state.database_path))


def get_account_service(
    gateway: SqliteAccountGateway = Depends(get_account_gateway),
) -> AccountService:
    return AccountService(gateway)


def get_message_service(
    gateway: SqliteMessageGateway = Depends(get_message_gateway),
    account_gateway: SqliteAccountGateway = Depends(get_account_gateway),
) -> MessageService:
    return MessageService(gateway, account_gateway)


def get_acting_account(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    account_service: AccountService = Depends(get_account_service),
) -> Optional[Account]:
    """Account identified by the request's HTTP Basic credentials, if any."""
    return resolve_acting_account(credentials, account_service)
