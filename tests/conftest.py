"""Shared fixtures: a fresh SQLite file per test, real gateways and services."""

import os

# Cheap hashing in tests; must be set before settings are imported.
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.api.deps import get_account_gateway, get_message_gateway
from social_media_api.app.core.db import connection_factory, init_db
from social_media_api.app.gateways import SqliteAccountGateway, SqliteMessageGateway
from social_media_api.app.main import create_app
from social_media_api.app.schemas.account import AccountCredentials
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "social_media_test.db")
    init_db(path)
    return path


@pytest.fixture
def account_gateway(db_path):
    return SqliteAccountGateway(connection_factory(db_path))


@pytest.fixture
def message_gateway(db_path):
    return SqliteMessageGateway(connection_factory(db_path))


@pytest.fixture
def account_service(account_gateway):
    return AccountService(account_gateway)


@pytest.fixture
def message_service(message_gateway, account_gateway):
    return MessageService(message_gateway, account_gateway)


@pytest.fixture
def alice(account_service):
    return account_service.register(AccountCredentials(username="alice", password="alice-pw"))


@pytest.fixture
def bob(account_service):
    return account_service.register(AccountCredentials(username="bob", password="bob-pw"))


@pytest.fixture
def client(account_gateway, message_gateway):
    app = create_app(initialize_db=False)
    app.dependency_overrides[get_account_gateway] = lambda: account_gateway
    app.dependency_overrides[get_message_gateway] = lambda: message_gateway
    with TestClient(app) as test_client:
        yield test_client
