"""AccountService — registration rules, login, update hashing, delete."""

import pytest

from social_media_api.app.core.errors import ConflictError, ValidationError
from social_media_api.app.core.security import verify_password
from social_media_api.app.schemas.account import Account, AccountCredentials


def creds(username, password):
    return AccountCredentials(username=username, password=password)


def test_register_returns_account_with_hashed_password(account_service):
    account = account_service.register(creds("carol", "pa55word"))

    assert account.account_id > 0
    assert account.username == "carol"
    assert account.password != "pa55word"
    assert verify_password("pa55word", account.password)
    assert account_service.get_by_id(account.account_id) == account


def test_register_same_username_twice_conflicts(account_service):
    account_service.register(creds("carol", "pa55word"))

    with pytest.raises(ConflictError):
        account_service.register(creds("carol", "different"))

    assert [a.username for a in account_service.get_all()] == ["carol"]


@pytest.mark.parametrize("username", ["", "   ", "x" * 256])
def test_register_rejects_bad_username(account_service, username):
    with pytest.raises(ValidationError):
        account_service.register(creds(username, "pa55word"))

    assert account_service.get_all() == []


def test_register_rejects_short_password(account_service):
    with pytest.raises(ValidationError):
        account_service.register(creds("carol", "abc"))

    assert account_service.get_all() == []


def test_register_accepts_four_character_password(account_service):
    assert account_service.register(creds("carol", "abcd")).account_id > 0


def test_login_with_correct_password_returns_same_account(account_service, alice):
    logged_in = account_service.login(creds("alice", "alice-pw"))

    assert logged_in is not None
    assert logged_in.account_id == alice.account_id


@pytest.mark.parametrize("password", ["", "alice", "ALICE-PW", "alice-pw ", "x"])
def test_login_with_wrong_password_is_no_match(account_service, alice, password):
    assert account_service.login(creds("alice", password)) is None


def test_login_rejects_stored_hash_as_password(account_service, alice):
    assert account_service.login(creds("alice", alice.password)) is None


def test_login_unknown_username_is_no_match(account_service, alice):
    assert account_service.login(creds("nobody", "alice-pw")) is None


def test_update_hashes_plaintext_exactly_once(account_service, alice):
    changed = account_service.update(
        Account(account_id=alice.account_id, username="alice", password="new-secret")
    )

    assert changed
    assert account_service.login(creds("alice", "new-secret")) is not None
    assert account_service.login(creds("alice", "alice-pw")) is None


def test_update_can_rename(account_service, alice):
    account_service.update(Account(account_id=alice.account_id, username="alicia", password="alice-pw"))

    assert account_service.get_by_id(alice.account_id).username == "alicia"
    assert account_service.login(creds("alicia", "alice-pw")) is not None


def test_update_to_taken_username_conflicts(account_service, alice, bob):
    with pytest.raises(ConflictError):
        account_service.update(Account(account_id=bob.account_id, username="alice", password="bob-pw"))


def test_update_missing_account_returns_false(account_service):
    assert not account_service.update(Account(account_id=42, username="ghost", password="boo!"))


def test_update_validates_password(account_service, alice):
    with pytest.raises(ValidationError):
        account_service.update(Account(account_id=alice.account_id, username="alice", password="no"))


def test_delete_requires_id(account_service):
    with pytest.raises(ValidationError):
        account_service.delete(Account(username="alice", password="x"))


def test_delete_removes_account(account_service, alice):
    assert account_service.delete(alice)
    assert account_service.get_by_id(alice.account_id) is None
    assert not account_service.delete(alice)


@pytest.mark.parametrize("username,password", [("carol", "\ud800abcd"), ("\ud800carol", "pa55word")])
def test_register_rejects_unencodable_text(account_service, username, password):
    with pytest.raises(ValidationError):
        account_service.register(creds(username, password))

    assert account_service.get_all() == []


def test_login_with_unencodable_username_is_no_match(account_service, alice):
    assert account_service.login(creds("\ud800alice", "alice-pw")) is None
