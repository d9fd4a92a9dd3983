"""HTTP boundary — status codes, HTTP Basic acting account, response shapes."""

from fastapi.testclient import TestClient

from social_media_api.app.core.db import connection_factory
from social_media_api.app.gateways import SqliteAccountGateway
from social_media_api.app.main import create_app


def register(client, username="alice", password="alice-pw"):
    return client.post("/register", json={"username": username, "password": password})


def post_message(client, account_id, auth, text="hello", epoch=1669947792):
    return client.post(
        "/messages",
        json={"posted_by": account_id, "message_text": text, "time_posted_epoch": epoch},
        auth=auth,
    )


def test_register_returns_201_without_password(client):
    res = register(client)

    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "alice"
    assert body["account_id"] > 0
    assert "password" not in body


def test_register_duplicate_returns_409(client):
    register(client)

    res = register(client, password="other-pw")

    assert res.status_code == 409


def test_register_short_password_returns_400(client):
    assert register(client, password="abc").status_code == 400


def test_register_missing_field_returns_400(client):
    assert client.post("/register", json={"username": "alice"}).status_code == 400


def test_login(client):
    account_id = register(client).json()["account_id"]

    ok = client.post("/login", json={"username": "alice", "password": "alice-pw"})
    bad = client.post("/login", json={"username": "alice", "password": "wrong"})
    unknown = client.post("/login", json={"username": "nobody", "password": "alice-pw"})

    assert ok.status_code == 200
    assert ok.json() == {"account_id": account_id, "username": "alice"}
    assert bad.status_code == 401
    assert unknown.status_code == 401
    assert bad.json() == unknown.json()


def test_message_lifecycle(client):
    alice_id = register(client).json()["account_id"]
    auth = ("alice", "alice-pw")

    created = post_message(client, alice_id, auth)
    assert created.status_code == 201
    message = created.json()

    assert client.get(f"/messages/{message['message_id']}").json() == message
    assert client.get("/messages").json() == [message]
    assert client.get(f"/accounts/{alice_id}/messages").json() == [message]

    patched = client.patch(
        f"/messages/{message['message_id']}", json={"message_text": "edited"}, auth=auth
    )
    assert patched.status_code == 200
    assert patched.json() == {**message, "message_text": "edited"}

    deleted = client.delete(f"/messages/{message['message_id']}", auth=auth)
    assert deleted.status_code == 200
    assert deleted.json()["message_text"] == "edited"
    assert client.get(f"/messages/{message['message_id']}").status_code == 404


def test_post_message_without_credentials_returns_400(client):
    alice_id = register(client).json()["account_id"]

    assert post_message(client, alice_id, auth=None).status_code == 400


def test_post_message_with_bad_credentials_returns_401(client):
    alice_id = register(client).json()["account_id"]

    assert post_message(client, alice_id, auth=("alice", "nope")).status_code == 401


def test_post_message_too_long_returns_400(client):
    alice_id = register(client).json()["account_id"]

    res = post_message(client, alice_id, ("alice", "alice-pw"), text="z" * 255)

    assert res.status_code == 400


def test_other_account_cannot_modify_message(client):
    alice_id = register(client).json()["account_id"]
    register(client, "bob", "bob-pw")
    message = post_message(client, alice_id, ("alice", "alice-pw")).json()
    url = f"/messages/{message['message_id']}"

    assert client.patch(url, json={"message_text": "mine now"}, auth=("bob", "bob-pw")).status_code == 403
    assert client.delete(url, auth=("bob", "bob-pw")).status_code == 403
    assert client.delete(url).status_code == 403
    assert client.get(url).json() == message


def test_delete_missing_message_returns_404(client):
    register(client)

    assert client.delete("/messages/999", auth=("alice", "alice-pw")).status_code == 404


def test_account_messages_empty_list(client):
    res = client.get("/accounts/42/messages")

    assert res.status_code == 200
    assert res.json() == []


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_message_id_beyond_sqlite_range_returns_404(client):
    assert client.get(f"/messages/{2 ** 70}").status_code == 404


def test_account_id_beyond_sqlite_range_lists_nothing(client):
    res = client.get(f"/accounts/{2 ** 70}/messages")

    assert res.status_code == 200
    assert res.json() == []


def test_post_message_with_out_of_range_timestamp_returns_400(client):
    alice_id = register(client).json()["account_id"]

    res = post_message(client, alice_id, ("alice", "alice-pw"), epoch=2 ** 70)

    assert res.status_code == 400
    assert client.get("/messages").json() == []


def test_register_with_lone_surrogate_returns_400(client):
    # Escaped in the JSON text so the client does not have to encode it.
    res = client.post(
        "/register",
        content='{"username": "carol", "password": "\\ud800abcd"}',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400


def test_app_uses_database_path_it_was_created_with(tmp_path):
    path = str(tmp_path / "chosen.db")
    app = create_app(database_path=path)

    with TestClient(app) as test_client:
        res = register(test_client, "dora", "dora-pw")

    assert res.status_code == 201
    stored = SqliteAccountGateway(connection_factory(path)).find_by_username("dora")
    assert stored is not None
    assert stored.account_id == res.json()["account_id"]
