"""Tests covering registration, login and the protected user endpoint."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest
from flask.testing import FlaskClient

from auth import TokenSettings, issue_token
from models import db
from models.user import User, UserRecord

REGISTRATION = {
    "username": "alice",
    "email": "alice@x.com",
    "phone": "1234567890",
    "password": "secret1",
}


def _register(client: FlaskClient, **overrides):
    return client.post("/api/auth/register", json={**REGISTRATION, **overrides})


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _user_count(app) -> int:
    with app.app_context():
        return db.session.query(User).count()


def test_register_returns_token_and_user(client: FlaskClient, app):
    response = _register(client)

    assert response.status_code == 201
    data = response.get_json()
    assert isinstance(data["token"], str) and data["token"]
    assert isinstance(data["userId"], str)
    assert data["createdUser"]["email"] == "alice@x.com"
    assert data["createdUser"]["isAdmin"] is False
    assert "password" not in data["createdUser"]
    assert "password_hash" not in data["createdUser"]

    with app.app_context():
        stored = db.session.get(User, int(data["userId"]))
        assert stored.password_hash != "secret1"
        assert stored.username == "alice"


def test_same_password_produces_different_digests(client: FlaskClient, app):
    _register(client)
    _register(client, email="bob@x.com", username="bobby")

    with app.app_context():
        digests = {user.password_hash for user in User.query.all()}

    assert len(digests) == 2
    assert "secret1" not in digests


def test_duplicate_email_is_rejected_without_new_record(client: FlaskClient, app):
    assert _register(client).status_code == 201
    before = _user_count(app)

    response = _register(client, email="ALICE@x.com", username="alice2")

    assert response.status_code == 400
    assert response.get_json()["message"] == "User already exists"
    assert _user_count(app) == before


def test_register_validation_failure_lists_fields(client: FlaskClient, app):
    response = _register(client, email="alice@x.org", phone="12")

    assert response.status_code == 400
    payload = response.get_json()
    assert {detail["field"] for detail in payload["details"]} == {"email", "phone"}
    assert _user_count(app) == 0


def test_register_token_resolves_to_user(client: FlaskClient):
    token = _register(client).get_json()["token"]

    response = client.get("/api/auth/user", headers=_bearer(token))

    assert response.status_code == 200
    data = response.get_json()
    assert data["email"] == "alice@x.com"
    assert data["isAdmin"] is False
    assert "password_hash" not in data


def test_login_returns_token(client: FlaskClient, create_user):
    user_id = create_user()

    response = client.post(
        "/api/auth/login", json={"email": "alice@x.com", "password": "secret1"}
    )

    assert response.status_code == 201
    data = response.get_json()
    assert data["userId"] == str(user_id)
    assert data["token"]


def test_login_wrong_password_is_generic(client: FlaskClient, create_user):
    create_user()

    response = client.post(
        "/api/auth/login", json={"email": "alice@x.com", "password": "wrong-password"}
    )

    assert response.status_code == 401
    assert response.get_json()["message"] == "Invalid email or password"


@pytest.mark.parametrize(
    "payload, status_code",
    [
        ({"email": "alice@x.com"}, 400),
        ({"password": "secret1"}, 400),
        ({"email": "nobody@x.com", "password": "secret1"}, 400),
        ({"email": "alice@x.com", "password": "secret2"}, 401),
    ],
)
def test_login_validation(client: FlaskClient, create_user, payload, status_code):
    create_user()

    response = client.post("/api/auth/login", json=payload)

    assert response.status_code == status_code


def test_user_endpoint_without_header(client: FlaskClient):
    response = client.get("/api/auth/user")

    assert response.status_code == 401
    assert "email" not in response.get_json()


@pytest.mark.parametrize("header", ["Bearer", "Bearer not-a-token", "Token abc.def.ghi"])
def test_user_endpoint_with_malformed_token(client: FlaskClient, header):
    response = client.get("/api/auth/user", headers={"Authorization": header})

    assert response.status_code == 401


def test_expired_token_gets_the_same_generic_message(client: FlaskClient, app, create_user):
    user_id = create_user()
    settings = TokenSettings.from_config(app.config)
    record = UserRecord(id=user_id, username="alice", email="alice@x.com", phone="1234567890")
    expired = issue_token(record, settings, now=datetime.now(timezone.utc) - timedelta(days=8))

    expired_response = client.get("/api/auth/user", headers=_bearer(expired))
    missing_response = client.get("/api/auth/user")

    assert expired_response.status_code == 401
    body = expired_response.get_json()
    assert "email" not in body and "username" not in body
    assert body["message"] == missing_response.get_json()["message"]


def test_token_with_wrong_signature_is_rejected(client: FlaskClient, create_user):
    user_id = create_user()
    forged = issue_token(
        UserRecord(id=user_id, username="alice", email="alice@x.com", phone="1234567890"),
        TokenSettings(secret="attacker-chosen-secret-of-enough-length"),
    )

    response = client.get("/api/auth/user", headers=_bearer(forged))

    assert response.status_code == 401


def test_token_for_deleted_user_returns_404(client: FlaskClient, app):
    token = _register(client).get_json()["token"]
    with app.app_context():
        db.session.query(User).delete()
        db.session.commit()

    response = client.get("/api/auth/user", headers=_bearer(token))

    assert response.status_code == 404
    assert response.get_json()["message"] == "User not found."


def test_auth_home(client: FlaskClient):
    response = client.get("/api/auth/")

    assert response.status_code == 200
    assert "message" in response.get_json()


def test_authorized_requests_are_logged_at_debug(client: FlaskClient, app, caplog):
    token = _register(client).get_json()["token"]

    with caplog.at_level(logging.DEBUG, logger=app.logger.name):
        response = client.get("/api/auth/user", headers=_bearer(token))

    assert response.status_code == 200
    assert any("authorized" in record.getMessage() for record in caplog.records)
