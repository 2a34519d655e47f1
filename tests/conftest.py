"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from auth import hash_password  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402

TEST_HASH_METHOD = "pbkdf2:sha256:1000"


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    PASSWORD_HASH_METHOD = TEST_HASH_METHOD
    CORS_ORIGINS = "*"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def create_user(app: Flask):
    """Persist a user directly and return its id."""

    def _create(
        email: str = "alice@x.com",
        password: str = "secret1",
        *,
        username: str = "alice",
        phone: str = "1234567890",
        is_admin: bool = False,
    ) -> int:
        with app.app_context():
            user = User(
                username=username,
                email=email,
                phone=phone,
                is_admin=is_admin,
                password_hash=hash_password(password, method=TEST_HASH_METHOD),
            )
            db.session.add(user)
            db.session.commit()
            return user.id

    return _create
