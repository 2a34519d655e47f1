"""Authentication blueprint providing register, login and user endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify
from werkzeug.exceptions import BadRequest

from auth import auth_gate, hash_password, issue_token, verify_password
from storage import get_user_store
from utils.errors import AuthenticationError, DuplicateResourceError
from utils.request_validation import validated
from validators import LoginSchema, RegisterSchema

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/", methods=["GET"])
def home():
    return jsonify({"message": "Welcome to the auth API."}), HTTPStatus.OK


@auth_bp.route("/register", methods=["POST"])
@validated(RegisterSchema)
def register(payload: RegisterSchema) -> tuple:
    """Register a new user and return an access token."""
    store = get_user_store()

    if store.find_by_email(payload.email) is not None:
        raise DuplicateResourceError()

    password_hash = hash_password(
        payload.password, method=current_app.config["PASSWORD_HASH_METHOD"]
    )
    user = store.create(
        username=payload.username,
        email=payload.email,
        phone=payload.phone,
        password_hash=password_hash,
    )
    token = issue_token(user, auth_gate.settings())
    current_app.logger.info("Registered user %s", user.id)

    return (
        jsonify(
            {
                "message": "Registration successful",
                "createdUser": user.to_dict(),
                "token": token,
                "userId": str(user.id),
            }
        ),
        HTTPStatus.CREATED,
    )


@auth_bp.route("/login", methods=["POST"])
@validated(LoginSchema)
def login(payload: LoginSchema) -> tuple:
    """Authenticate a user and return an access token."""
    store = get_user_store()

    user = store.find_by_email(payload.email)
    if user is None:
        raise BadRequest(AuthenticationError.description)

    if not verify_password(payload.password, user.password_hash):
        current_app.logger.info("Failed login for user %s", user.id)
        raise AuthenticationError()

    record = user.to_record()
    token = issue_token(record, auth_gate.settings())
    return (
        jsonify(
            {
                "message": "Login successful",
                "token": token,
                "userId": str(record.id),
            }
        ),
        HTTPStatus.CREATED,
    )


@auth_bp.route("/user", methods=["GET"])
@auth_gate.required
def user() -> tuple:
    """Return the authenticated user's record."""
    return jsonify(g.current_user.to_dict()), HTTPStatus.OK
