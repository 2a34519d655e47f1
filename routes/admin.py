"""Administrative endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify

from auth import auth_gate
from storage import get_user_store

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/users", methods=["GET"])
@auth_gate.admin_required
def list_users() -> tuple:
    """Return every registered user without password digests."""
    users = get_user_store().list_records()
    return jsonify({"users": [user.to_dict() for user in users]}), HTTPStatus.OK
