"""Credential store backends."""

from flask import current_app

from .abstract_storage import AbstractUserStore
from .sql_storage import SQLUserStore

__all__ = ["AbstractUserStore", "SQLUserStore", "get_user_store"]


def get_user_store() -> AbstractUserStore:
    """Return the store registered on the current application."""

    return current_app.extensions["user_store"]
