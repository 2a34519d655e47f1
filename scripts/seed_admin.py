"""Seed an administrator user."""

import os

from flask import Flask

from app import create_app
from auth import hash_password
from models import db
from storage import SQLUserStore

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PHONE = os.getenv("ADMIN_PHONE", "0000000000")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123")


def seed_admin(
    app: Flask,
    *,
    username: str = ADMIN_USERNAME,
    email: str = ADMIN_EMAIL,
    phone: str = ADMIN_PHONE,
    password: str = ADMIN_PASSWORD,
) -> str:
    """Create the admin user, or promote the existing user with that email."""

    email = email.strip().lower()
    store = SQLUserStore()
    with app.app_context():
        password_hash = hash_password(password, method=app.config["PASSWORD_HASH_METHOD"])
        admin = store.find_by_email(email)
        if admin is None:
            store.create(
                username=username, email=email, phone=phone, password_hash=password_hash
            )
            admin = store.find_by_email(email)
            action = "created"
        else:
            action = "updated"
        admin.is_admin = True
        admin.password_hash = password_hash
        db.session.commit()
    return action


def main() -> None:
    app = create_app()
    action = seed_admin(app)
    print(f"Admin user {action}: {ADMIN_EMAIL.strip().lower()}")


if __name__ == "__main__":
    main()
