"""SQLAlchemy-backed credential store."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from models import db
from models.user import User, UserRecord
from utils.errors import DuplicateResourceError

from .abstract_storage import AbstractUserStore


class SQLUserStore(AbstractUserStore):
    """Persist users through the Flask-SQLAlchemy session."""

    def find_by_email(self, email: str) -> User | None:
        # Case-insensitive lookup
        statement = select(User).where(func.lower(User.email) == email.strip().lower())
        return db.session.execute(statement).scalar_one_or_none()

    def get_record_by_email(self, email: str) -> UserRecord | None:
        statement = select(
            User.id, User.username, User.email, User.phone, User.is_admin
        ).where(func.lower(User.email) == email.strip().lower())
        row = db.session.execute(statement).first()
        if row is None:
            return None
        return UserRecord(
            id=row.id,
            username=row.username,
            email=row.email,
            phone=row.phone,
            is_admin=bool(row.is_admin),
        )

    def create(self, *, username: str, email: str, phone: str, password_hash: str) -> UserRecord:
        user = User(
            username=username,
            email=email.strip().lower(),
            phone=phone,
            password_hash=password_hash,
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent registration for the same email.
            db.session.rollback()
            raise DuplicateResourceError() from exc
        return user.to_record()

    def list_records(self) -> list[UserRecord]:
        users = db.session.execute(select(User).order_by(User.id)).scalars()
        return [user.to_record() for user in users]
