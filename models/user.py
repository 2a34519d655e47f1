"""User model definition."""

from dataclasses import dataclass
from datetime import datetime

from . import db


@dataclass(frozen=True)
class UserRecord:
    """Read-only view of a user without the password digest."""

    id: int
    username: str
    email: str
    phone: str
    is_admin: bool = False

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "phone": self.phone,
            "isAdmin": self.is_admin,
        }


class User(db.Model):
    """Represents a registered user."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(15), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.text("false"),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_record(self) -> UserRecord:
        """Return a snapshot that is safe to hand outside the store."""

        return UserRecord(
            id=self.id,
            username=self.username,
            email=self.email,
            phone=self.phone,
            is_admin=bool(self.is_admin),
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
