"""Password hashing helpers."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from utils.errors import HashingError

DEFAULT_HASH_METHOD = "scrypt"
SALT_LENGTH = 16


def hash_password(password: str, method: str = DEFAULT_HASH_METHOD) -> str:
    """Return a salted digest of ``password``; each call uses a fresh salt."""

    try:
        return generate_password_hash(password, method=method, salt_length=SALT_LENGTH)
    except (ValueError, OSError, MemoryError) as exc:
        raise HashingError(f"Password hashing failed: {exc}", original_exception=exc) from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Compare ``password`` against a stored digest in constant time."""

    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError):
        return False
