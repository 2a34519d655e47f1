"""Declarative request schemas."""

from .auth import LoginSchema, RegisterSchema
from .contact import ContactSchema
from .fields import ALLOWED_EMAIL_TLDS

__all__ = ["ALLOWED_EMAIL_TLDS", "ContactSchema", "LoginSchema", "RegisterSchema"]
