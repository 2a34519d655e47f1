"""Authentication: password hashing, access tokens and the request gate."""

from .gate import AuthContext, AuthGate
from .passwords import hash_password, verify_password
from .tokens import GateOutcome, TokenSettings, issue_token, verify_token

auth_gate = AuthGate()

__all__ = [
    "AuthContext",
    "AuthGate",
    "GateOutcome",
    "TokenSettings",
    "auth_gate",
    "hash_password",
    "issue_token",
    "verify_password",
    "verify_token",
]
