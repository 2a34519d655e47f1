"""Error types mapped to HTTP responses by the application error handler."""

from __future__ import annotations

from typing import Iterable

from werkzeug.exceptions import BadRequest, InternalServerError, NotFound, Unauthorized


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class ValidationError(BadRequest):
    """Request payload failed schema validation."""

    description = "Validation failed."

    def __init__(self, details: Iterable[dict] | None = None, description: str | None = None):
        super().__init__(description)
        self.details = list(details or [])


class DuplicateResourceError(BadRequest):
    """A unique resource (a user's email) already exists."""

    description = "User already exists"


class AuthenticationError(Unauthorized):
    """Credentials were supplied but did not match."""

    description = "Invalid email or password"


class AuthorizationError(Unauthorized):
    """The bearer token is missing, malformed, tampered with or expired.

    ``outcome`` records which check failed for logging; the client always
    receives the same message.
    """

    description = "Unauthorized. Please log in again."

    def __init__(self, outcome=None):
        super().__init__()
        self.outcome = outcome


class NotFoundError(NotFound):
    description = "User not found."


class InternalFault(InternalServerError):
    """Infrastructure failure reported to clients without detail."""

    description = "Something went wrong. Please try again later."

    def __init__(self, reason: str | None = None, original_exception: BaseException | None = None):
        super().__init__(original_exception=original_exception)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.code} {self.name}: {self.reason or self.description}"


class HashingError(InternalFault):
    pass


class SigningError(InternalFault):
    pass
