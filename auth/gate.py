"""Bearer token gate for protected views."""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask import Flask, current_app, g, request
from werkzeug.exceptions import Forbidden

from models.user import UserRecord
from storage import AbstractUserStore, get_user_store
from utils.errors import AuthorizationError, NotFoundError

from .tokens import GateOutcome, TokenSettings, extract_bearer, verify_token

EXTENSION_KEY = "auth_gate"


@dataclass(frozen=True)
class AuthContext:
    """Identity attached to a request that passed the gate."""

    user: UserRecord
    token: str
    user_id: int


class AuthGate:
    """Flask extension that validates bearer tokens before protected views run.

    ``init_app`` loads :class:`TokenSettings` from the app config and fails
    fast with ``ConfigurationError`` when no signing secret is configured.
    """

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions[EXTENSION_KEY] = TokenSettings.from_config(app.config)

    @staticmethod
    def settings() -> TokenSettings:
        return current_app.extensions[EXTENSION_KEY]

    def authenticate(
        self,
        header_value: str | None,
        store: AbstractUserStore,
        settings: TokenSettings | None = None,
    ) -> AuthContext:
        """Resolve an ``Authorization`` header to the stored user."""

        settings = settings or self.settings()
        if not header_value or not header_value.strip():
            raise AuthorizationError(GateOutcome.NO_TOKEN)

        token = extract_bearer(header_value)
        claims = verify_token(token, settings)

        user = store.get_record_by_email(claims["email"])
        if user is None:
            raise NotFoundError()
        return AuthContext(user=user, token=token, user_id=user.id)

    def _run(self) -> AuthContext:
        try:
            context = self.authenticate(request.headers.get("Authorization"), get_user_store())
        except AuthorizationError as error:
            current_app.logger.info(
                "Rejected request to %s: %s", request.path, error.outcome.value
            )
            raise
        except NotFoundError:
            current_app.logger.info(
                "Rejected request to %s: %s",
                request.path,
                GateOutcome.SUBJECT_NOT_FOUND.value,
            )
            raise

        g.current_user = context.user
        g.token = context.token
        g.user_id = context.user_id
        current_app.logger.debug(
            "Request to %s: %s for user %s",
            request.path,
            GateOutcome.AUTHORIZED.value,
            context.user_id,
        )
        return context

    def required(self, view):
        """Decorate a view so it only runs for a valid bearer token."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            self._run()
            return view(*args, **kwargs)

        return wrapper

    def admin_required(self, view):
        """Like :meth:`required`, additionally demanding the admin flag."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            context = self._run()
            if not context.user.is_admin:
                raise Forbidden("Admin privileges required.")
            return view(*args, **kwargs)

        return wrapper
