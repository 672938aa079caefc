"""Core service container for TodoVault.

Core owns one SharedStore and the services built around it. It is
constructed explicitly and attached to a Flask app, never held in a
module-level global, so every app (and every test) gets isolated state.

WIRING:
    SharedStore  <- CredentialService (with PasswordHasher, TokenCodec)
    SharedStore  <- TodoService
    TokenCodec   <- SessionResolver

Usage inside a request:

    core = get_core()
    username = core.sessions.resolve(request.cookies, request.headers)
    todos = core.todos.list(username)
"""

from datetime import timedelta

from flask import current_app

from .auth.hashing import PasswordHasher
from .auth.service import CredentialService
from .auth.session import SessionResolver
from .auth.token import TokenCodec
from .config import Settings
from .store import SharedStore
from .todos.service import TodoService

EXTENSION_KEY = "todovault"


class Core:
    """Explicitly constructed container for the store and services."""

    def __init__(self, settings: Settings, store: SharedStore | None = None):
        """Build all services around one store.

        Args:
            settings: Configuration for hashing cost, token TTL and secret
            store: Existing store to share; a fresh empty one by default
        """
        self.settings = settings
        self.store = store if store is not None else SharedStore(settings.todo_id_policy)
        self.hasher = PasswordHasher(rounds=settings.bcrypt_work_factor)
        self.codec = TokenCodec(
            settings.jwt_secret_key,
            ttl=timedelta(minutes=settings.token_expiry_minutes),
            algorithm=settings.jwt_algorithm,
        )
        self.credentials = CredentialService(self.store, self.hasher, self.codec)
        self.sessions = SessionResolver(self.codec, cookie_name=settings.token_cookie_name)
        self.todos = TodoService(self.store)


def get_core() -> Core:
    """Return the Core attached to the current Flask app."""
    return current_app.extensions[EXTENSION_KEY]
