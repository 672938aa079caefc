"""Authentication decorators for protected endpoints.

- @session_required - Requires a valid session token (cookie or Bearer)

The shared _authenticate_request() is also used as the before_request
handler of the todos blueprint, so every todo route is protected without
decorating each view.
"""

import logging
from functools import wraps

from flask import g, request

from ..core import get_core

logger = logging.getLogger(__name__)


def _authenticate_request():
    """
    Resolve the session for the current request.

    Stores the authenticated username in flask.g.username.

    Raises:
        SessionError: UNAUTHORIZED or BAD_REQUEST; the request stops here
            and nothing else is touched
    """
    core = get_core()
    g.username = core.sessions.resolve(request.cookies, request.headers)
    logger.debug(f"Session resolved for user {g.username}")


def session_required(f):
    """
    Decorator to require a valid session for endpoint access.

    Example:
    ```python
    @session_required
    def protected_endpoint():
        username = g.username
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
