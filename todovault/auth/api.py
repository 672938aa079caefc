"""Authentication API endpoints for TodoVault.

- POST /signup - Register credentials (re-registering overwrites)
- POST /signin - Verify credentials, set the session token cookie
- GET  /me     - Return the username behind the current session
"""

import logging

from flask import Blueprint, g, jsonify

from ..api.validation import validate_request
from ..core import get_core
from ..utils import isodatetime
from .decorators import session_required
from .schemas import Credentials, SessionResponse, SignUpResponse, TokenResponse

logger = logging.getLogger(__name__)


auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/signup")
@validate_request
def sign_up(data: Credentials):
    """
    Register a username and password.

    Example request:
    ```json
    {"username": "alice", "password": "pw1"}
    ```

    Returns:
        201: SignUpResponse
        400: Invalid request payload
        500: Password hashing failed
    """
    core = get_core()
    core.credentials.sign_up(data.username, data.password)

    return jsonify(
        SignUpResponse(
            message="User created successfully",
            username=data.username
        ).model_dump()
    ), 201


@auth_bp.post("/signin")
@validate_request
def sign_in(data: Credentials):
    """
    Authenticate and start a session.

    The token is set as the session cookie (expiring with the token) and
    also returned in the body for clients that send it as a Bearer header.

    Example response:
    ```json
    {
        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "token_type": "bearer",
        "expires_at": "2026-10-19T10:35:00Z"
    }
    ```

    Returns:
        200: TokenResponse plus Set-Cookie
        400: Invalid request payload
        401: Invalid username or password
    """
    core = get_core()
    now = isodatetime.utcnow()
    access_token = core.credentials.sign_in(data.username, data.password, now=now)
    expires_at = core.codec.expiry_for(now)

    response = jsonify(
        TokenResponse(access_token=access_token, expires_at=expires_at).model_dump()
    )
    response.set_cookie(
        core.sessions.cookie_name,
        access_token,
        expires=expires_at,
        httponly=True,
        samesite="Lax",
    )
    return response, 200


@auth_bp.get("/me")
@session_required
def current_session():
    """Return the identity behind the current session token."""
    return jsonify(SessionResponse(username=g.username).model_dump()), 200
