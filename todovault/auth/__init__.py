"""Authentication module for TodoVault.

This module provides authentication and session functionality:
- Password hashing and verification (bcrypt)
- JWT session token issuance and verification
- Credential registration and sign-in
- Session resolution for protected endpoints

Auth endpoints (top-level routes):
- POST /signup - Register credentials
- POST /signin - Authenticate and receive a session token cookie
- GET  /me     - Identity behind the current session token
"""

from . import hashing, schemas, service, session, token

__all__ = ["hashing", "schemas", "service", "session", "token"]
