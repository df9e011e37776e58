"""Authentication module for the auth service.

This module provides:
- Password hashing and verification (bcrypt)
- JWT access token generation and validation
- Pydantic schemas for users, login requests and token claims
- The @token_required decorator for bearer-protected endpoints
"""

from . import password, schemas, token

__all__ = ["password", "schemas", "token"]
