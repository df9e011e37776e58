"""HTTP endpoints for the auth service.

- auth: login, validate, me and logout under /api/auth
- validation: @validate_request decorator for Pydantic request bodies
"""

from .auth import auth_bp

__all__ = ["auth_bp"]
