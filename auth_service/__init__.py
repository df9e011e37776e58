"""Auth service - JWT login and token validation for nursing home staff."""

__version__ = "1.0.0"
