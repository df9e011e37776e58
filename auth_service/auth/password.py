"""Password hashing and verification using bcrypt."""

import bcrypt

from ..config import settings

# bcrypt only ever reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, work_factor: int | None = None) -> str:
    """
    Hash a password with bcrypt and a fresh random salt.

    Hashing the same password twice gives two different hashes; both verify.
    Passwords longer than 72 UTF-8 bytes are truncated to their first 72 bytes.

    Args:
        password: Plain text password
        work_factor: bcrypt cost; defaults to settings.bcrypt_work_factor

    Returns:
        Bcrypt hash string (60 characters, "$2b$" prefix)
    """
    rounds = work_factor if work_factor is not None else settings.bcrypt_work_factor
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plain text password against a bcrypt hash.

    Comparison is exact: no trimming or case folding. Overlong passwords are
    truncated the same way hash_password truncates them, so they fail or match
    like any other password. A malformed hash raises ValueError from bcrypt;
    callers treat that as an unexpected failure.
    """
    return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
