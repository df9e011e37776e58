"""User directory for the auth service.

The directory is a read-only roster of staff records held in process memory.
Endpoints depend on the UserRepository protocol, not on the static list, so a
real store can replace StaticUserRepository without touching the API layer.

LIFECYCLE:
- build_default_repository() returns the staff roster without credentials
- seed() hashes the fixture password once and assigns it to every record
- after seeding the directory is never written again, so handlers read it
  without locking
"""

from .repository import StaticUserRepository, UserRepository
from .seed import FIXTURE_PASSWORD, STAFF_ROSTER, build_default_repository, seed

__all__ = [
    "UserRepository",
    "StaticUserRepository",
    "FIXTURE_PASSWORD",
    "STAFF_ROSTER",
    "build_default_repository",
    "seed",
]
