"""Repository interface and in-memory implementation for staff records."""

from typing import Iterable, Protocol

from ..auth.schemas import UserRecord


class UserRepository(Protocol):
    """Lookup interface the endpoint layer depends on."""

    @property
    def is_seeded(self) -> bool: ...

    def find_by_email(self, email: str) -> UserRecord | None: ...

    def all(self) -> list[UserRecord]: ...


class StaticUserRepository:
    """UserRepository backed by an ordered in-memory list."""

    def __init__(self, records: Iterable[UserRecord]):
        self._records = list(records)
        self._seeded = False

    def __len__(self) -> int:
        return len(self._records)

    @property
    def is_seeded(self) -> bool:
        return self._seeded

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the record whose email matches exactly, or None."""
        for record in self._records:
            if record.email == email:
                return record
        return None

    def all(self) -> list[UserRecord]:
        return list(self._records)

    def set_password_hash(self, password_hash: str) -> None:
        """Replace every record with a copy carrying the given hash."""
        self._records = [
            record.model_copy(update={"password_hash": password_hash})
            for record in self._records
        ]
        self._seeded = True
