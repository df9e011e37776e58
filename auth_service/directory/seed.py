"""Staff roster fixture and one-time credential seeding.

Every mock account shares FIXTURE_PASSWORD. This is a test fixture, not a
credential store: the roster mirrors staff IDs used by the staff service so
tokens issued here line up with records elsewhere in the system.
"""

import logging

from ..auth.password import hash_password
from ..auth.schemas import Role, UserRecord
from .repository import StaticUserRepository

logger = logging.getLogger(__name__)

FIXTURE_PASSWORD = "nursing123"


def _staff(number: int, first_name: str, last_name: str, email_name: str, role: Role) -> UserRecord:
    return UserRecord(
        id=f"user_{number:04d}",
        email=f"{email_name}@nursinghome.com",
        role=role,
        staff_id=f"S{number:04d}",
        first_name=first_name,
        last_name=last_name,
    )


STAFF_ROSTER: tuple[UserRecord, ...] = (
    # Doctors
    _staff(3, "Jukka", "Mäkinen", "jukka.makinen", Role.DOCTOR),
    _staff(9, "Timo", "Lehtonen", "timo.lehtonen", Role.DOCTOR),
    # Nurses
    _staff(1, "Anna", "Virtanen", "anna.virtanen", Role.NURSE),
    _staff(6, "Sari", "Koskinen", "sari.koskinen", Role.NURSE),
    _staff(13, "Eero", "Laaksonen", "eero.laaksonen", Role.NURSE),
    # Head nurse
    _staff(4, "Maria", "Nieminen", "maria.nieminen", Role.HEAD_NURSE),
    # Care assistants
    _staff(2, "Liisa", "Korhonen", "liisa.korhonen", Role.CARE_ASSISTANT),
    _staff(7, "Mikko", "Heikkinen", "mikko.heikkinen", Role.CARE_ASSISTANT),
    _staff(14, "Pirjo", "Mäkelä", "pirjo.makela", Role.CARE_ASSISTANT),
    # Allied health
    _staff(5, "Pekka", "Laine", "pekka.laine", Role.PHYSIOTHERAPIST),
    _staff(8, "Kaisa", "Järvinen", "kaisa.jarvinen", Role.PSYCHOLOGIST),
    _staff(10, "Hanna", "Salo", "hanna.salo", Role.SOCIAL_WORKER),
    _staff(11, "Juha", "Rantanen", "juha.rantanen", Role.PHARMACIST),
    _staff(12, "Maija", "Tuominen", "maija.tuominen", Role.RADIOGRAPHER),
    # Additional nurses for 24/7 coverage
    _staff(15, "Laura", "Virtamo", "laura.virtamo", Role.NURSE),
    _staff(16, "Mika", "Saarinen", "mika.saarinen", Role.NURSE),
    _staff(17, "Tiina", "Aho", "tiina.aho", Role.NURSE),
    # Facilities
    _staff(18, "Kari", "Mäenpää", "kari.maenpaa", Role.JANITOR),
    _staff(19, "Tuula", "Virtanen", "tuula.virtanen", Role.COOK_CLEANER),
    # Admin (for testing)
    UserRecord(
        id="user_admin",
        email="admin@nursinghome.com",
        role=Role.ADMIN,
        staff_id="ADMIN001",
        first_name="Admin",
        last_name="User",
    ),
)


def build_default_repository() -> StaticUserRepository:
    """Create an unseeded repository over the staff roster."""
    return StaticUserRepository(STAFF_ROSTER)


def seed(
    repository: StaticUserRepository,
    password: str = FIXTURE_PASSWORD,
    work_factor: int | None = None,
) -> StaticUserRepository:
    """
    Assign one bcrypt hash of the fixture password to every record.

    The hash is computed once and shared, so seeding costs a single bcrypt
    round regardless of roster size. Must finish before the app serves
    requests; an unseeded record has no hash and cannot log in.

    Returns:
        The same repository, seeded
    """
    repository.set_password_hash(hash_password(password, work_factor=work_factor))
    logger.info(f"User directory seeded with {len(repository)} accounts")
    return repository
