"""Authentication Pydantic schemas.

Field names are snake_case in Python and camelCase on the wire
(staffId, firstName, lastName) to match the JSON contract clients use.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Role(StrEnum):
    """Job function of a staff member."""

    DOCTOR = "doctor"
    NURSE = "nurse"
    HEAD_NURSE = "head_nurse"
    CARE_ASSISTANT = "care_assistant"
    PHYSIOTHERAPIST = "physiotherapist"
    PSYCHOLOGIST = "psychologist"
    SOCIAL_WORKER = "social_worker"
    PHARMACIST = "pharmacist"
    RADIOGRAPHER = "radiographer"
    JANITOR = "janitor"
    COOK_CLEANER = "cook_cleaner"
    ADMIN = "admin"


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# User Schemas
# ============================================================================


class UserBase(CamelModel):
    """Identity fields shared by stored records, responses and claims."""

    id: str
    email: str
    role: Role
    staff_id: str
    first_name: str
    last_name: str


class UserRecord(UserBase):
    """A staff member as held by the user directory.

    password_hash is excluded from serialization so a record can never leak
    its credential into a response by accident.
    """

    model_config = ConfigDict(frozen=True)

    password_hash: str | None = Field(default=None, exclude=True)

    def to_response(self) -> "UserResponse":
        return UserResponse.model_validate(self.model_dump())


class UserResponse(UserBase):
    """Public view of a user, as returned by login, validate and me."""


class UserLogin(BaseModel):
    """Login request body. Both fields must be present and non-empty."""

    validation_message: ClassVar[str] = "Email and password are required"

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email", "password", mode="before")
    @classmethod
    def stringify_present_values(cls, value):
        """Keep a present non-string value as its string form.

        It then fails lookup or comparison like any other wrong credential.
        Falsy values (None, 0, false, empty containers) still count as missing.
        """
        if isinstance(value, str) or not value:
            return value
        return str(value)


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(UserBase):
    """Claims carried by an access token.

    `sub` holds the user id; iat and exp are unix seconds.
    """

    id: str = Field(..., alias="sub")
    iat: int
    exp: int

    def to_user(self) -> UserResponse:
        """Rebuild the public user view from the claims alone."""
        return UserResponse(
            id=self.id,
            email=self.email,
            role=self.role,
            staff_id=self.staff_id,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class LoginData(CamelModel):
    """`data` section of a successful login response."""

    token: str
    user: UserResponse
