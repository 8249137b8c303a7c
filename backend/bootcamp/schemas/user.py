"""Applicant Schemas — user bodies, the registration body and the user view.

Invariants:
    - email must look like an address (stored lower-cased)
    - phone_number is digits with an optional leading +, spaces or dashes
    - RegistrationCreate = user fields + cohort_id
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from bootcamp.schemas.common import PartialUpdate, ShortText

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PHONE_PATTERN = r"^\+?[0-9][0-9 \-]{5,19}$"


def _normalize_email(v: str | None) -> str | None:
    return v.strip().lower() if v is not None else v


class UserCreate(BaseModel):
    name: ShortText
    location: ShortText
    email: str = Field(max_length=320, pattern=EMAIL_PATTERN)
    phone_number: str = Field(pattern=PHONE_PATTERN)
    track_id: int = Field(ge=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class RegistrationCreate(UserCreate):
    cohort_id: int = Field(ge=1)

    def user_fields(self) -> dict:
        return self.model_dump(exclude={"cohort_id"})


class UserUpdate(PartialUpdate):
    name: ShortText | None = None
    location: ShortText | None = None
    email: str | None = Field(None, max_length=320, pattern=EMAIL_PATTERN)
    phone_number: str | None = Field(None, pattern=PHONE_PATTERN)
    track_id: int | None = Field(None, ge=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return _normalize_email(v)


class UserView(BaseModel):
    """User row with its track title."""
    id: int
    name: str
    email: str
    phone_number: str
    location: str
    track_id: int
    track: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
