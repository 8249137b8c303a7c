"""Enrollment Schemas — create/update bodies and the denormalized enrollment view."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from bootcamp.schemas.common import PartialUpdate
from bootcamp.schemas.user import UserView


class EnrollmentCreate(BaseModel):
    user_id: int = Field(ge=1)
    cohort_id: int = Field(ge=1)


class EnrollmentUpdate(PartialUpdate):
    nullable_fields = frozenset({"admitted", "confirmed", "deadline"})

    user_id: int | None = Field(None, ge=1)
    cohort_id: int | None = Field(None, ge=1)
    admitted: bool | None = None
    confirmed: bool | None = None
    deadline: datetime | None = None


class EnrollmentView(BaseModel):
    """Enrollment joined with applicant, track and cohort."""
    id: int
    user_id: int
    cohort_id: int
    user: str | None = None
    user_email: str | None = None
    user_track: str | None = None
    cohort_title: str | None = None
    cohort_start_date: datetime | None = None
    orientation_date: datetime | None = None
    duration: str | None = None
    admitted: bool | None = None
    confirmed: bool | None = None
    deadline: datetime | None = None
    status: Literal["pending", "admitted", "rejected", "confirmed"]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RegistrationResponse(BaseModel):
    user: UserView
    enrollment: EnrollmentView
