"""Cohort Schemas.

Invariants:
    - orientation_date, when given, is not after start_date
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bootcamp.schemas.common import PartialUpdate, ShortText


class CohortCreate(BaseModel):
    title: ShortText
    start_date: datetime
    orientation_date: datetime | None = None
    duration: str | None = Field(None, max_length=100)

    @model_validator(mode="after")
    def orientation_before_start(self):
        if self.orientation_date and self.orientation_date > self.start_date:
            raise ValueError("orientation_date must not be after start_date")
        return self


class CohortUpdate(PartialUpdate):
    nullable_fields = frozenset({"orientation_date", "duration"})

    title: ShortText | None = None
    start_date: datetime | None = None
    orientation_date: datetime | None = None
    duration: str | None = Field(None, max_length=100)


class CohortResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    start_date: datetime
    orientation_date: datetime | None = None
    duration: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
