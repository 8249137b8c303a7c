"""Track Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from bootcamp.schemas.common import LongText, PartialUpdate, ShortText


class TrackCreate(BaseModel):
    title: ShortText
    description: LongText


class TrackUpdate(PartialUpdate):
    title: ShortText | None = None
    description: LongText | None = None


class TrackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
