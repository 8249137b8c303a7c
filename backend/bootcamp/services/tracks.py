"""Track operations."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import TrackId
from bootcamp.core.errors import NotFoundError
from bootcamp.infrastructure.database import transaction
from bootcamp.models.track import Track
from bootcamp.repositories import tracks


async def create_track(db: AsyncSession, title: str, description: str) -> Track:
    async with transaction(db):
        track = await tracks.create(db, title=title, description=description)
    return track


async def list_tracks(db: AsyncSession) -> list[Track]:
    return await tracks.list_all(db)


async def get_track(db: AsyncSession, track_id: TrackId) -> Track:
    track = await tracks.get(db, track_id)
    if track is None:
        raise NotFoundError("Track", track_id)
    return track


async def update_track(
    db: AsyncSession, track_id: TrackId, fields: dict[str, Any],
) -> Track:
    await get_track(db, track_id)
    async with transaction(db):
        await tracks.update(db, track_id, fields)
    return await get_track(db, track_id)


async def delete_track(db: AsyncSession, track_id: TrackId) -> None:
    async with transaction(db):
        await tracks.delete(db, track_id)
