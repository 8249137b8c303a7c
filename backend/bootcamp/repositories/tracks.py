"""Track queries."""

from typing import Any

from sqlalchemy import delete as sa_delete, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import TrackId
from bootcamp.models.track import Track


async def create(db: AsyncSession, *, title: str, description: str) -> Track:
    track = Track(title=title, description=description)
    db.add(track)
    await db.flush()
    return track


async def get(db: AsyncSession, track_id: TrackId) -> Track | None:
    return await db.get(Track, track_id, populate_existing=True)


async def list_all(db: AsyncSession) -> list[Track]:
    result = await db.execute(
        select(Track)
        .order_by(Track.created_at.asc(), Track.id.asc())
        .execution_options(populate_existing=True),
    )
    return list(result.scalars().all())


async def update(db: AsyncSession, track_id: TrackId, fields: dict[str, Any]) -> None:
    if not fields:
        return
    await db.execute(
        sa_update(Track).where(Track.id == track_id).values(**fields),
    )


async def delete(db: AsyncSession, track_id: TrackId) -> None:
    """Delete a track; users and their enrollments go with it (FK cascade)."""
    await db.execute(sa_delete(Track).where(Track.id == track_id))
