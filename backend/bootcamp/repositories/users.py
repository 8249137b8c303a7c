"""User queries — writes on the users table, reads through the user view.

The view is the user row plus the title of its track, labelled `track`.
It is display-only and never written back.
"""

from typing import Any

from sqlalchemy import Select, delete as sa_delete, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import TrackId, UserId
from bootcamp.models.track import Track
from bootcamp.models.user import User


def user_view() -> Select:
    """User joined with its track title."""
    return (
        select(
            User.id,
            User.name,
            User.email,
            User.phone_number,
            User.location,
            User.track_id,
            Track.title.label("track"),
            User.created_at,
            User.updated_at,
        )
        .outerjoin(Track, User.track_id == Track.id)
    )


async def create(
    db: AsyncSession,
    *,
    name: str,
    location: str,
    email: str,
    phone_number: str,
    track_id: TrackId,
) -> User:
    user = User(
        name=name,
        location=location,
        email=email,
        phone_number=phone_number,
        track_id=track_id,
    )
    db.add(user)
    await db.flush()
    return user


async def get(db: AsyncSession, user_id: UserId) -> dict | None:
    result = await db.execute(user_view().where(User.id == user_id))
    row = result.mappings().first()
    return dict(row) if row is not None else None


async def list_all(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        user_view().order_by(User.created_at.asc(), User.id.asc()),
    )
    return [dict(row) for row in result.mappings().all()]


async def update(db: AsyncSession, user_id: UserId, fields: dict[str, Any]) -> None:
    if not fields:
        return
    await db.execute(
        sa_update(User).where(User.id == user_id).values(**fields),
    )


async def delete(db: AsyncSession, user_id: UserId) -> None:
    """Delete a user; their enrollments go with them (FK cascade)."""
    await db.execute(sa_delete(User).where(User.id == user_id))
