"""Applicant Operations — user CRUD and the registration composite.

Invariants:
    - register() writes the user and its enrollment in ONE transaction:
      either both rows exist afterwards or neither does
    - Referenced track/cohort must exist before any insert (NotFoundError otherwise)
    - The registration email is scheduled only after the commit succeeded

Design Decisions:
    - Email content comes from a re-read of the user view so the track title
      is the one actually stored, not whatever the client sent
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import CohortId, TrackId, UserId
from bootcamp.core.errors import NotFoundError
from bootcamp.core.notifications import build_registration_message
from bootcamp.core.protocols import Notifier
from bootcamp.infrastructure.database import transaction
from bootcamp.repositories import cohorts, enrollments, tracks, users

logger = logging.getLogger(__name__)


async def _require_track(db: AsyncSession, track_id: TrackId) -> None:
    if await tracks.get(db, track_id) is None:
        raise NotFoundError("Track", track_id)


async def create_user(
    db: AsyncSession,
    name: str,
    location: str,
    email: str,
    phone_number: str,
    track_id: TrackId,
) -> dict:
    await _require_track(db, track_id)
    async with transaction(db):
        user = await users.create(
            db,
            name=name,
            location=location,
            email=email,
            phone_number=phone_number,
            track_id=track_id,
        )
    return await get_user(db, user.id)


async def list_users(db: AsyncSession) -> list[dict]:
    return await users.list_all(db)


async def get_user(db: AsyncSession, user_id: UserId) -> dict:
    user = await users.get(db, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


async def update_user(
    db: AsyncSession, user_id: UserId, fields: dict[str, Any],
) -> dict:
    await get_user(db, user_id)
    if "track_id" in fields:
        await _require_track(db, fields["track_id"])
    async with transaction(db):
        await users.update(db, user_id, fields)
    return await get_user(db, user_id)


async def delete_user(db: AsyncSession, user_id: UserId) -> None:
    async with transaction(db):
        await users.delete(db, user_id)


async def register(
    db: AsyncSession,
    notifier: Notifier,
    user_data: dict[str, Any],
    cohort_id: CohortId,
    review_period: str,
) -> dict:
    """Create an applicant and their application to a cohort as one unit.

    Returns {"user": <user view>, "enrollment": <enrollment view>}.
    A duplicate email/phone raises ConflictError and leaves no rows behind.
    """
    await _require_track(db, user_data["track_id"])
    if await cohorts.get(db, cohort_id) is None:
        raise NotFoundError("Cohort", cohort_id)

    async with transaction(db):
        user = await users.create(db, **user_data)
        enrollment = await enrollments.create(
            db, user_id=user.id, cohort_id=cohort_id,
        )

    user_view = await get_user(db, user.id)
    enrollment_view = await enrollments.get(db, enrollment.id)
    logger.info(
        "Applicant registered",
        extra={"user_id": user.id, "enrollment_id": enrollment.id},
    )
    notifier.notify(build_registration_message(user_view, review_period))
    return {"user": user_view, "enrollment": enrollment_view}
