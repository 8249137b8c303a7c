"""Enrollment queries — writes on the enrollments table, reads through the enrollment view.

The view joins user, track and cohort so a single row carries everything the
admin dashboard and the decision emails need. `status` is derived from the
admitted/confirmed flags.
"""

from typing import Any

from sqlalchemy import Select, delete as sa_delete, or_, select, update as sa_update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import CohortId, EnrollmentId, UserId
from bootcamp.core.enrollment_state import enrollment_status
from bootcamp.models.cohort import Cohort
from bootcamp.models.enrollment import Enrollment
from bootcamp.models.track import Track
from bootcamp.models.user import User


def enrollment_view() -> Select:
    """Enrollment joined with user name/email, track title and cohort schedule."""
    return (
        select(
            Enrollment.id,
            Enrollment.user_id,
            Enrollment.cohort_id,
            User.name.label("user"),
            User.email.label("user_email"),
            Track.title.label("user_track"),
            Cohort.title.label("cohort_title"),
            Cohort.start_date.label("cohort_start_date"),
            Cohort.orientation_date,
            Cohort.duration,
            Enrollment.admitted,
            Enrollment.confirmed,
            Enrollment.deadline,
            Enrollment.created_at,
            Enrollment.updated_at,
        )
        .outerjoin(User, Enrollment.user_id == User.id)
        .outerjoin(Track, User.track_id == Track.id)
        .outerjoin(Cohort, Enrollment.cohort_id == Cohort.id)
    )


def _to_view(row: RowMapping) -> dict:
    view = dict(row)
    view["status"] = enrollment_status(view["admitted"], view["confirmed"]).value
    return view


async def create(db: AsyncSession, *, user_id: UserId, cohort_id: CohortId) -> Enrollment:
    enrollment = Enrollment(user_id=user_id, cohort_id=cohort_id)
    db.add(enrollment)
    await db.flush()
    return enrollment


async def get_row(db: AsyncSession, enrollment_id: EnrollmentId) -> Enrollment | None:
    """Bare enrollment row (no joins), for state checks before a transition."""
    return await db.get(Enrollment, enrollment_id, populate_existing=True)


async def get(db: AsyncSession, enrollment_id: EnrollmentId) -> dict | None:
    result = await db.execute(
        enrollment_view().where(Enrollment.id == enrollment_id),
    )
    row = result.mappings().first()
    return _to_view(row) if row is not None else None


async def list_all(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        enrollment_view().order_by(
            Enrollment.created_at.asc(), Enrollment.id.asc(),
        ),
    )
    return [_to_view(row) for row in result.mappings().all()]


async def update(db: AsyncSession, enrollment_id: EnrollmentId, fields: dict[str, Any]) -> None:
    if not fields:
        return
    await db.execute(
        sa_update(Enrollment)
        .where(Enrollment.id == enrollment_id)
        .values(**fields),
    )


async def decide(
    db: AsyncSession, enrollment_id: EnrollmentId, fields: dict[str, Any],
) -> bool:
    """Write a decision only while the enrollment is still pending.

    The pending check is part of the UPDATE itself, so of two concurrent
    decisions exactly one matches a row. Returns False when none matched.
    """
    result = await db.execute(
        sa_update(Enrollment)
        .where(Enrollment.id == enrollment_id, Enrollment.admitted.is_(None))
        .values(**fields),
    )
    return result.rowcount > 0


async def mark_confirmed(db: AsyncSession, enrollment_id: EnrollmentId) -> bool:
    """Set confirmed=True only on an admitted, not yet confirmed enrollment."""
    result = await db.execute(
        sa_update(Enrollment)
        .where(
            Enrollment.id == enrollment_id,
            Enrollment.admitted.is_(True),
            or_(Enrollment.confirmed.is_(None), Enrollment.confirmed.is_(False)),
        )
        .values(confirmed=True),
    )
    return result.rowcount > 0


async def delete(db: AsyncSession, enrollment_id: EnrollmentId) -> None:
    await db.execute(sa_delete(Enrollment).where(Enrollment.id == enrollment_id))
