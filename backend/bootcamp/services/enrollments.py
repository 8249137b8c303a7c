"""Enrollment Operations — CRUD plus the admit / reject / confirm transitions.

Invariants:
    - admit/reject only from pending; a second decision raises ConflictError
    - admit sets admitted=True and deadline=now+3d; reject sets admitted=False
    - confirm only from admitted, before the deadline
    - The pending/admitted precondition is repeated in the UPDATE itself:
      of two concurrent decisions only one commits, the other gets ConflictError
    - A generic update may correct the flags but never into a state the
      transitions could not reach; it sends no email
    - Exactly one notification per admit/reject, scheduled after the commit
    - Notification failures never affect the stored decision

Design Decisions:
    - Transition rules live in core/enrollment_state.py; this module only does IO
    - Decisions re-read the enrollment view after the update: the email needs
      the joined user/track/cohort fields and the stored deadline
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import CohortId, EnrollmentId, UserId
from bootcamp.core.enrollment_state import (
    admission_deadline, check_can_confirm, check_can_decide, check_consistent,
)
from bootcamp.core.errors import ConflictError, NotFoundError
from bootcamp.core.notifications import (
    build_admission_message, build_rejection_message,
)
from bootcamp.core.protocols import Notifier
from bootcamp.infrastructure.database import transaction
from bootcamp.models.enrollment import Enrollment
from bootcamp.repositories import cohorts, enrollments, users

logger = logging.getLogger(__name__)


async def _require_refs(
    db: AsyncSession, user_id: UserId | None, cohort_id: CohortId | None,
) -> None:
    if user_id is not None and await users.get(db, user_id) is None:
        raise NotFoundError("User", user_id)
    if cohort_id is not None and await cohorts.get(db, cohort_id) is None:
        raise NotFoundError("Cohort", cohort_id)


def _already_decided(enrollment_id: EnrollmentId) -> ConflictError:
    return ConflictError(f"Enrollment '{enrollment_id}' has already been decided")


async def _require_row(db: AsyncSession, enrollment_id: EnrollmentId) -> Enrollment:
    row = await enrollments.get_row(db, enrollment_id)
    if row is None:
        raise NotFoundError("Enrollment", enrollment_id)
    return row


async def create_enrollment(
    db: AsyncSession, user_id: UserId, cohort_id: CohortId,
) -> dict:
    """Apply an existing user to a cohort. Same pair twice → ConflictError."""
    await _require_refs(db, user_id, cohort_id)
    async with transaction(db):
        enrollment = await enrollments.create(
            db, user_id=user_id, cohort_id=cohort_id,
        )
    return await get_enrollment(db, enrollment.id)


async def list_enrollments(db: AsyncSession) -> list[dict]:
    return await enrollments.list_all(db)


async def get_enrollment(db: AsyncSession, enrollment_id: EnrollmentId) -> dict:
    enrollment = await enrollments.get(db, enrollment_id)
    if enrollment is None:
        raise NotFoundError("Enrollment", enrollment_id)
    return enrollment


async def update_enrollment(
    db: AsyncSession, enrollment_id: EnrollmentId, fields: dict[str, Any],
) -> dict:
    row = await _require_row(db, enrollment_id)
    check_consistent(
        enrollment_id,
        fields.get("admitted", row.admitted),
        fields.get("confirmed", row.confirmed),
        fields.get("deadline", row.deadline),
    )
    await _require_refs(db, fields.get("user_id"), fields.get("cohort_id"))
    async with transaction(db):
        await enrollments.update(db, enrollment_id, fields)
    return await get_enrollment(db, enrollment_id)


async def delete_enrollment(db: AsyncSession, enrollment_id: EnrollmentId) -> None:
    async with transaction(db):
        await enrollments.delete(db, enrollment_id)


async def admit(
    db: AsyncSession,
    notifier: Notifier,
    enrollment_id: EnrollmentId,
    frontend_url: str,
    now: datetime | None = None,
) -> dict:
    """Admit a pending applicant and send the offer email."""
    row = await _require_row(db, enrollment_id)
    check_can_decide(enrollment_id, row.admitted)
    async with transaction(db):
        decided = await enrollments.decide(db, enrollment_id, {
            "admitted": True,
            "deadline": admission_deadline(now),
        })
        if not decided:
            raise _already_decided(enrollment_id)
    enrollment = await get_enrollment(db, enrollment_id)
    logger.info("Enrollment admitted", extra={"enrollment_id": enrollment_id})
    notifier.notify(build_admission_message(enrollment, frontend_url))
    return enrollment


async def reject(
    db: AsyncSession,
    notifier: Notifier,
    enrollment_id: EnrollmentId,
    next_cohort_date: str,
) -> dict:
    """Reject a pending applicant and send the rejection email."""
    row = await _require_row(db, enrollment_id)
    check_can_decide(enrollment_id, row.admitted)
    async with transaction(db):
        decided = await enrollments.decide(db, enrollment_id, {"admitted": False})
        if not decided:
            raise _already_decided(enrollment_id)
    enrollment = await get_enrollment(db, enrollment_id)
    logger.info("Enrollment rejected", extra={"enrollment_id": enrollment_id})
    notifier.notify(build_rejection_message(enrollment, next_cohort_date))
    return enrollment


async def confirm(
    db: AsyncSession, enrollment_id: EnrollmentId, now: datetime | None = None,
) -> dict:
    """Applicant accepts an admission offer before its deadline."""
    row = await _require_row(db, enrollment_id)
    check_can_confirm(
        enrollment_id, row.admitted, row.confirmed, row.deadline,
        now or datetime.now(timezone.utc),
    )
    async with transaction(db):
        if not await enrollments.mark_confirmed(db, enrollment_id):
            raise ConflictError(
                f"Enrollment '{enrollment_id}' can no longer be confirmed",
            )
    logger.info("Enrollment confirmed", extra={"enrollment_id": enrollment_id})
    return await get_enrollment(db, enrollment_id)
