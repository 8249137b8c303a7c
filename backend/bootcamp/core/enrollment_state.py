"""Enrollment State — pure transition rules for the admission decision.

Invariants:
    - admitted IS NULL → pending; True → admitted; False → rejected
    - confirmed is only meaningful when admitted is True
    - A decided enrollment (admitted not NULL) can never be decided again
    - confirmed implies admitted; a deadline exists exactly when admitted
    - Admission deadline is exactly ADMISSION_WINDOW after the decision time

Design Decisions:
    - Pure functions, no IO: services fetch rows, call these, then persist
    - Rejection stores admitted=False. The first version of the system wrote
      admitted=True on rejection as well, which made rejected applicants
      indistinguishable from admitted ones.
    - Violations raise ConflictError (409): the request is valid, the state is not
"""

from datetime import datetime, timedelta, timezone

from bootcamp.core.domain_types import EnrollmentId, EnrollmentStatus
from bootcamp.core.errors import ConflictError

ADMISSION_WINDOW = timedelta(days=3)


def enrollment_status(
    admitted: bool | None, confirmed: bool | None,
) -> EnrollmentStatus:
    """Derive the decision state from the stored flags."""
    if admitted is None:
        return EnrollmentStatus.PENDING
    if not admitted:
        return EnrollmentStatus.REJECTED
    if confirmed:
        return EnrollmentStatus.CONFIRMED
    return EnrollmentStatus.ADMITTED


def ensure_aware(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC (SQLite drops tzinfo on read)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def admission_deadline(now: datetime | None = None) -> datetime:
    """Deadline for confirming an admission decided at `now`."""
    now = now or datetime.now(timezone.utc)
    return now + ADMISSION_WINDOW


def check_can_decide(
    enrollment_id: EnrollmentId, admitted: bool | None,
) -> None:
    """Admit/reject are only allowed from pending."""
    if admitted is not None:
        decided = "admitted" if admitted else "rejected"
        raise ConflictError(
            f"Enrollment '{enrollment_id}' has already been {decided}",
        )


def check_can_confirm(
    enrollment_id: EnrollmentId,
    admitted: bool | None,
    confirmed: bool | None,
    deadline: datetime | None,
    now: datetime | None = None,
) -> None:
    """Confirmation requires an admitted, unconfirmed, unexpired offer."""
    if admitted is not True:
        raise ConflictError(
            f"Enrollment '{enrollment_id}' has not been admitted",
        )
    if confirmed:
        raise ConflictError(
            f"Enrollment '{enrollment_id}' is already confirmed",
        )
    now = now or datetime.now(timezone.utc)
    deadline = ensure_aware(deadline)
    if deadline is not None and now > deadline:
        raise ConflictError(
            f"Confirmation deadline for enrollment '{enrollment_id}' has passed",
        )


def check_consistent(
    enrollment_id: EnrollmentId,
    admitted: bool | None,
    confirmed: bool | None,
    deadline: datetime | None,
) -> None:
    """Reject flag combinations no sequence of transitions can produce."""
    if confirmed and admitted is not True:
        raise ConflictError(
            f"Enrollment '{enrollment_id}' cannot be confirmed without an admission",
        )
    if admitted is True and deadline is None:
        raise ConflictError(
            f"Admitted enrollment '{enrollment_id}' requires a deadline",
        )
    if admitted is not True and deadline is not None:
        raise ConflictError(
            f"Enrollment '{enrollment_id}' only has a deadline once admitted",
        )
