"""Enrollment Routes — admin CRUD, admit/reject decisions, public confirmation.

Invariants:
    - admit/reject respond before the notification email is delivered
    - confirm is unauthenticated: it is reached from the link in the admission email
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.api.dependencies import BackgroundNotifier, get_notifier, require_admin
from bootcamp.api.responses import envelope
from bootcamp.config import Settings, get_settings
from bootcamp.infrastructure.database import get_db
from bootcamp.schemas.enrollment import EnrollmentCreate, EnrollmentUpdate, EnrollmentView
from bootcamp.services import enrollments

router = APIRouter(prefix="/api/v1/enrollments", tags=["enrollments"])


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_enrollment(
    body: EnrollmentCreate, db: AsyncSession = Depends(get_db),
):
    enrollment = await enrollments.create_enrollment(
        db, body.user_id, body.cohort_id,
    )
    return envelope(
        "Successfully created the enrollment!", status.HTTP_201_CREATED,
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.get("", dependencies=[Depends(require_admin)])
async def list_enrollments(db: AsyncSession = Depends(get_db)):
    rows = await enrollments.list_enrollments(db)
    return envelope(
        "Successfully retrieved the enrollments!",
        enrollments=[EnrollmentView.model_validate(e) for e in rows],
    )


@router.put("/admit/{enrollment_id}", dependencies=[Depends(require_admin)])
async def admit(
    enrollment_id: int,
    db: AsyncSession = Depends(get_db),
    notifier: BackgroundNotifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
):
    enrollment = await enrollments.admit(
        db, notifier, enrollment_id, settings.frontend_url,
    )
    return envelope(
        "Successfully admitted to the cohort!",
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.put("/reject/{enrollment_id}", dependencies=[Depends(require_admin)])
async def reject(
    enrollment_id: int,
    db: AsyncSession = Depends(get_db),
    notifier: BackgroundNotifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
):
    enrollment = await enrollments.reject(
        db, notifier, enrollment_id, settings.next_cohort_date,
    )
    return envelope(
        "Successfully rejected the applicant!",
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.put("/confirm/{enrollment_id}")
async def confirm(enrollment_id: int, db: AsyncSession = Depends(get_db)):
    enrollment = await enrollments.confirm(db, enrollment_id)
    return envelope(
        "Successfully confirmed the enrollment!",
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.get("/{enrollment_id}", dependencies=[Depends(require_admin)])
async def get_enrollment(enrollment_id: int, db: AsyncSession = Depends(get_db)):
    enrollment = await enrollments.get_enrollment(db, enrollment_id)
    return envelope(
        "Successfully retrieved the enrollment!",
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.put("/{enrollment_id}", dependencies=[Depends(require_admin)])
async def update_enrollment(
    enrollment_id: int,
    body: EnrollmentUpdate,
    db: AsyncSession = Depends(get_db),
):
    enrollment = await enrollments.update_enrollment(
        db, enrollment_id, body.changes(),
    )
    return envelope(
        "Successfully updated the enrollment!",
        enrollment=EnrollmentView.model_validate(enrollment),
    )


@router.delete("/{enrollment_id}", dependencies=[Depends(require_admin)])
async def delete_enrollment(
    enrollment_id: int, db: AsyncSession = Depends(get_db),
):
    await enrollments.delete_enrollment(db, enrollment_id)
    return envelope("Successfully deleted the enrollment!")
