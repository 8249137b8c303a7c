"""Cohort Routes — listing is public, everything else needs an admin."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.api.dependencies import require_admin
from bootcamp.api.responses import envelope
from bootcamp.infrastructure.database import get_db
from bootcamp.schemas.cohort import CohortCreate, CohortResponse, CohortUpdate
from bootcamp.services import cohorts

router = APIRouter(prefix="/api/v1/cohorts", tags=["cohorts"])


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_cohort(body: CohortCreate, db: AsyncSession = Depends(get_db)):
    cohort = await cohorts.create_cohort(db, **body.model_dump())
    return envelope(
        "Successfully created the cohort!", status.HTTP_201_CREATED,
        cohort=CohortResponse.model_validate(cohort),
    )


@router.get("")
async def list_cohorts(db: AsyncSession = Depends(get_db)):
    rows = await cohorts.list_cohorts(db)
    return envelope(
        "Successfully retrieved the cohorts!",
        cohorts=[CohortResponse.model_validate(c) for c in rows],
    )


@router.get("/{cohort_id}", dependencies=[Depends(require_admin)])
async def get_cohort(cohort_id: int, db: AsyncSession = Depends(get_db)):
    cohort = await cohorts.get_cohort(db, cohort_id)
    return envelope(
        "Successfully retrieved the cohort!",
        cohort=CohortResponse.model_validate(cohort),
    )


@router.put("/{cohort_id}", dependencies=[Depends(require_admin)])
async def update_cohort(
    cohort_id: int, body: CohortUpdate, db: AsyncSession = Depends(get_db),
):
    cohort = await cohorts.update_cohort(db, cohort_id, body.changes())
    return envelope(
        "Successfully updated the cohort!",
        cohort=CohortResponse.model_validate(cohort),
    )


@router.delete("/{cohort_id}", dependencies=[Depends(require_admin)])
async def delete_cohort(cohort_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a cohort together with its enrollments."""
    await cohorts.delete_cohort(db, cohort_id)
    return envelope("Successfully deleted the cohort!")
