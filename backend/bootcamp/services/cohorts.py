"""Cohort operations."""

from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import CohortId
from bootcamp.core.errors import NotFoundError
from bootcamp.infrastructure.database import transaction
from bootcamp.models.cohort import Cohort
from bootcamp.repositories import cohorts


async def create_cohort(
    db: AsyncSession,
    title: str,
    start_date: datetime,
    orientation_date: datetime | None = None,
    duration: str | None = None,
) -> Cohort:
    async with transaction(db):
        cohort = await cohorts.create(
            db,
            title=title,
            start_date=start_date,
            orientation_date=orientation_date,
            duration=duration,
        )
    return cohort


async def list_cohorts(db: AsyncSession) -> list[Cohort]:
    return await cohorts.list_all(db)


async def get_cohort(db: AsyncSession, cohort_id: CohortId) -> Cohort:
    cohort = await cohorts.get(db, cohort_id)
    if cohort is None:
        raise NotFoundError("Cohort", cohort_id)
    return cohort


async def update_cohort(
    db: AsyncSession, cohort_id: CohortId, fields: dict[str, Any],
) -> Cohort:
    await get_cohort(db, cohort_id)
    async with transaction(db):
        await cohorts.update(db, cohort_id, fields)
    return await get_cohort(db, cohort_id)


async def delete_cohort(db: AsyncSession, cohort_id: CohortId) -> None:
    async with transaction(db):
        await cohorts.delete(db, cohort_id)
