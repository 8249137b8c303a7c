"""Cohort queries."""

from datetime import datetime
from typing import Any

from sqlalchemy import delete as sa_delete, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import CohortId
from bootcamp.models.cohort import Cohort


async def create(
    db: AsyncSession,
    *,
    title: str,
    start_date: datetime,
    orientation_date: datetime | None = None,
    duration: str | None = None,
) -> Cohort:
    cohort = Cohort(
        title=title,
        start_date=start_date,
        orientation_date=orientation_date,
        duration=duration,
    )
    db.add(cohort)
    await db.flush()
    return cohort


async def get(db: AsyncSession, cohort_id: CohortId) -> Cohort | None:
    return await db.get(Cohort, cohort_id, populate_existing=True)


async def list_all(db: AsyncSession) -> list[Cohort]:
    result = await db.execute(
        select(Cohort)
        .order_by(Cohort.created_at.asc(), Cohort.id.asc())
        .execution_options(populate_existing=True),
    )
    return list(result.scalars().all())


async def update(db: AsyncSession, cohort_id: CohortId, fields: dict[str, Any]) -> None:
    if not fields:
        return
    await db.execute(
        sa_update(Cohort).where(Cohort.id == cohort_id).values(**fields),
    )


async def delete(db: AsyncSession, cohort_id: CohortId) -> None:
    """Delete a cohort; its enrollments go with it (FK cascade)."""
    await db.execute(sa_delete(Cohort).where(Cohort.id == cohort_id))
