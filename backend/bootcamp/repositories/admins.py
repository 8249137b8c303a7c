"""Admin queries."""

from typing import Any

from sqlalchemy import delete as sa_delete, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import AdminId
from bootcamp.models.admin import Admin


async def create(db: AsyncSession, *, username: str, password: str) -> Admin:
    admin = Admin(username=username, password=password)
    db.add(admin)
    await db.flush()
    return admin


async def get(db: AsyncSession, admin_id: AdminId) -> Admin | None:
    return await db.get(Admin, admin_id, populate_existing=True)


async def get_by_username(db: AsyncSession, username: str) -> Admin | None:
    result = await db.execute(
        select(Admin)
        .where(Admin.username == username)
        .execution_options(populate_existing=True),
    )
    return result.scalar_one_or_none()


async def list_all(db: AsyncSession) -> list[Admin]:
    result = await db.execute(
        select(Admin)
        .order_by(Admin.created_at.asc(), Admin.id.asc())
        .execution_options(populate_existing=True),
    )
    return list(result.scalars().all())


async def update(db: AsyncSession, admin_id: AdminId, fields: dict[str, Any]) -> None:
    if not fields:
        return
    await db.execute(
        sa_update(Admin).where(Admin.id == admin_id).values(**fields),
    )


async def delete(db: AsyncSession, admin_id: AdminId) -> None:
    await db.execute(sa_delete(Admin).where(Admin.id == admin_id))
