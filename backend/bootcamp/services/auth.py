"""Admin Authentication — signup and login.

Invariants:
    - Passwords are hashed with bcrypt before they reach the repository
    - login() fails with the same AuthenticationError for unknown user and wrong password
    - The not-found check is an explicit `is None`, never a truthiness test on a result set

Design Decisions:
    - bcrypt runs in a worker thread: hashing at cost 10 takes tens of milliseconds
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.core.domain_types import AdminId
from bootcamp.core.errors import AuthenticationError, NotFoundError
from bootcamp.infrastructure.database import transaction
from bootcamp.infrastructure.security import hash_password, verify_password
from bootcamp.models.admin import Admin
from bootcamp.repositories import admins

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


async def signup(
    db: AsyncSession, username: str, password: str, rounds: int = 10,
) -> Admin:
    """Create an admin account. Duplicate username → ConflictError."""
    hashed = await asyncio.to_thread(hash_password, password, rounds)
    async with transaction(db):
        admin = await admins.create(db, username=username, password=hashed)
    logger.info("Admin created", extra={"admin_id": admin.id})
    return admin


async def login(db: AsyncSession, username: str, password: str) -> Admin:
    """Check credentials and return the admin."""
    admin = await admins.get_by_username(db, username)
    if admin is None:
        raise AuthenticationError(INVALID_CREDENTIALS)
    matches = await asyncio.to_thread(verify_password, password, admin.password)
    if not matches:
        logger.warning("Failed login", extra={"admin_id": admin.id})
        raise AuthenticationError(INVALID_CREDENTIALS)
    return admin


async def get_admin(db: AsyncSession, admin_id: AdminId) -> Admin:
    admin = await admins.get(db, admin_id)
    if admin is None:
        raise NotFoundError("Admin", admin_id)
    return admin
