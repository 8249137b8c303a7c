"""Database helpers — error mapping and transaction rollback.

Tests cover:
    - unique violations map to ConflictError, other integrity errors to PersistenceError
    - transaction() rolls back every statement when one fails
    - SQLite foreign keys are enforced
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError

from bootcamp.core.errors import ConflictError, NotFoundError, PersistenceError
from bootcamp.infrastructure.database import (
    is_unique_violation, map_db_error, transaction,
)
from bootcamp.models.track import Track
from bootcamp.models.user import User
from bootcamp.repositories import tracks, users
from tests.factories import applicant


class _PgError(Exception):
    sqlstate = "23505"


def _integrity(orig):
    return IntegrityError("INSERT ...", {}, orig)


def test_sqlite_unique_message_is_unique_violation():
    exc = _integrity(Exception("UNIQUE constraint failed: users.email"))
    assert is_unique_violation(exc)


def test_postgres_sqlstate_is_unique_violation():
    assert is_unique_violation(_integrity(_PgError("whatever")))


def test_foreign_key_failure_is_not_unique_violation():
    exc = _integrity(Exception("FOREIGN KEY constraint failed"))
    assert not is_unique_violation(exc)
    mapped = map_db_error(exc, "commit")
    assert isinstance(mapped, PersistenceError)
    assert not isinstance(mapped, ConflictError)


def test_unique_violation_maps_to_conflict():
    mapped = map_db_error(_integrity(Exception("duplicate key value")), "commit")
    assert isinstance(mapped, ConflictError)


def test_operational_error_maps_to_persistence():
    mapped = map_db_error(OperationalError("SELECT 1", {}, Exception("gone")), "execute")
    assert isinstance(mapped, PersistenceError)
    assert mapped.operation == "execute"


async def test_transaction_rolls_back_all_statements(test_db, seed_track):
    with pytest.raises(ConflictError):
        async with transaction(test_db):
            await users.create(test_db, **applicant(seed_track.id, 1))
            await users.create(test_db, **applicant(seed_track.id, 1))
    count = await test_db.scalar(select(func.count()).select_from(User))
    assert count == 0


async def test_transaction_rolls_back_on_domain_error(test_db):
    with pytest.raises(NotFoundError):
        async with transaction(test_db):
            await tracks.create(test_db, title="Data", description="Pipelines")
            raise NotFoundError("Cohort", 1)
    count = await test_db.scalar(select(func.count()).select_from(Track))
    assert count == 0


async def test_foreign_keys_enforced(test_db):
    with pytest.raises(PersistenceError):
        async with transaction(test_db):
            await users.create(test_db, **applicant(track_id=999))
