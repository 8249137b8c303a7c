"""Repositories — round trips, enriched views, uniqueness and cascades.

Tests cover:
    - create/get/list/update/delete for every table
    - reads of missing ids return None; deletes of missing ids are no-ops
    - user and enrollment views carry the joined track/cohort fields
    - unique email, phone, username and (user, cohort) pairs raise ConflictError
    - deleting a track or cohort removes dependent users/enrollments
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from bootcamp.core.enrollment_state import ensure_aware
from bootcamp.core.errors import ConflictError
from bootcamp.infrastructure.database import transaction
from bootcamp.models.enrollment import Enrollment
from bootcamp.models.user import User
from bootcamp.repositories import admins, cohorts, enrollments, tracks, users
from tests.factories import applicant


async def _count(db, model):
    return await db.scalar(select(func.count()).select_from(model))


async def _user(db, track_id, n=1):
    async with transaction(db):
        user = await users.create(db, **applicant(track_id, n))
    return user


async def _enrollment(db, user_id, cohort_id):
    async with transaction(db):
        enrollment = await enrollments.create(
            db, user_id=user_id, cohort_id=cohort_id,
        )
    return enrollment


# ── Admins ──────────────────────────────────────────────────────

async def test_admin_round_trip(test_db):
    async with transaction(test_db):
        admin = await admins.create(test_db, username="admin1", password="hash")
    assert (await admins.get(test_db, admin.id)).username == "admin1"
    assert (await admins.get_by_username(test_db, "admin1")).id == admin.id
    assert await admins.get_by_username(test_db, "nobody") is None
    assert [a.id for a in await admins.list_all(test_db)] == [admin.id]


async def test_admin_username_unique(test_db):
    async with transaction(test_db):
        await admins.create(test_db, username="admin1", password="a")
    with pytest.raises(ConflictError):
        async with transaction(test_db):
            await admins.create(test_db, username="admin1", password="b")


async def test_admin_update_and_delete(test_db):
    async with transaction(test_db):
        admin = await admins.create(test_db, username="admin1", password="a")
    async with transaction(test_db):
        await admins.update(test_db, admin.id, {"username": "root"})
    assert (await admins.get(test_db, admin.id)).username == "root"
    async with transaction(test_db):
        await admins.delete(test_db, admin.id)
    assert await admins.get(test_db, admin.id) is None


# ── Tracks / cohorts ────────────────────────────────────────────

async def test_track_get_missing_returns_none(test_db):
    assert await tracks.get(test_db, 404) is None
    assert await tracks.list_all(test_db) == []


async def test_tracks_listed_in_creation_order(test_db):
    async with transaction(test_db):
        first = await tracks.create(test_db, title="Backend", description="a")
        second = await tracks.create(test_db, title="Frontend", description="b")
    assert [t.id for t in await tracks.list_all(test_db)] == [first.id, second.id]


async def test_track_update_is_visible_in_same_session(test_db, seed_track):
    async with transaction(test_db):
        await tracks.update(test_db, seed_track.id, {"title": "Platform"})
    assert (await tracks.get(test_db, seed_track.id)).title == "Platform"


async def test_update_with_no_fields_is_noop(test_db, seed_track):
    async with transaction(test_db):
        await tracks.update(test_db, seed_track.id, {})
    assert (await tracks.get(test_db, seed_track.id)).title == "Backend"


async def test_delete_missing_is_noop(test_db, seed_track):
    async with transaction(test_db):
        await tracks.delete(test_db, 404)
        await cohorts.delete(test_db, 404)
        await users.delete(test_db, 404)
        await enrollments.delete(test_db, 404)
    assert len(await tracks.list_all(test_db)) == 1


async def test_cohort_round_trip(test_db, seed_cohort):
    cohort = await cohorts.get(test_db, seed_cohort.id)
    assert cohort.title == "Cohort 5"
    assert cohort.duration == "12 weeks"
    assert ensure_aware(cohort.start_date) == datetime(
        2026, 11, 2, 9, 0, tzinfo=timezone.utc,
    )


async def test_cohort_nullable_fields_can_be_cleared(test_db, seed_cohort):
    async with transaction(test_db):
        await cohorts.update(
            test_db, seed_cohort.id, {"orientation_date": None, "duration": None},
        )
    cohort = await cohorts.get(test_db, seed_cohort.id)
    assert cohort.orientation_date is None
    assert cohort.duration is None


# ── Users ───────────────────────────────────────────────────────

async def test_user_view_includes_track_title(test_db, seed_track):
    user = await _user(test_db, seed_track.id)
    view = await users.get(test_db, user.id)
    assert view["name"] == "Applicant 1"
    assert view["track_id"] == seed_track.id
    assert view["track"] == "Backend"


async def test_user_get_missing_returns_none(test_db):
    assert await users.get(test_db, 404) is None
    assert await users.list_all(test_db) == []


async def test_users_listed_in_creation_order(test_db, seed_track):
    first = await _user(test_db, seed_track.id, 1)
    second = await _user(test_db, seed_track.id, 2)
    assert [u["id"] for u in await users.list_all(test_db)] == [first.id, second.id]


@pytest.mark.parametrize("field", ["email", "phone_number"])
async def test_user_contact_fields_unique(test_db, seed_track, field):
    await _user(test_db, seed_track.id, 1)
    duplicate = applicant(seed_track.id, 2)
    duplicate[field] = applicant(seed_track.id, 1)[field]
    with pytest.raises(ConflictError):
        async with transaction(test_db):
            await users.create(test_db, **duplicate)
    assert await _count(test_db, User) == 1


async def test_user_update_refreshes_updated_at(test_db, seed_track):
    user = await _user(test_db, seed_track.id)
    before = await users.get(test_db, user.id)
    async with transaction(test_db):
        await users.update(test_db, user.id, {"location": "Abuja"})
    after = await users.get(test_db, user.id)
    assert after["location"] == "Abuja"
    assert ensure_aware(after["updated_at"]) > ensure_aware(before["updated_at"])
    assert after["created_at"] == before["created_at"]


# ── Enrollments ─────────────────────────────────────────────────

async def test_enrollment_view_is_denormalized(test_db, seed_track, seed_cohort):
    user = await _user(test_db, seed_track.id)
    enrollment = await _enrollment(test_db, user.id, seed_cohort.id)
    view = await enrollments.get(test_db, enrollment.id)
    assert view["user"] == "Applicant 1"
    assert view["user_email"] == "applicant1@example.com"
    assert view["user_track"] == "Backend"
    assert view["cohort_title"] == "Cohort 5"
    assert view["duration"] == "12 weeks"
    assert view["admitted"] is None
    assert view["confirmed"] is None
    assert view["deadline"] is None
    assert view["status"] == "pending"


async def test_enrollment_status_follows_flags(test_db, seed_track, seed_cohort):
    user = await _user(test_db, seed_track.id)
    enrollment = await _enrollment(test_db, user.id, seed_cohort.id)
    deadline = datetime.now(timezone.utc) + timedelta(days=3)
    async with transaction(test_db):
        await enrollments.update(
            test_db, enrollment.id, {"admitted": True, "deadline": deadline},
        )
    assert (await enrollments.get(test_db, enrollment.id))["status"] == "admitted"
    row = await enrollments.get_row(test_db, enrollment.id)
    assert row.admitted is True
    assert ensure_aware(row.deadline) == deadline


async def test_enrollment_get_missing_returns_none(test_db):
    assert await enrollments.get(test_db, 404) is None
    assert await enrollments.get_row(test_db, 404) is None
    assert await enrollments.list_all(test_db) == []


async def test_enrollment_pair_unique(test_db, seed_track, seed_cohort):
    user = await _user(test_db, seed_track.id)
    await _enrollment(test_db, user.id, seed_cohort.id)
    with pytest.raises(ConflictError):
        await _enrollment(test_db, user.id, seed_cohort.id)
    assert await _count(test_db, Enrollment) == 1


async def test_enrollments_listed_in_creation_order(
    test_db, seed_track, seed_cohort,
):
    first = await _enrollment(
        test_db, (await _user(test_db, seed_track.id, 1)).id, seed_cohort.id,
    )
    second = await _enrollment(
        test_db, (await _user(test_db, seed_track.id, 2)).id, seed_cohort.id,
    )
    listed = await enrollments.list_all(test_db)
    assert [e["id"] for e in listed] == [first.id, second.id]


# ── Cascades ────────────────────────────────────────────────────

async def test_deleting_track_removes_users_and_enrollments(
    test_db, seed_track, seed_cohort,
):
    user = await _user(test_db, seed_track.id)
    await _enrollment(test_db, user.id, seed_cohort.id)
    async with transaction(test_db):
        await tracks.delete(test_db, seed_track.id)
    assert await _count(test_db, User) == 0
    assert await _count(test_db, Enrollment) == 0


async def test_deleting_cohort_removes_enrollments_only(
    test_db, seed_track, seed_cohort,
):
    user = await _user(test_db, seed_track.id)
    await _enrollment(test_db, user.id, seed_cohort.id)
    async with transaction(test_db):
        await cohorts.delete(test_db, seed_cohort.id)
    assert await _count(test_db, Enrollment) == 0
    assert await users.get(test_db, user.id) is not None


async def test_deleting_user_removes_enrollments(test_db, seed_track, seed_cohort):
    user = await _user(test_db, seed_track.id)
    await _enrollment(test_db, user.id, seed_cohort.id)
    async with transaction(test_db):
        await users.delete(test_db, user.id)
    assert await _count(test_db, Enrollment) == 0
    assert await cohorts.get(test_db, seed_cohort.id) is not None
