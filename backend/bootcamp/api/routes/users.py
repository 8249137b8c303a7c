"""User Routes — admin CRUD plus public applicant self-registration."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.api.dependencies import BackgroundNotifier, get_notifier, require_admin
from bootcamp.api.responses import envelope
from bootcamp.config import Settings, get_settings
from bootcamp.infrastructure.database import get_db
from bootcamp.schemas.enrollment import RegistrationResponse
from bootcamp.schemas.user import RegistrationCreate, UserCreate, UserUpdate, UserView
from bootcamp.services import users

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegistrationCreate,
    db: AsyncSession = Depends(get_db),
    notifier: BackgroundNotifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
):
    """Register an applicant into a cohort (user + enrollment in one transaction)."""
    result = await users.register(
        db, notifier, body.user_fields(), body.cohort_id,
        review_period=settings.review_period,
    )
    registration = RegistrationResponse.model_validate(result)
    return envelope(
        "Successfully registered!", status.HTTP_201_CREATED,
        user=registration.user, enrollment=registration.enrollment,
    )


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    user = await users.create_user(db, **body.model_dump())
    return envelope(
        "Successfully created the user!", status.HTTP_201_CREATED,
        user=UserView.model_validate(user),
    )


@router.get("", dependencies=[Depends(require_admin)])
async def list_users(db: AsyncSession = Depends(get_db)):
    rows = await users.list_users(db)
    return envelope(
        "Successfully retrieved the users!",
        users=[UserView.model_validate(u) for u in rows],
    )


@router.get("/{user_id}", dependencies=[Depends(require_admin)])
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await users.get_user(db, user_id)
    return envelope(
        "Successfully retrieved the user!", user=UserView.model_validate(user),
    )


@router.put("/{user_id}", dependencies=[Depends(require_admin)])
async def update_user(
    user_id: int, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    user = await users.update_user(db, user_id, body.changes())
    return envelope(
        "Successfully updated the user!", user=UserView.model_validate(user),
    )


@router.delete("/{user_id}", dependencies=[Depends(require_admin)])
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a user together with their enrollments."""
    await users.delete_user(db, user_id)
    return envelope("Successfully deleted the user!")
