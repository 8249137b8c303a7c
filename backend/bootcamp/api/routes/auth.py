"""Auth Routes — admin signup, login and the current admin.

Invariants:
    - Responses never include the password hash
    - login returns a bearer token signing {id, username}
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.api.dependencies import require_admin
from bootcamp.api.responses import envelope
from bootcamp.config import Settings, get_settings
from bootcamp.core.domain_types import AdminIdentity
from bootcamp.infrastructure.database import get_db
from bootcamp.infrastructure.security import issue_token
from bootcamp.schemas.auth import AdminCredentials, AdminResponse
from bootcamp.services import auth

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: AdminCredentials,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create an admin account."""
    admin = await auth.signup(
        db, body.username, body.password, rounds=settings.bcrypt_rounds,
    )
    return envelope(
        "Admin created successfully", status.HTTP_201_CREATED,
        user=AdminResponse.model_validate(admin),
    )


@router.post("/login")
async def login(
    body: AdminCredentials,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate an admin and issue a bearer token."""
    admin = await auth.login(db, body.username, body.password)
    token = issue_token(
        AdminIdentity(id=admin.id, username=admin.username),
        settings.secret_key,
        expiry_days=settings.token_expiry_days,
        algorithm=settings.token_algorithm,
    )
    return envelope(
        "Logged in successfully!",
        user=AdminResponse.model_validate(admin), token=token,
    )


@router.get("/me")
async def me(
    identity: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """The admin the bearer token belongs to."""
    admin = await auth.get_admin(db, identity.id)
    return envelope(
        "Successfully retrieved the admin!",
        user=AdminResponse.model_validate(admin),
    )
