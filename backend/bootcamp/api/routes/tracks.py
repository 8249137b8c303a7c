"""Track Routes — listing is public (the registration form needs it), writes need an admin."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bootcamp.api.dependencies import require_admin
from bootcamp.api.responses import envelope
from bootcamp.infrastructure.database import get_db
from bootcamp.schemas.track import TrackCreate, TrackResponse, TrackUpdate
from bootcamp.services import tracks

router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_track(body: TrackCreate, db: AsyncSession = Depends(get_db)):
    track = await tracks.create_track(db, body.title, body.description)
    return envelope(
        "Successfully created the track!", status.HTTP_201_CREATED,
        track=TrackResponse.model_validate(track),
    )


@router.get("")
async def list_tracks(db: AsyncSession = Depends(get_db)):
    rows = await tracks.list_tracks(db)
    return envelope(
        "Successfully retrieved the tracks!",
        tracks=[TrackResponse.model_validate(t) for t in rows],
    )


@router.get("/{track_id}", dependencies=[Depends(require_admin)])
async def get_track(track_id: int, db: AsyncSession = Depends(get_db)):
    track = await tracks.get_track(db, track_id)
    return envelope(
        "Successfully retrieved the track!",
        track=TrackResponse.model_validate(track),
    )


@router.put("/{track_id}", dependencies=[Depends(require_admin)])
async def update_track(
    track_id: int, body: TrackUpdate, db: AsyncSession = Depends(get_db),
):
    track = await tracks.update_track(db, track_id, body.changes())
    return envelope(
        "Successfully updated the track!",
        track=TrackResponse.model_validate(track),
    )


@router.delete("/{track_id}", dependencies=[Depends(require_admin)])
async def delete_track(track_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a track together with its users and their enrollments."""
    await tracks.delete_track(db, track_id)
    return envelope("Successfully deleted the track!")
