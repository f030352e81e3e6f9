"""Music Routes: guest song requests, upvotes, and the now-playing flag.

Invariants:
    - Each upvote call adds exactly one vote
    - Marking a track playing stops every other track of the same restaurant
"""

from fastapi import APIRouter, Depends, status

from crave.core.errors import ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.music import MusicCreate, MusicResponse, MusicUpdate

router = APIRouter(prefix="/api/music", tags=["music"])


@router.post("", response_model=MusicResponse, status_code=status.HTTP_201_CREATED)
async def create_music(body: MusicCreate, store: CraveStore = Depends(get_store)):
    return store.create_music(body.model_dump())


@router.post("/{music_id}/upvote", response_model=MusicResponse)
async def upvote_music(music_id: int, store: CraveStore = Depends(get_store)):
    track = store.upvote_music(music_id)
    if track is None:
        raise ResourceNotFoundError("Music", music_id)
    return track


@router.patch("/{music_id}", response_model=MusicResponse)
async def update_music(
    music_id: int, body: MusicUpdate, store: CraveStore = Depends(get_store),
):
    track = store.update_music(music_id, body.model_dump())
    if track is None:
        raise ResourceNotFoundError("Music", music_id)
    return track
