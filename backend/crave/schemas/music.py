from datetime import datetime

from pydantic import Field

from crave.schemas.base import CamelModel


class MusicCreate(CamelModel):
    restaurant_id: int = Field(ge=1)
    title: str = Field(min_length=1, max_length=200)
    artist: str = Field(min_length=1, max_length=200)
    requested_by: int = Field(ge=1)
    upvotes: int = Field(0, ge=0)
    is_playing: bool = False


class MusicUpdate(CamelModel):
    """Only the playing flag is set by hand; upvotes go through /upvote."""
    is_playing: bool


class MusicResponse(CamelModel):
    id: int
    restaurant_id: int
    title: str
    artist: str
    requested_by: int
    upvotes: int
    is_playing: bool
    created_at: datetime
