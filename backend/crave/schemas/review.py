from datetime import datetime

from pydantic import Field

from crave.schemas.base import CamelModel


class ReviewCreate(CamelModel):
    restaurant_id: int = Field(ge=1)
    user_id: int = Field(ge=1)
    rating: float = Field(ge=0, le=5)
    comment: str | None = Field(None, max_length=2000)


class ReviewResponse(CamelModel):
    id: int
    restaurant_id: int
    user_id: int
    rating: float
    comment: str | None = None
    date: datetime
