"""Restaurant Schemas."""

from datetime import datetime

from pydantic import Field

from crave.schemas.base import CamelModel, PatchModel


class RestaurantCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    owner_id: int = Field(ge=1)
    description: str = Field(max_length=5000)
    cuisine: str = Field(min_length=1, max_length=200)
    address: str = Field(min_length=1, max_length=500)
    city: str = Field(min_length=1, max_length=100)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    phone: str = Field(max_length=50)
    opening_time: str = Field(min_length=1, max_length=20)
    closing_time: str = Field(min_length=1, max_length=20)
    price_range: str = Field(pattern=r"^\${1,4}$")
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)


class RestaurantUpdate(PatchModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    cuisine: str | None = Field(None, min_length=1, max_length=200)
    address: str | None = Field(None, min_length=1, max_length=500)
    city: str | None = Field(None, min_length=1, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    phone: str | None = Field(None, max_length=50)
    opening_time: str | None = Field(None, min_length=1, max_length=20)
    closing_time: str | None = Field(None, min_length=1, max_length=20)
    price_range: str | None = Field(None, pattern=r"^\${1,4}$")
    features: list[str] | None = None
    images: list[str] | None = None


class RestaurantResponse(CamelModel):
    """Restaurant record; distance (km) only set by location queries."""
    id: int
    name: str
    owner_id: int
    description: str
    cuisine: str
    address: str
    city: str
    latitude: float
    longitude: float
    phone: str
    opening_time: str
    closing_time: str
    price_range: str
    features: list[str]
    images: list[str]
    created_at: datetime
    distance: float | None = None
