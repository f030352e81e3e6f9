"""Menu Item Schemas. popularity is a free-form score used for ranking."""

from pydantic import Field

from crave.schemas.base import CamelModel, PatchModel


class MenuItemCreate(CamelModel):
    restaurant_id: int = Field(ge=1)
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price: float = Field(ge=0)
    category: str = Field(min_length=1, max_length=100)
    image: str | None = Field(None, max_length=2048)
    popularity: float = 0.0
    is_available: bool = True


class MenuItemUpdate(PatchModel):
    NULLABLE_FIELDS = frozenset({"description", "image"})

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    image: str | None = Field(None, max_length=2048)
    popularity: float | None = None
    is_available: bool | None = None


class MenuItemResponse(CamelModel):
    id: int
    restaurant_id: int
    name: str
    description: str | None = None
    price: float
    category: str
    image: str | None = None
    popularity: float
    is_available: bool
