"""Table Schemas. qrCode is generated by the store when omitted."""

from pydantic import Field

from crave.schemas.base import CamelModel, PatchModel


class TableCreate(CamelModel):
    restaurant_id: int = Field(ge=1)
    table_number: str = Field(min_length=1, max_length=20)
    capacity: int = Field(ge=1, le=100)
    is_available: bool = True
    qr_code: str | None = Field(None, max_length=2048)


class TableUpdate(PatchModel):
    NULLABLE_FIELDS = frozenset({"qr_code"})

    table_number: str | None = Field(None, min_length=1, max_length=20)
    capacity: int | None = Field(None, ge=1, le=100)
    is_available: bool | None = None
    qr_code: str | None = Field(None, max_length=2048)


class TableResponse(CamelModel):
    id: int
    restaurant_id: int
    table_number: str
    capacity: int
    is_available: bool
    qr_code: str | None = None
