from crave.schemas.base import CamelModel


class LocationResponse(CamelModel):
    latitude: float
    longitude: float
    display_name: str
