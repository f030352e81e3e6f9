"""Location Routes: free-text place search and reverse geocoding for the explore map."""

from fastapi import APIRouter, Depends, Query

from crave.infrastructure.geocoding import NominatimGeocoder, get_geocoder
from crave.schemas.location import LocationResponse

router = APIRouter(prefix="/api/locations", tags=["locations"])


@router.get("/search", response_model=list[LocationResponse])
async def search_locations(
    q: str = Query(min_length=2, max_length=200),
    limit: int = Query(5, ge=1, le=10),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
):
    return await geocoder.search(q, limit)


@router.get("/reverse", response_model=LocationResponse)
async def reverse_geocode(
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
):
    return await geocoder.reverse(latitude, longitude)
