"""Nominatim Geocoder: free-text search and reverse geocoding over httpx.

Invariants:
    - Every request carries the configured User-Agent (Nominatim usage policy)
    - HTTP errors, timeouts and malformed payloads map to GeocodingError (core/errors.py)
    - reverse() prefers "city, state" (or "city, country") over the full display name

Design Decisions:
    - httpx.AsyncClient owned by the geocoder, closed on shutdown via aclose()
    - transport injectable: tests use httpx.MockTransport instead of the network
"""

import logging
from dataclasses import dataclass

import httpx
from fastapi import Request

from crave.core.errors import GeocodingError

logger = logging.getLogger(__name__)

CITY_KEYS = ("city", "town", "village", "suburb", "county")


@dataclass(frozen=True)
class GeocodedLocation:
    latitude: float
    longitude: float
    display_name: str


class NominatimGeocoder:
    """Async client for the OpenStreetMap Nominatim API."""

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "Crave Restaurant App",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={
                "User-Agent": user_agent,
                "Accept-Language": "en-US,en;q=0.9",
            },
            transport=transport,
        )

    async def search(self, query: str, limit: int = 5) -> list[GeocodedLocation]:
        """Candidate locations for a free-text query."""
        payload = await self._get_json("/search", {
            "format": "json", "q": query, "limit": limit, "addressdetails": 1,
        })
        if not isinstance(payload, list):
            raise GeocodingError("unexpected search payload")
        try:
            return [
                GeocodedLocation(
                    latitude=float(item["lat"]),
                    longitude=float(item["lon"]),
                    display_name=item["display_name"],
                )
                for item in payload
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"malformed search result: {e}")

    async def reverse(self, latitude: float, longitude: float) -> GeocodedLocation:
        """Human-readable place name for a coordinate."""
        payload = await self._get_json("/reverse", {
            "format": "json", "lat": latitude, "lon": longitude,
            "zoom": 18, "addressdetails": 1,
        })
        if not isinstance(payload, dict) or "error" in payload:
            raise GeocodingError("no reverse match")
        return GeocodedLocation(
            latitude=latitude,
            longitude=longitude,
            display_name=_short_place_name(payload),
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_json(self, path: str, params: dict) -> object:
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Geocoding {path} returned {e.response.status_code}",
                extra={"status_code": e.response.status_code},
            )
            raise GeocodingError(f"status {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Geocoding {path} failed: {e!r}")
            raise GeocodingError(type(e).__name__)
        except ValueError as e:
            logger.error(f"Geocoding {path} returned invalid JSON: {e}")
            raise GeocodingError("invalid json")


def _short_place_name(payload: dict) -> str:
    address = payload.get("address") or {}
    city = next((address[k] for k in CITY_KEYS if address.get(k)), None)
    if city:
        region = address.get("state") or address.get("country")
        return f"{city}, {region}" if region else city
    return payload.get("display_name", "")


def get_geocoder(request: Request) -> NominatimGeocoder:
    """FastAPI dependency: geocoder attached to the app in the lifespan."""
    geocoder = getattr(request.app.state, "geocoder", None)
    if geocoder is None:
        raise GeocodingError("geocoder not initialized")
    return geocoder
