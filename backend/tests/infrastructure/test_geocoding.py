"""Nominatim Geocoder — request shape, parsing and error mapping over httpx.MockTransport."""

import httpx
import pytest

from crave.core.errors import GeocodingError
from crave.infrastructure.geocoding import NominatimGeocoder


def _geocoder(handler):
    return NominatimGeocoder(
        base_url="https://geo.test", user_agent="Crave Tests",
        transport=httpx.MockTransport(handler),
    )


async def test_search_parses_results():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {"lat": "40.7128", "lon": "-74.0060", "display_name": "New York, USA"},
        ])

    geocoder = _geocoder(handler)
    results = await geocoder.search("new york", limit=3)
    await geocoder.aclose()

    assert results[0].latitude == pytest.approx(40.7128)
    assert results[0].display_name == "New York, USA"
    assert seen[0].url.path == "/search"
    assert seen[0].url.params["q"] == "new york"
    assert seen[0].url.params["limit"] == "3"
    assert seen[0].headers["user-agent"] == "Crave Tests"


async def test_reverse_prefers_city_and_state():
    def handler(request):
        return httpx.Response(200, json={
            "display_name": "1, Main St, Manhattan, New York, USA",
            "address": {"city": "New York", "state": "New York", "country": "USA"},
        })

    geocoder = _geocoder(handler)
    location = await geocoder.reverse(40.7, -74.0)
    await geocoder.aclose()

    assert location.display_name == "New York, New York"
    assert location.latitude == 40.7


async def test_reverse_falls_back_to_display_name():
    def handler(request):
        return httpx.Response(200, json={"display_name": "Atlantic Ocean", "address": {}})

    geocoder = _geocoder(handler)
    assert (await geocoder.reverse(30.0, -40.0)).display_name == "Atlantic Ocean"
    await geocoder.aclose()


async def test_reverse_error_payload_raises():
    geocoder = _geocoder(lambda r: httpx.Response(200, json={"error": "Unable to geocode"}))
    with pytest.raises(GeocodingError):
        await geocoder.reverse(0.0, 0.0)
    await geocoder.aclose()


@pytest.mark.parametrize("response", [
    httpx.Response(503, text="busy"),
    httpx.Response(200, text="<html>not json</html>"),
    httpx.Response(200, json=[{"lat": "x"}]),
])
async def test_bad_responses_raise_geocoding_error(response):
    geocoder = _geocoder(lambda r: response)
    with pytest.raises(GeocodingError) as exc_info:
        await geocoder.search("anywhere")
    assert exc_info.value.http_status == 502
    await geocoder.aclose()


async def test_transport_failure_raises_geocoding_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    geocoder = _geocoder(handler)
    with pytest.raises(GeocodingError):
        await geocoder.search("anywhere")
    await geocoder.aclose()
