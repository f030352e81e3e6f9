"""Location Routes — place search and reverse geocoding."""


async def test_search(client, geocoder):
    res = await client.get("/api/locations/search", params={"q": "new york", "limit": 1})
    assert res.status_code == 200
    assert res.json() == [{
        "latitude": 40.7128, "longitude": -74.006,
        "displayName": "New York, United States",
    }]
    assert geocoder.queries == ["new york"]


async def test_search_query_too_short(client):
    res = await client.get("/api/locations/search", params={"q": "n"})
    assert res.status_code == 400


async def test_reverse(client):
    res = await client.get("/api/locations/reverse", params={
        "latitude": 40.7, "longitude": -74.0,
    })
    assert res.status_code == 200
    assert res.json()["displayName"] == "New York, New York"


async def test_geocoder_outage_is_502(client, geocoder):
    geocoder.fail = True
    res = await client.get("/api/locations/search", params={"q": "paris"})
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "GEOCODING_ERROR"
