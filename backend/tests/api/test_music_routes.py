"""Music Routes — song requests, upvotes and the now-playing flag.

Invariants:
    - Each upvote adds exactly one vote
    - Queue listing is most-upvoted first
    - Only one track plays per restaurant
"""


async def _request_song(client, title, restaurant_id=3, **extra):
    res = await client.post("/api/music", json={
        "restaurantId": restaurant_id, "title": title,
        "artist": "Ella Fitzgerald", "requestedBy": 1, **extra,
    })
    assert res.status_code == 201
    return res.json()


async def test_request_song_defaults(client):
    track = await _request_song(client, "Summertime")
    assert track["upvotes"] == 0
    assert track["isPlaying"] is False
    assert "createdAt" in track


async def test_upvote_three_times(client):
    track = await _request_song(client, "Summertime")
    for _ in range(3):
        res = await client.post(f"/api/music/{track['id']}/upvote")
        assert res.status_code == 200
    assert res.json()["upvotes"] == 3


async def test_upvote_unknown_track_is_404(client):
    res = await client.post("/api/music/99/upvote")
    assert res.status_code == 404


async def test_queue_sorted_by_upvotes(client):
    low = await _request_song(client, "Low")
    high = await _request_song(client, "High")
    await client.post(f"/api/music/{high['id']}/upvote")

    res = await client.get("/api/restaurants/3/music")
    assert [m["id"] for m in res.json()] == [high["id"], low["id"]]


async def test_mark_playing_switches_current_track(client):
    first = await _request_song(client, "First", isPlaying=True)
    second = await _request_song(client, "Second")

    res = await client.patch(f"/api/music/{second['id']}", json={"isPlaying": True})
    assert res.status_code == 200
    assert res.json()["isPlaying"] is True

    playing = await client.get("/api/restaurants/3/currently-playing")
    assert playing.json()["id"] == second["id"]

    queue = await client.get("/api/restaurants/3/music")
    flags = {m["id"]: m["isPlaying"] for m in queue.json()}
    assert flags == {first["id"]: False, second["id"]: True}


async def test_stop_playing(client):
    track = await _request_song(client, "Only", isPlaying=True)
    await client.patch(f"/api/music/{track['id']}", json={"isPlaying": False})
    res = await client.get("/api/restaurants/3/currently-playing")
    assert res.status_code == 404


async def test_patch_requires_is_playing(client):
    track = await _request_song(client, "Only")
    res = await client.patch(f"/api/music/{track['id']}", json={"upvotes": 100})
    assert res.status_code == 400


async def test_patch_unknown_track_is_404(client):
    res = await client.patch("/api/music/5", json={"isPlaying": True})
    assert res.status_code == 404
