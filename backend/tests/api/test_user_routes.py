"""User Routes — profile read/update and per-user listings."""

from tests.api.fakes import restaurant_payload


async def test_get_user(client, customer):
    res = await client.get(f"/api/users/{customer['id']}")
    assert res.status_code == 200
    assert res.json()["email"] == "john@example.com"
    assert "passwordHash" not in res.json()


async def test_get_unknown_user_is_404(client):
    res = await client.get("/api/users/99")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_patch_user_changes_only_sent_fields(client, customer):
    res = await client.patch(f"/api/users/{customer['id']}", json={
        "profileImg": "https://img/new.png",
    })
    assert res.status_code == 200
    data = res.json()
    assert data["profileImg"] == "https://img/new.png"
    assert data["name"] == "John Doe"
    assert data["createdAt"] == customer["createdAt"]


async def test_patch_user_email_collision(client, customer, owner):
    res = await client.patch(f"/api/users/{owner['id']}", json={
        "email": "john@example.com",
    })
    assert res.status_code == 400


async def test_patch_unknown_user_is_404(client):
    res = await client.patch("/api/users/42", json={"name": "Ghost"})
    assert res.status_code == 404


async def test_owned_restaurants(client, owner):
    await client.post("/api/restaurants", json=restaurant_payload(owner["id"]))
    await client.post("/api/restaurants", json=restaurant_payload(99, name="Other"))

    res = await client.get(f"/api/users/{owner['id']}/restaurants")
    assert [r["name"] for r in res.json()] == ["Seaside Grill"]


async def test_user_listings_empty_for_new_user(client, customer):
    for path in ("reservations", "orders", "reviews"):
        res = await client.get(f"/api/users/{customer['id']}/{path}")
        assert res.status_code == 200
        assert res.json() == []
