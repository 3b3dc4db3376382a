import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roamster import models  # noqa: F401
from roamster.data import RULES_VERSION
from roamster.database import Base, get_db
from roamster.main import app
from roamster.services.recommendation.context_builder import fixed_clock
from roamster.services.recommendation_service import recommendation_service

DELHI_TRIP = {
    "destination": "Delhi",
    "start_date": "2024-04-10",
    "end_date": "2024-04-14",
    "travel_group": "solo",
}


@pytest.fixture
async def client(tmp_path, monkeypatch):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'roamster.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setattr(recommendation_service, "clock", fixed_clock(19))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()


async def register(client, email="traveler@roamster.app", password="secret123") -> dict:
    resp = await client.post("/api/auth/register", json={"email": email, "password": password, "name": "Asha"})
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}


async def create_trip(client, headers, **overrides) -> dict:
    resp = await client.post("/api/trips", json={**DELHI_TRIP, **overrides}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.json() == {"status": "ok", "service": "roamster", "rules_version": RULES_VERSION}


async def test_register_login_and_me(client):
    headers = await register(client)

    me = await client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "traveler@roamster.app"
    assert me.json()["dietary_preference"] == "none"

    duplicate = await client.post("/api/auth/register", json={"email": "traveler@roamster.app", "password": "secret123"})
    assert duplicate.status_code == 400

    bad = await client.post("/api/auth/login", json={"email": "traveler@roamster.app", "password": "wrong-pass"})
    assert bad.status_code == 401

    good = await client.post("/api/auth/login", json={"email": "traveler@roamster.app", "password": "secret123"})
    assert good.status_code == 200
    assert good.json()["token"]


async def test_requests_without_valid_token_are_rejected(client):
    assert (await client.get("/api/trips")).status_code in (401, 403)
    bogus = {"Authorization": "Bearer not-a-token"}
    assert (await client.get("/api/trips", headers=bogus)).status_code == 401


async def test_profile_and_preferences(client):
    headers = await register(client)

    resp = await client.put("/api/users/profile", json={"name": "Asha R", "phone": "+91 98765 43210"}, headers=headers)
    assert resp.json()["name"] == "Asha R"

    resp = await client.put(
        "/api/users/preferences",
        json={"dietary_preference": "vegetarian", "social_intent": "reels", "gender": "Female"},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["dietary_preference"] == "vegetarian"
    assert resp.json()["social_intent"] == "reels"

    invalid = await client.put("/api/users/preferences", json={"dietary_preference": "keto"}, headers=headers)
    assert invalid.status_code == 422

    profile = await client.get("/api/users/profile", headers=headers)
    assert profile.json()["gender"] == "Female"

    resp = await client.put("/api/users/preferences", json={"gender": None, "dietary_preference": None}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["gender"] is None
    assert resp.json()["dietary_preference"] == "vegetarian"


async def test_trip_validation(client):
    headers = await register(client)
    resp = await client.post("/api/trips", json={**DELHI_TRIP, "end_date": "2024-04-10"}, headers=headers)
    assert resp.status_code == 422
    resp = await client.post("/api/trips", json={**DELHI_TRIP, "travel_group": "friends"}, headers=headers)
    assert resp.status_code == 422
    resp = await client.post("/api/trips", json={**DELHI_TRIP, "destination": "   "}, headers=headers)
    assert resp.status_code == 422


async def test_only_one_active_trip(client):
    headers = await register(client)
    first = await create_trip(client, headers)
    second = await create_trip(client, headers, destination="Goa", travel_group="kids")
    assert second["is_active"] is True

    active = await client.get("/api/trips/active/current", headers=headers)
    assert active.json()["id"] == second["id"]

    resp = await client.put(f"/api/trips/{first['id']}/activate", headers=headers)
    assert resp.json()["is_active"] is True

    trips = (await client.get("/api/trips", headers=headers)).json()
    assert len(trips) == 2
    assert [t["id"] for t in trips if t["is_active"]] == [first["id"]]


async def test_update_and_delete_trip(client):
    headers = await register(client)
    trip = await create_trip(client, headers)

    resp = await client.put(f"/api/trips/{trip['id']}", json={"end_date": "2024-04-09"}, headers=headers)
    assert resp.status_code == 422

    resp = await client.put(f"/api/trips/{trip['id']}", json={"destination": "Mumbai", "comfort_level": "premium"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["destination"] == "Mumbai"
    assert resp.json()["comfort_level"] == "premium"

    assert (await client.delete(f"/api/trips/{trip['id']}", headers=headers)).status_code == 200
    assert (await client.get(f"/api/trips/{trip['id']}", headers=headers)).status_code == 404


async def test_null_clears_optional_trip_fields(client):
    headers = await register(client)
    trip = await create_trip(client, headers, accommodation="hotel", activity_intensity="high")
    assert trip["accommodation"] == "hotel"

    resp = await client.put(
        f"/api/trips/{trip['id']}",
        json={"accommodation": None, "activity_intensity": None, "destination": None},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["accommodation"] is None
    assert resp.json()["activity_intensity"] is None
    assert resp.json()["destination"] == "Delhi"


async def test_trips_are_scoped_to_their_owner(client):
    owner = await register(client)
    trip = await create_trip(client, owner)
    stranger = await register(client, email="stranger@roamster.app")

    assert (await client.get(f"/api/trips/{trip['id']}", headers=stranger)).status_code == 404
    assert (await client.get(f"/api/recommendations?trip_id={trip['id']}", headers=stranger)).status_code == 404
    assert (await client.get("/api/trips/active/current", headers=stranger)).status_code == 404


async def test_full_recommendation_envelope(client):
    headers = await register(client)
    trip = await create_trip(client, headers)

    resp = await client.get(f"/api/recommendations?trip_id={trip['id']}", headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["context"]["time_of_day"] == "evening"
    assert data["context"]["destination"] == "Delhi"
    assert data["errors"] == []
    assert "Smart Casual Outfit" in [i["name"] for i in data["recommendations"]["clothing"]["items"]]
    assert "Sunset Point" in [i["name"] for i in data["recommendations"]["experiences"]["items"]]
    assert [n["title"] for n in data["notifications"]] == ["Evening Experience"]

    # Defaults to the active trip
    again = await client.get("/api/recommendations", headers=headers)
    assert again.json()["context"] == data["context"]


async def test_domain_slices(client):
    headers = await register(client)
    trip = await create_trip(client, headers)

    for path, domain in (("clothes", "clothing"), ("food", "food"), ("guide", "experience"), ("photo", "photo")):
        resp = await client.get(f"/api/{path}?trip_id={trip['id']}", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["domain"] == domain
        assert resp.json()["trip_id"] == trip["id"]

    missing = await client.get(f"/api/food?trip_id={uuid.uuid4()}", headers=headers)
    assert missing.status_code == 404


async def test_preferences_reach_the_engine(client):
    headers = await register(client)
    await client.put("/api/users/preferences", json={"dietary_preference": "vegan"}, headers=headers)
    trip = await create_trip(client, headers)

    food = (await client.get(f"/api/food?trip_id={trip['id']}", headers=headers)).json()
    assert food["items"] == []
    assert food["warnings"]


async def test_notification_lifecycle(client):
    headers = await register(client)
    trip = await create_trip(client, headers)

    resp = await client.post(f"/api/notifications/refresh?trip_id={trip['id']}", headers=headers)
    assert resp.status_code == 201
    (created,) = resp.json()["notifications"]
    assert created["type"] == "experience"
    assert created["trip_id"] == trip["id"]

    listing = (await client.get("/api/notifications", headers=headers)).json()
    assert listing["unread_count"] == 1

    assert (await client.put(f"/api/notifications/{created['id']}/read", headers=headers)).status_code == 200
    assert (await client.get("/api/notifications", headers=headers)).json()["unread_count"] == 0

    await client.post("/api/notifications/refresh", headers=headers)
    assert (await client.get("/api/notifications?is_read=false", headers=headers)).json()["unread_count"] == 1
    await client.put("/api/notifications/read-all", headers=headers)
    assert (await client.get("/api/notifications", headers=headers)).json()["unread_count"] == 0

    missing = await client.put(f"/api/notifications/{uuid.uuid4()}/read", headers=headers)
    assert missing.status_code == 404
