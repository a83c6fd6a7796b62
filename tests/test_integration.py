import pytest
from fastapi.testclient import TestClient

from src.jakarta_life.config import settings
from src.jakarta_life.main import create_app
from src.jakarta_life.services.routing import service as routing_service


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    # Providers unconfigured: every endpoint must serve fallback data.
    monkeypatch.setattr(settings, "google_maps_api_key", None)
    monkeypatch.setattr(settings, "weather_api_key", None)
    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}
    providers = api_client.get("/api/health/providers").json()
    assert providers == {"google_maps": {"configured": False}, "weather_api": {"configured": False}}


def test_locations(api_client: TestClient):
    body = api_client.get("/api/locations").json()
    assert body["office"]["company_name"] == "Sinarmas MSIG"
    assert body["home"]["id"] == "home"
    assert any(dest["id"] == "dinner-scbd" for dest in body["destinations"])
    assert {scenario["id"] for scenario in body["scenarios"]} == {"normal", "heavy-rain"}


def test_recommendations(api_client: TestClient):
    response = api_client.post(
        "/api/recommendations",
        json={
            "destination_id": "dinner-scbd",
            "scheduled_time": "19:30",
            "trip_date": "2024-01-08",
            "scenario": "heavy-rain",
            "language": "en",
            "weather": "light-rain",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["destination_id"] == "dinner-scbd"
    recs = body["recommendations"]
    assert len(recs) == 3
    assert [rec["score"] for rec in recs] == sorted((rec["score"] for rec in recs), reverse=True)
    assert all(rec["departure_time"].startswith("2024-01-08") for rec in recs)
    assert all(rec["message"] == rec["motivational_message"]["en"] for rec in recs)


def test_recommendations_for_custom_location(api_client: TestClient):
    response = api_client.post(
        "/api/recommendations",
        json={
            "custom_location": {
                "id": "friend",
                "name": "Friend",
                "address": "Jl. Kemang Raya",
                "coordinates": [-6.26, 106.81],
            },
            "trip_date": "2024-01-09",
        },
    )
    assert response.status_code == 200
    assert response.json()["destination_id"] == "friend"


def test_recommendations_validation(api_client: TestClient):
    unknown = api_client.post("/api/recommendations", json={"destination_id": "atlantis"})
    assert unknown.status_code == 404
    bad_time = api_client.post("/api/recommendations", json={"scheduled_time": "25:00"})
    assert bad_time.status_code == 422


def test_weekly_and_today_plans(api_client: TestClient):
    week = api_client.get("/api/plans/week", params={"scenario": "normal", "language": "en"}).json()
    assert [day["day_of_week"] for day in week["days"]] == [1, 2, 3, 4, 5]
    assert all(len(day["alternative_recommendations"]) == 2 for day in week["days"])

    today = api_client.get("/api/plans/today")
    assert today.status_code == 200
    assert today.json() is None or today.json()["day_of_week"] in range(1, 6)


def test_recompute_day_plan(api_client: TestClient):
    response = api_client.post(
        "/api/plans/day",
        json={
            "day_of_week": 4,
            "plan_date": "2024-01-11",
            "activity": {
                "id": "thursday-gym",
                "day_of_week": 4,
                "destination_id": "gym-scbd",
                "activity_name": {"en": "Gym", "id": "Gym"},
                "scheduled_time": "18:30",
            },
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["activity"]["id"] == "thursday-gym"
    assert body["destination"]["id"] == "gym-scbd"
    assert body["recommendation"]["departure_time"].startswith("2024-01-11")

    missing = api_client.post(
        "/api/plans/day",
        json={
            "day_of_week": 4,
            "activity": {
                "id": "x",
                "day_of_week": 4,
                "destination_id": "atlantis",
                "activity_name": {"en": "X"},
                "scheduled_time": "18:30",
            },
        },
    )
    assert missing.status_code == 404


def test_route_display_falls_back_without_key(api_client: TestClient):
    response = api_client.get(
        "/api/routes/display",
        params={"origin": "-6.2103,106.8222", "destination": "-6.2673,106.7831"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["fallback"] is True
    assert len(body["decoded_path"]) == 2
    assert body["traffic_segments"][0]["color"] == "green"
    assert "google.com/maps" in body["google_maps_url"]

    bad = api_client.get("/api/routes/display", params={"origin": "nowhere", "destination": "-6.2,106.8"})
    assert bad.status_code == 400


def test_directions_proxy_requires_key(api_client: TestClient):
    response = api_client.get("/api/directions", params={"origin": "a", "destination": "b"})
    assert response.status_code == 500


def test_region_routes(api_client: TestClient):
    assert api_client.get("/api/routes/regions", params={"from_region": "x", "to_region": "depok"}).status_code == 404
    assert (
        api_client.get("/api/routes/regions", params={"from_region": "bekasi", "to_region": "depok"}).status_code
        == 500
    )


def test_region_route_without_legs_is_a_provider_error(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        routing_service,
        "get_directions",
        lambda *args, **kwargs: {"status": "OK", "routes": [{"summary": "Tol Cikampek", "legs": []}]},
    )
    response = api_client.get("/api/routes/regions", params={"from_region": "bekasi", "to_region": "depok"})
    assert response.status_code == 500
    assert "no legs" in response.json()["detail"]


def test_places_never_fail(api_client: TestClient):
    response = api_client.get("/api/places", params={"query": "Grand Indonesia"})
    assert response.status_code == 200
    assert response.json() == []


def test_weather_falls_back_to_mock(api_client: TestClient):
    body = api_client.get("/api/weather").json()
    assert body["source"] == "mock"
    assert len(body["forecast"]) == 12


def test_weather_impact(api_client: TestClient):
    body = api_client.get(
        "/api/weather/impact/thunderstorm",
        params={"language": "en", "base_duration": 30, "arrival_time": "18:00"},
    ).json()
    assert body["impact"]["multiplier"] == 1.5
    assert body["badge"]["text"] == "Severe Weather"
    assert body["delay_text"] == "+50% travel time due to weather"
    assert body["adjusted_duration"] == 45
    assert body["departure_time"] == "17:15"

    sunny = api_client.get("/api/weather/impact/sunny").json()
    assert sunny["badge"] is None
    assert sunny["delay_text"] is None
    assert api_client.get("/api/weather/impact/snow").status_code == 422


def test_conditions(api_client: TestClient):
    flood = api_client.get("/api/conditions/flood").json()
    assert len(flood) == 8
    traffic = api_client.get("/api/conditions/traffic").json()
    assert len(traffic) == 8
    assert all(item["source"] == "mock" for item in traffic)


def test_conditions_summary(api_client: TestClient):
    summary = api_client.get("/api/conditions/summary", params={"language": "en"}).json()
    assert len(summary) == 8
    north = next(entry for entry in summary if entry["region_id"] == "jakarta-utara")
    assert north["level"] == "high"
    assert north["name"] == "North Jakarta"
