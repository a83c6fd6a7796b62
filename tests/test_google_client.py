from datetime import datetime

import httpx
import pytest

from src.jakarta_life.errors import ConfigurationError, ProviderError
from src.jakarta_life.models.domain import SeverityLevel
from src.jakarta_life.services.places.service import search_places
from src.jakarta_life.services.routing import service as routing_service
from src.jakarta_life.services.routing.google_client import GoogleMapsClient, check_health

ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def _client(handler, **kwargs) -> GoogleMapsClient:
    return GoogleMapsClient(
        api_key="test-key",
        base_url="https://maps.example.test/api",
        max_retries=kwargs.pop("max_retries", 2),
        backoff_seconds=0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def _route(duration, in_traffic, distance=15000, summary="Jl. Sudirman"):
    return {
        "summary": summary,
        "overview_polyline": {"points": ENCODED},
        "legs": [
            {
                "duration": {"value": duration},
                "duration_in_traffic": {"value": in_traffic},
                "distance": {"value": distance},
            }
        ],
    }


class FakeClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def directions(self, origin, destination, **kwargs):
        self.calls.append((origin, destination, kwargs))
        if self.error:
            raise self.error
        return self.payload

    def text_search(self, query, language="id", **kwargs):
        self.calls.append((query, language))
        if self.error:
            raise self.error
        return self.payload


def test_placeholder_key_is_rejected():
    with pytest.raises(ConfigurationError):
        GoogleMapsClient(api_key="your_key_here")
    with pytest.raises(ConfigurationError):
        GoogleMapsClient(api_key="")
    assert not check_health("your_key_here")
    assert check_health("real-key")


def test_directions_sends_traffic_parameters():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        seen["path"] = request.url.path
        return httpx.Response(200, json={"status": "OK", "routes": []})

    data = _client(handler).directions((-6.2, 106.8), (-6.3, 106.7))

    assert data["status"] == "OK"
    assert seen["path"] == "/api/directions/json"
    assert seen["origin"] == "-6.2,106.8"
    assert seen["destination"] == "-6.3,106.7"
    assert seen["departure_time"] == "now"
    assert seen["traffic_model"] == "best_guess"
    assert seen["key"] == "test-key"
    assert "alternatives" not in seen


def test_directions_retries_server_errors():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(503)
        return httpx.Response(200, json={"status": "OK", "routes": []})

    assert _client(handler).directions("a", "b", alternatives=True)["status"] == "OK"
    assert len(calls) == 2
    assert calls[1].url.params["alternatives"] == "true"


def test_transient_status_exhausts_retries():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"status": "OVER_QUERY_LIMIT"})

    with pytest.raises(ProviderError):
        _client(handler, max_retries=1).directions("a", "b")
    assert len(calls) == 2


def test_network_errors_become_provider_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(ProviderError):
        _client(handler, max_retries=0).directions("a", "b")


def test_terminal_status_is_returned_without_retry():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "routes": []})

    assert _client(handler).directions("a", "b")["status"] == "ZERO_RESULTS"
    assert len(calls) == 1


def test_text_search_biases_to_jakarta():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

    _client(handler).text_search("Grand Indonesia", language="en")
    assert seen["query"] == "Grand Indonesia Jakarta"
    assert seen["radius"] == "30000"
    assert seen["language"] == "en"


def test_search_places_returns_top_five():
    results = [
        {
            "place_id": f"p{i}",
            "name": f"Place {i}",
            "formatted_address": f"Jl. {i}",
            "geometry": {"location": {"lat": -6.2 + i / 100, "lng": 106.8}},
        }
        for i in range(7)
    ]
    places = search_places("mall", "en", client=FakeClient({"status": "OK", "results": results}))
    assert [place.place_id for place in places] == ["p0", "p1", "p2", "p3", "p4"]
    assert places[1].coordinates == pytest.approx((-6.19, 106.8))


@pytest.mark.parametrize(
    "client",
    [
        FakeClient(error=ProviderError("down")),
        FakeClient({"status": "REQUEST_DENIED", "results": []}),
        FakeClient({"status": "ZERO_RESULTS"}),
    ],
)
def test_search_places_never_raises(client):
    assert search_places("anything", client=client) == []


def test_search_places_without_key(monkeypatch):
    from src.jakarta_life.services.places import service as places_service

    def unconfigured():
        raise ConfigurationError("no key")

    monkeypatch.setattr(places_service, "GoogleMapsClient", unconfigured)
    assert search_places("mall") == []


def test_fallback_route_display_is_a_straight_line():
    origin, destination = (-6.2, 106.8), (-6.11, 106.8)
    route = routing_service.fallback_route_display(origin, destination)
    assert route.decoded_path == (origin, destination)
    assert route.duration == 30
    assert route.distance == 10.0
    assert len(route.traffic_segments) == 1
    assert route.traffic_segments[0].color == "green"
    assert route.traffic_segments[0].end_index == 1


def test_route_display_uses_provider_route():
    client = FakeClient({"status": "OK", "routes": [_route(600, 660)]})
    route, fallback = routing_service.route_display_with_fallback((-6.2, 106.8), (-6.3, 106.7), client)
    assert not fallback
    assert route.encoded_polyline == ENCODED
    assert route.duration == 11


@pytest.mark.parametrize(
    "client",
    [FakeClient(error=ProviderError("down")), FakeClient({"status": "ZERO_RESULTS", "routes": []})],
)
def test_route_display_falls_back(client):
    assert routing_service.fetch_route_display((-6.2, 106.8), (-6.3, 106.7), client) is None
    route, fallback = routing_service.route_display_with_fallback((-6.2, 106.8), (-6.3, 106.7), client)
    assert fallback
    assert len(route.decoded_path) == 2


def test_fetch_route_data_with_alternates():
    payload = {
        "status": "OK",
        "routes": [
            _route(1800, 2700),
            _route(1800, 2100, summary="Tol Dalam Kota"),
            _route(1800, 3000, summary=""),
            _route(1800, 1800, summary="ignored"),
        ],
    }
    client = FakeClient(payload)
    data = routing_service.fetch_route_data("jakarta-selatan", "jakarta-pusat", client)

    assert client.calls[0][2]["alternatives"] is True
    assert data.distance_km == 15
    assert data.normal_duration == 30
    assert data.current_duration == 45
    assert data.flood_affected
    assert len(data.alternate_routes) == 2
    first, second = data.alternate_routes
    assert (first.name, first.duration, first.traffic_level, first.flood_risk) == (
        "Tol Dalam Kota", 35, SeverityLevel.LOW, SeverityLevel.LOW,
    )
    assert second.name == "Alternate Route 2"
    assert second.traffic_level == SeverityLevel.HIGH
    assert second.flood_risk == SeverityLevel.MEDIUM


def test_fetch_route_data_rejects_unknown_region():
    with pytest.raises(ValueError):
        routing_service.fetch_route_data("atlantis", "jakarta-pusat", FakeClient())


def test_fetch_route_data_requires_a_route():
    with pytest.raises(ProviderError):
        routing_service.fetch_route_data("bekasi", "depok", FakeClient({"status": "NOT_FOUND", "routes": []}))


def test_fetch_route_data_rejects_route_without_legs():
    legless = {"status": "OK", "routes": [{"summary": "Jl. Sudirman", "legs": []}]}
    with pytest.raises(ProviderError):
        routing_service.fetch_route_data("bekasi", "depok", FakeClient(legless))


def test_future_traffic_estimate():
    client = FakeClient({"status": "OK", "routes": [_route(1200, 1920)]})
    departure = datetime(2024, 1, 8, 17, 0)
    assert routing_service.fetch_future_traffic_estimate("bekasi", "jakarta-pusat", departure, client) == (
        32,
        SeverityLevel.HIGH,
    )
    assert client.calls[0][2]["departure_time"] == int(departure.timestamp())


def test_future_traffic_estimate_defaults():
    departure = datetime(2024, 1, 8, 17, 0)
    failing = FakeClient(error=ProviderError("down"))
    empty = FakeClient({"status": "ZERO_RESULTS", "routes": []})
    legless = FakeClient({"status": "OK", "routes": [{"legs": []}]})
    for client in (failing, empty, legless):
        assert routing_service.fetch_future_traffic_estimate("bekasi", "depok", departure, client) == (
            45,
            SeverityLevel.MEDIUM,
        )
