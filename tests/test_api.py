"""
Tests for the sport matching API.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from sport_matching.api.app import create_app
from sport_matching.errors import RepositoryUnavailableError
from sport_matching.handlers import MatchRequestHandler
from sport_matching.repositories import InMemoryProfileRepository


@pytest.fixture
def client(players, cache):
    """Create a test client over seeded in-memory storage."""
    app = create_app(profiles=InMemoryProfileRepository(players), cache=cache)
    with TestClient(app) as test_client:
        yield test_client


def _match_ids(response):
    return [m["id"] for m in response.json()["matches"]]


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Sport Matching API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "healthy": True}


def test_get_matches(client):
    """Test matches endpoint against the reference pool."""
    response = client.get("/matches/requester")
    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == "requester"
    assert len(data["matches"]) == 1

    alice = data["matches"][0]
    assert alice["id"] == "alice"
    assert alice["shared_sport_ids"] == ["tennis"]
    assert alice["distance_km"] == pytest.approx(5.56, abs=0.01)
    assert "lookup_time_ms" in data


def test_get_matches_unknown_user(client):
    response = client.get("/matches/ghost")
    assert response.status_code == 404
    assert "ghost" in response.json()["detail"]


def test_second_lookup_is_a_cache_hit(client):
    client.get("/matches/requester")
    client.get("/matches/requester")

    stats = client.get("/stats").json()
    assert stats["matching"]["cache_hits"] == 1
    assert stats["matching"]["computations"] == 1
    assert stats["cache"]["ttl"] == 120


def test_invalidate_endpoint(client, cache):
    client.get("/matches/requester")
    response = client.delete("/matches/requester/cache")
    assert response.status_code == 200
    assert cache.get("requester") is None


def test_match_request_lifecycle(client, cache):
    client.get("/matches/requester")
    client.get("/matches/alice")

    response = client.post(
        "/match-requests",
        json={"from_user_id": "requester", "to_user_id": "alice", "sport_id": "tennis"},
    )
    assert response.status_code == 201
    request_id = response.json()["id"]
    assert response.json()["status"] == "Pending"
    assert cache.get("requester") is None
    assert cache.get("alice") is None

    incoming = client.get("/match-requests/incoming", params={"user_id": "alice"})
    assert [r["id"] for r in incoming.json()] == [request_id]

    client.get("/matches/requester")
    response = client.patch(f"/match-requests/{request_id}", json={"status": "Accepted"})
    assert response.status_code == 200
    assert response.json()["status"] == "Accepted"
    assert cache.get("requester") is None

    history = client.get("/match-requests/history", params={"user_id": "requester"})
    assert [r["id"] for r in history.json()] == [request_id]


def test_update_with_pending_status_is_rejected(client):
    request_id = client.post(
        "/match-requests",
        json={"from_user_id": "requester", "to_user_id": "alice", "sport_id": "tennis"},
    ).json()["id"]

    response = client.patch(f"/match-requests/{request_id}", json={"status": "Pending"})
    assert response.status_code == 400


def test_cancel_by_outsider_is_forbidden(client):
    request_id = client.post(
        "/match-requests",
        json={"from_user_id": "requester", "to_user_id": "alice", "sport_id": "tennis"},
    ).json()["id"]

    response = client.patch(f"/match-requests/{request_id}/cancel", params={"user_id": "bob"})
    assert response.status_code == 403

    response = client.patch(f"/match-requests/{request_id}/cancel", params={"user_id": "alice"})
    assert response.status_code == 200
    assert response.json()["status"] == "Cancelled"


def test_delete_match_request(client):
    request_id = client.post(
        "/match-requests",
        json={"from_user_id": "requester", "to_user_id": "alice", "sport_id": "tennis"},
    ).json()["id"]

    assert client.delete(f"/match-requests/{request_id}").status_code == 200
    assert client.delete(f"/match-requests/{request_id}").status_code == 404


def test_request_to_unknown_user(client):
    response = client.post(
        "/match-requests",
        json={"from_user_id": "requester", "to_user_id": "ghost", "sport_id": "tennis"},
    )
    assert response.status_code == 404


def test_location_update_validation(client):
    response = client.patch(
        "/users/requester/location",
        json={"latitude": 91.0, "longitude": 20.0, "search_radius_km": 10},
    )
    assert response.status_code == 422


def test_location_update_changes_matches(client):
    client.get("/matches/requester")
    response = client.patch(
        "/users/requester/location",
        json={"latitude": 51.0, "longitude": 20.0, "search_radius_km": 10},
    )
    assert response.status_code == 200
    assert response.json()["latitude"] == 51.0

    assert _match_ids(client.get("/matches/requester")) == ["bob"]


def test_sport_endpoints(client):
    response = client.post("/users/requester/sports", json={"sport_id": "cycling"})
    assert response.status_code == 200
    assert response.json()["sport_ids"] == ["cycling", "tennis"]
    assert _match_ids(client.get("/matches/requester")) == ["alice", "carol"]

    assert client.post("/users/requester/sports", json={"sport_id": "cycling"}).status_code == 400
    assert client.delete("/users/requester/sports/tennis").status_code == 200
    assert _match_ids(client.get("/matches/requester")) == ["carol"]


def test_availability_endpoint(client):
    response = client.patch("/users/dave/availability", json={"is_available_now": True})
    assert response.status_code == 200
    assert response.json()["is_available_now"] is True
    assert _match_ids(client.get("/matches/requester")) == ["alice", "dave"]


def test_repository_outage_maps_to_503(players, cache):
    class DownRepository(InMemoryProfileRepository):
        async def get_profile(self, user_id):
            raise RepositoryUnavailableError("profile store down")

    app = create_app(profiles=DownRepository(players), cache=cache)
    with TestClient(app) as client:
        response = client.get("/matches/requester")

    assert response.status_code == 503


def test_register_users_then_match(cache):
    app = create_app(profiles=InMemoryProfileRepository(), cache=cache)
    with TestClient(app) as client:
        assert client.get("/matches/anna").status_code == 404

        response = client.post(
            "/users",
            json={
                "id": "anna",
                "name": "Anna",
                "email": "anna@example.com",
                "is_available_now": True,
                "search_radius_km": 10,
                "latitude": 50.0,
                "longitude": 20.0,
                "sport_ids": ["tennis"],
            },
        )
        assert response.status_code == 201
        assert response.json()["sport_ids"] == ["tennis"]

        client.post(
            "/users",
            json={
                "id": "piotr",
                "name": "Piotr",
                "email": "piotr@example.com",
                "is_available_now": True,
                "latitude": 50.05,
                "longitude": 20.0,
                "sport_ids": ["tennis", "squash"],
            },
        )

        assert client.get("/users/piotr").json()["search_radius_km"] == 0
        assert _match_ids(client.get("/matches/anna")) == ["piotr"]


def test_register_validates_ranges(client):
    response = client.post(
        "/users",
        json={"id": "x", "name": "X", "email": "x@example.com", "search_radius_km": 101},
    )
    assert response.status_code == 422


@pytest.mark.parametrize("method", ["list_incoming", "list_outgoing", "list_history"])
def test_request_listing_outage_maps_to_503(method):
    service = AsyncMock()
    getattr(service, method).side_effect = RepositoryUnavailableError("request store down")
    handler = MatchRequestHandler(request_service=service)

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(getattr(handler, method)("requester"))

    assert exc_info.value.status_code == 503
