"""Tests for the application-level endpoints."""

from fastapi.testclient import TestClient


def test_root(anonymous_client: TestClient) -> None:
    response = anonymous_client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to quotebook API"}


def test_health(anonymous_client: TestClient) -> None:
    response = anonymous_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_unknown_route_is_404(anonymous_client: TestClient) -> None:
    assert anonymous_client.get("/api/v1/shelves").status_code == 404
