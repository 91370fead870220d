from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import _results_service, app
from app.services.presenter import ResultUnavailableError, present_state
from ingestion.service import ResultState


@pytest.fixture
def client():
    """Test client that cleans up dependency overrides after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthcheck(client):
    """Verify the healthcheck endpoint returns a successful response."""
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_latest_result(client, caixa_payload):
    """Verify /results/latest returns the presented draw."""
    mock_service = MagicMock()
    mock_service.latest.return_value = present_state(ResultState(data=caixa_payload))
    app.dependency_overrides[_results_service] = lambda: mock_service

    response = client.get("/results/latest")
    assert response.status_code == 200
    body = response.json()
    assert body["contest_number"] == 2735
    assert body["winning_numbers"] == [4, 13, 22, 35, 41, 60]
    assert [tier["hit_count"] for tier in body["prize_tiers"]] == [6, 5, 4]
    mock_service.latest.assert_called_once_with()


def test_contest_result(client, generic_payload):
    """Verify /results/{contest} forwards the contest number to the service."""
    mock_service = MagicMock()
    mock_service.contest.return_value = present_state(ResultState(data=generic_payload))
    app.dependency_overrides[_results_service] = lambda: mock_service

    response = client.get("/results/2700")
    assert response.status_code == 200
    assert response.json()["status"] == "Acumulou!"
    mock_service.contest.assert_called_once_with(2700)


def test_result_not_found(client):
    """Verify a missing draw maps to 404."""
    mock_service = MagicMock()
    mock_service.latest.return_value = None
    app.dependency_overrides[_results_service] = lambda: mock_service

    response = client.get("/results/latest")
    assert response.status_code == 404


def test_upstream_error_is_surfaced(client):
    """Verify upstream failures map to 502 with the original message."""
    mock_service = MagicMock()
    mock_service.latest.side_effect = ResultUnavailableError("Server error '500 Internal Server Error'")
    app.dependency_overrides[_results_service] = lambda: mock_service

    response = client.get("/results/latest")
    assert response.status_code == 502
    assert response.json() == {"detail": "Server error '500 Internal Server Error'"}


def test_contest_must_be_positive(client):
    mock_service = MagicMock()
    app.dependency_overrides[_results_service] = lambda: mock_service

    response = client.get("/results/0")
    assert response.status_code == 422
    mock_service.contest.assert_not_called()


def test_search_redirects_to_official_page(client):
    response = client.get("/results/search", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "https://loterias.caixa.gov.br/Paginas/Mega-Sena.aspx"
