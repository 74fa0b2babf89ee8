"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "affordability-gateway"}


def test_metrics_endpoint(client: TestClient, sample_params: dict[str, str]):
    """Test Prometheus metrics endpoint"""
    client.get("/v1/affordability", params=sample_params)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "affordability_calculations_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_get_affordability(client: TestClient, sample_params: dict[str, str]):
    """Test GET /v1/affordability with valid query parameters"""
    response = client.get("/v1/affordability", params=sample_params)

    assert response.status_code == 200
    data = response.json()
    assert data["input"] == {
        "ask_price": 500000.0,
        "income": 10000.0,
        "expense": 2000.0,
        "interest_rate": 5.0,
    }
    assert data["effective_cash_flow"] == pytest.approx(5416.6667, abs=1e-3)
    assert data["loan_amount"] == pytest.approx(1_009_025, rel=1e-4)
    assert data["delta"] == pytest.approx(data["input"]["ask_price"] - data["loan_amount"])


def test_get_affordability_zero_rate(client: TestClient, sample_params: dict[str, str]):
    """Test 0% interest returns a finite straight-line loan"""
    response = client.get("/v1/affordability", params={**sample_params, "interest_rate": "0"})

    assert response.status_code == 200
    assert response.json()["loan_amount"] == pytest.approx(1_950_000)


@pytest.mark.parametrize("missing", ["ask_price", "income", "expense", "interest_rate"])
def test_get_affordability_missing_parameter(client: TestClient, sample_params: dict[str, str], missing: str):
    """Test missing parameter returns 400 with empty body"""
    del sample_params[missing]

    response = client.get("/v1/affordability", params=sample_params)

    assert response.status_code == 400
    assert response.content == b""


def test_get_affordability_malformed_parameter(client: TestClient, sample_params: dict[str, str]):
    """Test non-numeric parameter returns 400 with empty body"""
    response = client.get("/v1/affordability", params={**sample_params, "expense": "two thousand"})

    assert response.status_code == 400
    assert response.content == b""


def test_post_affordability(client: TestClient):
    """Test POST /v1/affordability with a JSON payload"""
    response = client.post(
        "/v1/affordability",
        json={"ask_price": 500000, "income": 10000, "expense": 6000, "interest_rate": 5.0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["effective_cash_flow"] == pytest.approx((10000 - 6000) / 1.2)
    assert data["delta"] == pytest.approx(500000 - data["loan_amount"])


def test_post_affordability_invalid_payload(client: TestClient):
    """Test malformed payload returns 400 with empty body"""
    response = client.post(
        "/v1/affordability",
        json={"ask_price": "cheap", "income": 10000, "expense": 2000, "interest_rate": 5.0},
    )

    assert response.status_code == 400
    assert response.content == b""


def test_post_affordability_negative_rate(client: TestClient):
    """Test negative interest rate is rejected"""
    response = client.post(
        "/v1/affordability",
        json={"ask_price": 500000, "income": 10000, "expense": 2000, "interest_rate": -2},
    )

    assert response.status_code == 400
    assert response.content == b""


def test_request_id_header(client: TestClient, sample_params: dict[str, str]):
    """Test request ID is generated, or echoed when supplied"""
    generated = client.get("/v1/affordability", params=sample_params)
    assert generated.headers["X-Request-ID"]

    echoed = client.get("/v1/affordability", params=sample_params, headers={"X-Request-ID": "abc-123"})
    assert echoed.headers["X-Request-ID"] == "abc-123"


def test_get_affordability_overflowing_input(client: TestClient):
    """Test finite inputs that overflow the loan amount return 400 with empty body"""
    response = client.get(
        "/v1/affordability",
        params={"ask_price": "1", "income": "1e307", "expense": "0", "interest_rate": "5"},
    )

    assert response.status_code == 400
    assert response.content == b""


def test_post_affordability_overflowing_input(client: TestClient):
    """Test overflowing JSON payload is rejected like the query string"""
    response = client.post(
        "/v1/affordability",
        json={"ask_price": 1, "income": 1e307, "expense": 0, "interest_rate": 5},
    )

    assert response.status_code == 400
    assert response.content == b""
