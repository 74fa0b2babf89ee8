"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from affordability_gateway.api.main import create_app
from affordability_gateway.domain.models import AffordabilityInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_input() -> AffordabilityInput:
    """Typical buyer: $10k/month income, low stated expenses, 5% rate"""
    return AffordabilityInput(
        ask_price=500000.0,
        income=10000.0,
        expense=2000.0,
        interest_rate=5.0,
    )


@pytest.fixture
def sample_params() -> dict[str, str]:
    """Same buyer as sample_input, as query string parameters"""
    return {
        "ask_price": "500000",
        "income": "10000",
        "expense": "2000",
        "interest_rate": "5.0",
    }
