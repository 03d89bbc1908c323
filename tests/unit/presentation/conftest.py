"""Fixtures for API and CLI tests.

The API runs against a SQLite file in a temporary directory and a
simulated bank without latency.
"""

import random

import pytest
from fastapi.testclient import TestClient

from fintrack.infrastructure.banking import SimulatedBankAdapter
from fintrack.presentation.api.app import API_V1_PREFIX, create_app
from fintrack.presentation.api.dependencies import get_bank_connection
from fintrack_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path}/fintrack-test.db",
        bank_auth_latency_seconds=0.0,
        bank_fetch_latency_seconds=0.0,
    )


@pytest.fixture
def bank_failure_probability() -> float:
    """Override in a test module or class to make logins fail."""
    return 0.0


@pytest.fixture
def app(test_settings, bank_failure_probability):
    app = create_app(test_settings)
    app.dependency_overrides[get_bank_connection] = lambda: SimulatedBankAdapter(
        auth_latency_seconds=0.0,
        fetch_latency_seconds=0.0,
        failure_probability=bank_failure_probability,
        rng=random.Random(3),
    )
    return app


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client
