"""
Shared test fixtures - test client, standard calculator inputs.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def uniform_measurements():
    """20 wall measurements, all 0.42 mm (slight over-extrusion on a 0.40 line)."""
    return ["0.42"] * 20
