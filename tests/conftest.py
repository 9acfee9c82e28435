"""
- Build a small, seeded in-memory store so targets are predictable
- Override FastAPI's get_store so routes use that store
- Provide a client fixture (TestClient(app)) that already has the override applied
"""
import os
import random
import pytest

from fastapi.testclient import TestClient

# Ensure the app does NOT run dev-only startup hooks (e.g., loading/downloading the dictionary)
os.environ.setdefault("APP_ENV", "test")

from wordle.main import app, get_store
from wordle.store import GameStore

@pytest.fixture
def store() -> GameStore:
    # One word only -> every round's target is CRANE
    return GameStore(["CRANE"], rng=random.Random(0))

@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use our test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    # This client talks to the FastAPI app in-process; no dictionary file or network is touched.
    return TestClient(app)
