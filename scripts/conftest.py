"""
Shared fixtures.

Every test gets a fresh in-memory store loaded with the demo data. API
tests run the FastAPI app against that store through a dependency
override, so nothing leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from placementpro.db.seed import seed_demo_data
from placementpro.db.store import InMemoryRecordStore, get_record_store
from placementpro.main import app


@pytest.fixture
def store():
    store = InMemoryRecordStore()
    seed_demo_data(store)
    return store


@pytest.fixture
def empty_store():
    return InMemoryRecordStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_record_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, email, password):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def tpo_headers(client):
    return _login(client, "tpo@college.edu", "tpo123")


@pytest.fixture
def student_headers(client):
    """Logged in as std1 (Priya, MCA, 8.5, no backlogs)."""
    return _login(client, "student1@college.edu", "student123")


@pytest.fixture
def weak_student_headers(client):
    """Logged in as std4 (Rahul, MCA, 6.5, one backlog)."""
    return _login(client, "student4@college.edu", "student123")


@pytest.fixture
def alumni_headers(client):
    """Logged in as alum1 (Vikram, Google)."""
    return _login(client, "alumni1@gmail.com", "alumni123")
