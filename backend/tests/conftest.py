from types import SimpleNamespace
from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi.testclient import TestClient

from trip_api.app_factory import create_app
from trip_api.core.security import create_access_token
from trip_api.db.trip_store import TripStore


def completion_response(content):
    """Shape of an OpenAI-compatible chat completion, as far as we read it."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def completion_client():
    client = MagicMock()
    client.chat.completions.create.return_value = completion_response(
        "Day 1:\n- Street food tour\nDay 2:\n- Cooking class"
    )
    return client


@pytest.fixture
def app(mongo_client, completion_client):
    return create_app(mongo_client=mongo_client, completion_client=completion_client)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan that wires the stores
    with TestClient(app) as c:
        yield c


@pytest.fixture
def trips_collection(mongo_client):
    return mongo_client["trip_planner"]["trips"]


@pytest.fixture
def trip_store(trips_collection):
    return TripStore(trips_collection)


@pytest.fixture
def auth_headers():
    def _headers(user_id):
        return {"Authorization": f"Bearer {create_access_token(subject=user_id)}"}
    return _headers
