import pytest
from fastapi.testclient import TestClient

from project_tracker_api.app.core.config import Settings
from project_tracker_api.app.core.store import init_store
from project_tracker_api.app.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(seed_data=True, id_strategy="counter"))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def empty_client():
    return TestClient(create_app(Settings(seed_data=False, id_strategy="counter")))


@pytest.fixture
def length_client():
    return TestClient(create_app(Settings(seed_data=False, id_strategy="length")))


@pytest.fixture
def store():
    return init_store(Settings(seed_data=True, id_strategy="counter"))


@pytest.fixture
def empty_store():
    return init_store(Settings(seed_data=False, id_strategy="counter"))
