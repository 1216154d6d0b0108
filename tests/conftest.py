import pytest
from fastapi.testclient import TestClient

from quota_admin.main import create_app
from quota_admin.schemas.config_version import ConfigVersionRecord
from quota_admin.services.config_history import ConfigHistory


@pytest.fixture
def records():
    """Config versions in the order the backend happens to return them."""
    return [
        ConfigVersionRecord(version=2, user="bob", date=1700003600),
        ConfigVersionRecord(version=5, user="alice", date=1700000000),
        ConfigVersionRecord(version=1),
    ]


@pytest.fixture
def history(records):
    return ConfigHistory(records)


@pytest.fixture
def client(history):
    """Create a TestClient around an app owning the test history."""
    with TestClient(create_app(history)) as client:
        yield client
