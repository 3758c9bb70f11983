# This project was developed with assistance from AI tools.
"""Shared pytest fixtures for the back-office test suite.

Backend traffic goes through httpx.MockTransport handlers, so no test
touches the network; user accounts live in a per-test SQLite file.
"""
import sys
from pathlib import Path

import httpx
import pytest
import yaml

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from models import Client  # noqa: E402
from utils.api_client import BrokerageClient  # noqa: E402
from utils.sample_data import SAMPLE_CLIENTS  # noqa: E402
from utils.user_store import UserStore  # noqa: E402

API_URL = "http://backend.test/api"
FILE_SERVER_URL = "http://backend.test"
TOKEN = "test-token"


@pytest.fixture
def make_api_client():
    """Factory: BrokerageClient whose requests are answered by ``handler``."""
    clients = []

    def _make(handler, token: str = TOKEN) -> BrokerageClient:
        client = BrokerageClient(
            api_url=API_URL,
            token=token,
            file_server_url=FILE_SERVER_URL,
            timeout=5,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def sample_client() -> Client:
    """John Fernando with a few documents on file."""
    return Client(
        id=12,
        **SAMPLE_CLIENTS[0],
        nic_proof="/uploads/documents/12/nic.pdf",
        business_registration="/documents/12/br.png",
        coverage_proof="/uploads/documents/temp-1a2b3c/coverage.pdf",
    )


@pytest.fixture
def auth_config_path(tmp_path) -> Path:
    """Minimal users.yaml with one built-in administrator."""
    path = tmp_path / "users.yaml"
    path.write_text(yaml.safe_dump({
        "credentials": {
            "usernames": {
                "admin": {
                    "name": "Admin User",
                    "email": "admin@brokerage.local",
                    "password": "admin123",
                    "role": "admin",
                    "roles": ["admin"],
                },
            },
        },
        "cookie": {"name": "test_auth", "key": "test-key", "expiry_days": 1},
    }))
    return path


@pytest.fixture
def user_store(tmp_path, auth_config_path) -> UserStore:
    return UserStore(db_path=str(tmp_path / "app.db"), auth_config_path=auth_config_path)
