"""
Pytest configuration and fixtures for smsproxy tests.
"""

import sys
from pathlib import Path

import httpx
import pytest

# Add the repository root to path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from smsproxy.config import ProxySettings  # noqa: E402
from smsproxy.transport import Identity, Message  # noqa: E402


class MockPhoneUtilities:
    """Mock phone utility: accepts "phone", strips spaces and punctuation."""

    def __init__(self, normalized: str | None = None):
        self._normalized = normalized
        self.normalized_values: list[str] = []

    def is_phone_credential_type(self, credential_type: str) -> bool:
        return credential_type == "phone"

    def normalize(self, phone_number: str) -> str:
        self.normalized_values.append(phone_number)
        if self._normalized is not None:
            return self._normalized
        return "+" + "".join(c for c in phone_number if c.isdigit())


class MockGateway:
    """
    In-process gateway built on httpx.MockTransport.

    Records every request and answers with a fixed status and body.
    """

    def __init__(self, status_code: int = 200, body: str = '{"id": 42}'):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []
        self.clients: list[httpx.AsyncClient] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    def client_factory(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        self.clients.append(client)
        return client


@pytest.fixture
def settings():
    """Settings matching the gateway used across tests."""
    return ProxySettings(
        host="gw.example.com",
        port=443,
        use_ssl=True,
        path="/send",
        username="u",
        password="p",
        sender="ACME",
        messages_per_second=10,
        max_transmit_retry_count=3,
    )


@pytest.fixture
def phone_utilities():
    return MockPhoneUtilities()


@pytest.fixture
def gateway():
    return MockGateway()


@pytest.fixture
def sample_message():
    """Sample message for a phone recipient."""
    return Message(
        id=1,
        content="hi",
        identity=Identity(credential_type="phone", credential_value="+1 (555) 000-1111"),
    )
