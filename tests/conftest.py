"""
Shared fixtures — in-memory store client and a resolver wired to it.

No live database is needed; the fake records every write.
"""

import pytest
from pydantic import SecretStr

from linebridge.storage import ConnectionConfig, ConnectionResolver


class FakeStoreClient:
    """ClientHandle that records writes instead of sending them."""

    def __init__(self, fail_with=None, close_error=None):
        self.writes = []
        self.closed = False
        self.fail_with = fail_with
        self.close_error = close_error

    async def write(self, text, database):
        if self.fail_with is not None:
            raise self.fail_with
        self.writes.append((text, database))

    async def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def connection_config():
    return ConnectionConfig(
        endpoint="http://localhost:8181",
        default_database="env",
        token=SecretStr("test-token"),
    )


@pytest.fixture
def fake_client():
    return FakeStoreClient()


@pytest.fixture
def resolver(connection_config, fake_client):
    return ConnectionResolver(connection_config, client_factory=lambda config: fake_client)
