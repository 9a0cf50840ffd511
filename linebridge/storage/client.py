"""
Store Client — Connection Ownership for Line Protocol Writes

StoreClient wraps the async InfluxDB client and exposes the two calls the
translator needs: write(text, database) and close().

ConnectionResolver owns at most one client handle. The handle is created
lazily on first use and released exactly once on teardown.
"""

import logging
from threading import Lock
from typing import Callable, Optional, Protocol
from urllib.parse import urlparse

from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync

from linebridge.errors import ConfigurationError
from .config import ConnectionConfig


logger = logging.getLogger(__name__)


class ClientHandle(Protocol):
    """Anything that can submit line protocol text to a database."""

    async def write(self, text: str, database: str) -> None:
        ...

    async def close(self) -> None:
        ...


class StoreClient:
    """
    Open connection to an InfluxDB-compatible store.
    
    Writes go through the v2-compatible write endpoint, with the target
    database passed as the bucket. InfluxDB 3 accepts this form directly.
    """

    def __init__(self, config: ConnectionConfig):
        """
        Create the underlying async client.
        
        Args:
            config: Connection configuration
            
        Raises:
            ValueError: If the endpoint is not an http(s) URL with a host
        """
        parsed = urlparse(config.endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"malformed endpoint '{config.endpoint}'")
        
        self.endpoint = config.endpoint
        self._client = InfluxDBClientAsync(
            url=config.endpoint,
            token=config.token.get_secret_value(),
            org=config.org or None,
        )
        self._write_api = self._client.write_api()

    async def write(self, text: str, database: str) -> None:
        """Submit line protocol text to the given database."""
        await self._write_api.write(bucket=database, record=text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._client.close()


class ConnectionResolver:
    """
    Owner of the static connection parameters and the single client handle.
    
    get_client() acquires the handle (creating it on first use) and
    teardown() releases it. Creation is guarded so concurrent first use
    still builds exactly one handle.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        client_factory: Optional[Callable[[ConnectionConfig], ClientHandle]] = None
    ):
        self.config = config
        self._client_factory = client_factory or StoreClient
        self._client: Optional[ClientHandle] = None
        self._lock = Lock()

    @property
    def default_database(self) -> str:
        return self.config.default_database

    @property
    def has_client(self) -> bool:
        return self._client is not None

    def get_client(self) -> ClientHandle:
        """
        Return the client handle, creating it if none exists yet.
        
        Raises:
            ConfigurationError: If the client cannot be constructed
        """
        if self._client is None:
            with self._lock:
                if self._client is None:
                    try:
                        self._client = self._client_factory(self.config)
                    except Exception as e:
                        raise ConfigurationError(
                            f"Failed to create store client: {e}"
                        ) from e
                    logger.info(f"Store client created for {self.config.endpoint}")
        return self._client

    async def teardown(self) -> None:
        """
        Close and drop the client handle. Never raises.
        
        A later get_client() builds a fresh handle.
        """
        client, self._client = self._client, None
        if client is None:
            return
        
        try:
            await client.close()
        except Exception as e:
            logger.warning(f"Ignoring error while closing store client: {e}")
        logger.info("Store client closed")
