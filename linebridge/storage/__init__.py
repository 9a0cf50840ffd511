"""
Storage Module — Time-Series Store Connection

Public API:
- ConnectionResolver: Owns the connection parameters and the client handle
- StoreClient: Async client writing line protocol text
- ClientHandle: Protocol any client handle satisfies
- ConnectionConfig: Configuration dataclass
- load_config: Load configuration from settings
"""

from .client import ClientHandle, ConnectionResolver, StoreClient
from .config import ConnectionConfig, load_config

__all__ = [
    "ClientHandle",
    "ConnectionResolver",
    "StoreClient",
    "ConnectionConfig",
    "load_config",
]
