"""
Store Connection Configuration — Settings-Driven Parameters

Connection parameters are fixed when the resolver is created and never
change afterwards. Supports both local InfluxDB 3 (http://host:8181) and
cloud endpoints (full https URL).
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import SecretStr

from linebridge.config import Settings, settings


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Store connection configuration.
    
    The token is a SecretStr and is excluded from repr so it never ends
    up in logs.
    """
    endpoint: str
    default_database: str
    token: SecretStr = field(default_factory=lambda: SecretStr(""), repr=False)
    org: str = ""
    name: str = ""


def load_config(source: Optional[Settings] = None) -> ConnectionConfig:
    """
    Build the connection configuration from application settings.
    
    Environment Variables:
        INFLUX_HOST: Store endpoint URL (e.g. http://localhost:8181)
        INFLUX_DATABASE: Default database when neither message nor node sets one
        INFLUX_TOKEN: Authentication token
        INFLUX_ORG: Organization (only needed by v2-style servers)
        INFLUX_CONFIG_NAME: Display name for this connection
    
    Returns:
        ConnectionConfig instance with loaded values
    """
    source = source or settings
    
    return ConnectionConfig(
        endpoint=source.INFLUX_HOST.strip(),
        default_database=source.INFLUX_DATABASE.strip(),
        token=source.INFLUX_TOKEN,
        org=source.INFLUX_ORG,
        name=source.INFLUX_CONFIG_NAME,
    )
