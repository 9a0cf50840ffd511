"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Priority: Environment variables > .env file > defaults
    """
    
    # === Application ===
    PROJECT_NAME: str = "Line Bridge"
    ENVIRONMENT: str = "local"  # local, development, staging, production
    LOG_LEVEL: str = "INFO"
    
    # === Store Connection (shared config) ===
    INFLUX_HOST: str = "http://localhost:8181"
    INFLUX_DATABASE: str = ""
    INFLUX_TOKEN: SecretStr = SecretStr("")
    INFLUX_ORG: str = ""
    INFLUX_CONFIG_NAME: str = ""
    
    # === Write Node ===
    NODE_NAME: str = ""
    NODE_MEASUREMENT: str = ""
    NODE_DATABASE: str = ""
    STATUS_RESET_SECONDS: float = 3.0
    
    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()
