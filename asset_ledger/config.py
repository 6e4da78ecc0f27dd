"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class LedgerConfig(BaseSettings):
    """Asset ledger configuration"""

    # Token configuration
    decimals: int = 18
    initial_supply_units: int = 100_000_000_000  # Whole tokens minted to the owner
    custody_account: str = "ledger"  # Facade's own address for custodied value

    # Identities used when the API builds its ledger
    owner_identity: str = "owner"
    price_reporter_identity: str = "oracle"

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090

    # Security configuration
    auth_enabled: bool = True
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stdout

    class Config:
        env_prefix = "ASSET_LEDGER_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
