"""
Configuration management for the Stellar transaction service.

Supports configuration via environment variables and .env files.
The gateway URL and network passphrase are fixed for the lifetime of
the process; requests can never change them.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from stellar_sdk import Network


class NetworkType(str, Enum):
    """Stellar network types."""
    PUBLIC = "public"
    TESTNET = "testnet"
    FUTURENET = "futurenet"


_HORIZON_URLS = {
    NetworkType.PUBLIC: "https://horizon.stellar.org",
    NetworkType.TESTNET: "https://horizon-testnet.stellar.org",
    NetworkType.FUTURENET: "https://horizon-futurenet.stellar.org",
}

_NETWORK_PASSPHRASES = {
    NetworkType.PUBLIC: Network.PUBLIC_NETWORK_PASSPHRASE,
    NetworkType.TESTNET: Network.TESTNET_NETWORK_PASSPHRASE,
    NetworkType.FUTURENET: Network.FUTURENET_NETWORK_PASSPHRASE,
}


class ServiceConfig(BaseSettings):
    """
    Configuration settings for the Stellar transaction service.

    All settings can be configured via environment variables with the
    STELLAR_SERVICE_ prefix. The listening port also honours plain PORT.
    """

    model_config = SettingsConfigDict(
        env_prefix="STELLAR_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    # Network settings
    network: NetworkType = Field(
        default=NetworkType.PUBLIC,
        description="Stellar network to build and submit transactions for"
    )
    horizon_url: str = Field(
        default="",
        description="Horizon URL; the network's public Horizon when unset"
    )
    network_passphrase: str = Field(
        default="",
        description="Network passphrase; the network's own when unset"
    )

    # HTTP server settings
    host: str = Field(
        default="0.0.0.0",
        description="Interface the API server binds to"
    )
    port: int = Field(
        default=3002,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "PORT", "STELLAR_SERVICE_PORT"),
        description="Port the API server listens on"
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware"
    )

    # Transaction parameters
    base_fee: int = Field(
        default=100,
        ge=100,
        description="Base fee per operation in stroops"
    )
    tx_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Validity window of built transactions"
    )
    default_trust_limit: str = Field(
        default="1000000000",
        description="Trustline limit used when the caller supplies none"
    )

    # Gateway client settings
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for calls to Horizon"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )

    @model_validator(mode="before")
    @classmethod
    def fill_network_defaults(cls, data: Any) -> Any:
        """Resolve an unset Horizon URL and passphrase from the network."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        network = NetworkType(data.get("network") or NetworkType.PUBLIC)
        if not data.get("horizon_url"):
            data["horizon_url"] = _HORIZON_URLS[network]
        if not data.get("network_passphrase"):
            data["network_passphrase"] = _NETWORK_PASSPHRASES[network]
        return data

    @field_validator("horizon_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# Global config instance
_config: Optional[ServiceConfig] = None


def get_config() -> ServiceConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = ServiceConfig()
    return _config


def set_config(config: ServiceConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
