"""Pydantic models for UniFi Network client configuration.

ClientConfig is the immutable configuration a UnifiClient is built from.
UnifiSettings loads the same values (plus logging and paging defaults) from
the environment, a .env file or a YAML file for applications and the CLI.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Literal, Tuple, Type

import httpx
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_TIMEOUT = 30.0
DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 200


def _validate_base_url(v: str) -> str:
    """Require an absolute http(s) URL and drop any trailing slash."""
    v = (v or "").strip()
    if not v:
        raise ValueError("Base URL cannot be empty")
    try:
        url = httpx.URL(v)
    except httpx.InvalidURL as e:
        raise ValueError(f"Base URL is not a valid URL: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(
            "Base URL must be absolute, e.g. https://192.168.1.1/proxy/network/integration"
        )
    return v.rstrip("/")


def _validate_api_key(v: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError("API key cannot be empty")
    return v


class ClientConfig(BaseModel):
    """Validated, immutable connection settings for one client.

    Attributes:
        base_url: Absolute URL of the integration API root (no trailing slash).
        api_key: Key sent in the X-API-KEY header. Excluded from repr.
        verify_ssl: Verify TLS certificates (disable for self-signed consoles).
        timeout: Per-request timeout in seconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str
    api_key: str = Field(repr=False)
    verify_ssl: bool = True
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_base_url(v)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        return _validate_api_key(v)


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads values from a YAML file.

    The YAML file path is determined by the CONFIG_PATH environment variable.
    """

    def get_field_value(
        self, field: Any, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from YAML config."""
        yaml_config = self._load_yaml_config()
        field_value = yaml_config.get(field_name)
        return field_value, field_name, False

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        config_path = os.environ.get("CONFIG_PATH")
        if not config_path:
            return {}

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
                return data if isinstance(data, dict) else {}
        except (FileNotFoundError, yaml.YAMLError, PermissionError):
            # Errors will be handled by loader.py
            return {}

    def __call__(self) -> Dict[str, Any]:
        """Return the YAML config values."""
        return self._load_yaml_config()


class UnifiSettings(BaseSettings):
    """UniFi Network client settings.

    Configuration is loaded in the following precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (UNIFI_ prefix)
    3. .env file
    4. YAML configuration file (via CONFIG_PATH)
    5. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIFI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required settings
    base_url: str = Field(
        ...,
        description="Integration API root, e.g. https://192.168.1.1/proxy/network/integration",
    )
    api_key: str = Field(
        ...,
        description="API key created in the Network application",
        repr=False,
    )

    # Optional connection settings
    verify_ssl: bool = Field(
        default=True,
        description="Verify SSL certificates (set to false for self-signed certs)",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Items requested per page when listing resources",
        ge=1,
        le=MAX_PAGE_SIZE,
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format: json (production) or text (development)",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to set precedence.

        Order (first = highest priority):
        1. init_settings (constructor arguments)
        2. env_settings (environment variables with UNIFI_ prefix)
        3. dotenv_settings (.env file)
        4. yaml_settings (CONFIG_PATH YAML file)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if normalized not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: DEBUG, INFO, WARNING, ERROR"
            )
        return normalized

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_base_url(v)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        return _validate_api_key(v)

    def to_client_config(self) -> ClientConfig:
        """Build the immutable ClientConfig for these settings."""
        return ClientConfig(
            base_url=self.base_url,
            api_key=self.api_key,
            verify_ssl=self.verify_ssl,
            timeout=self.timeout,
        )
