"""Configuration management using Pydantic Settings."""

import logging
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_BASE_URL = "https://canvas.instructure.com"

# Config file location
CONFIG_PATH = Path.home() / ".config" / "canvas-mcp" / "config.yaml"


def validate_base_url(base_url: str) -> str:
    """Validate a Canvas instance URL.

    Args:
        base_url: URL of the Canvas instance

    Returns:
        The URL without a trailing slash

    Raises:
        ValueError: If the URL is not an absolute http(s) URL
    """
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid Canvas base URL: {base_url}")
    return base_url.rstrip("/")


class ServerConfig(BaseModel):
    """Validated configuration handed to the MCP server.

    Accepts both snake_case field names and the camelCase keys used by
    MCP client configuration files (``canvasApiKey``, ``canvasBaseUrl``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_key: str = Field(alias="canvasApiKey", description="Your Canvas API access token")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="canvasBaseUrl",
        description="Your Canvas instance URL",
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        return validate_base_url(v)


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from YAML config."""
        config = load_config()
        if field_name in config:
            return config[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all config values."""
        return load_config()


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Unlike :class:`ServerConfig`, a missing API key is tolerated here so the
    server can start and report the problem on the first tool call.
    """

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Canvas API access token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Canvas instance URL")
    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("debug", "CANVAS_DEBUG", "DEBUG"),
        description="Enable debug logging",
    )

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        return validate_base_url(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources - priority: env > yaml > defaults."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    def to_server_config(self) -> ServerConfig:
        """Build the immutable server configuration."""
        return ServerConfig(api_key=self.api_key, base_url=self.base_url, debug=self.debug)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None


def load_config() -> dict[str, Any]:
    """Load config from YAML file.

    Returns:
        Dictionary of config values, empty dict if file doesn't exist or is invalid.
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def configure_logging(debug: bool = False) -> None:
    """Send log output to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    # httpx logs every request at INFO/DEBUG, including the URL
    logging.getLogger("httpx").setLevel(logging.WARNING)
