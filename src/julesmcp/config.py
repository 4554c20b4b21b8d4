"""Configuration for Jules MCP."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from julesmcp.exceptions import ConfigError

DEFAULT_BASE_URL = "https://jules.googleapis.com/v1alpha"
API_KEY_HEADER = "x-goog-api-key"
SERVER_NAME = "jules-mcp-server"

# Default page sizes exposed by the MCP tools
DEFAULT_SESSION_PAGE_SIZE = 10
DEFAULT_ACTIVITY_PAGE_SIZE = 20
DEFAULT_SOURCE_PAGE_SIZE = 10

# Default branch when a source repo is given without a starting branch
DEFAULT_STARTING_BRANCH = "main"


class Settings(BaseSettings):
    """
    Settings read from the environment.

    Priority: ENV > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="JULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = None
    api_base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load settings, failing if no API key is configured."""
    settings = Settings()
    if not settings.api_key:
        raise ConfigError("JULES_API_KEY environment variable is required.")
    return settings
