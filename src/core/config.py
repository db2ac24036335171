"""Configuration management for todolist."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Application Constants
class Constants:
    """Application-wide constants."""

    # API Configuration
    API_PREFIX: str = "/api"
    TODOS_PATH: str = "/todos"

    # HTTP Status Codes
    HTTP_OK: int = 200
    HTTP_CREATED: int = 201
    HTTP_NO_CONTENT: int = 204
    HTTP_BAD_REQUEST: int = 400
    HTTP_NOT_FOUND: int = 404

    # Error messages
    MSG_TITLE_REQUIRED: str = "Title is required"
    MSG_INVALID_PRIORITY: str = "Priority must be low, medium, or high"
    MSG_TODO_NOT_FOUND: str = "Todo not found"
    MSG_INVALID_BODY: str = "Invalid request body"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
    PUBLIC_DIR: Path = PROJECT_ROOT / "public"
    TEMPLATES_DIR: Path = PROJECT_ROOT / "templates"


constants = Constants()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Interface the API server binds to")
    port: int = Field(default=3000, description="Port the API server listens on")
    public_dir: Path = Field(default=constants.PUBLIC_DIR, description="Directory holding the client view assets")
    log_level: str = Field(default="INFO", description="Root log level")

    # Client Configuration
    api_base_url: str = Field(default="http://localhost:3000/api", description="Base URL the client view talks to")
    client_timeout_seconds: float = Field(default=30.0, description="HTTP timeout for client view requests")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
