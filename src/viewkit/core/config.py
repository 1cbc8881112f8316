"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Renderer settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="VIEWKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Runtime
    environment: str = Field(default="production", description="Deployment environment name")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Template cache
    template_cache_size: int | None = Field(
        default=None, gt=0, description="Max compiled templates kept (None = unbounded)"
    )

    # Template engine
    autoescape: bool = Field(default=False, description="Escape template output by default")
    trim_blocks: bool = Field(default=False, description="Strip first newline after a block tag")
    lstrip_blocks: bool = Field(default=False, description="Strip leading whitespace before block tags")

    # Hot reload
    watch_debounce_ms: int = Field(default=300, gt=0, description="File watcher debounce (ms)")

    @property
    def is_development(self) -> bool:
        """Whether development-only features (hot reload) are enabled."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
