"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Rendering defaults from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Routing
    url_base_path: str = Field(default="/", description="Base path for generated action URLs")
    controller: str | None = Field(default=None, description="Route prefix for action buttons")

    # Action column
    primary_key: str = Field(default="id", description="Primary key field name of a row")
    action_template: str = Field(
        default="{view} {update} {delete}", description="Default action button template"
    )

    # Pager
    max_button_count: int = Field(default=10, gt=0, description="Max numbered page buttons")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
