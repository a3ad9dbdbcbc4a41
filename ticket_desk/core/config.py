from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration read from environment variables."""

    app_name: str = Field(default="Ticket Desk")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s %(message)s")
    log_file: str | None = Field(default=None)

    # Storage configuration
    storage_path: str = Field(default="tickets.json")
    storage_key: str = Field(default="tickets_data", min_length=1)

    # Ticket handling
    employees: tuple[str, ...] = Field(
        default=("Max Mustermann", "Anna Schmidt", "Tom Weber", "Lisa Fischer"),
        min_length=1,
    )
    assignment_strategy: Literal["collection_size", "counter"] = Field(default="collection_size")
    seed_samples: bool = Field(default=True)

    class Config:
        env_file = ".env"
        env_prefix = "TICKET_DESK_"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()
