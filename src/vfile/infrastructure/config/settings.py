from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Content
    default_encoding: str = Field(
        default="utf-8", validation_alias="VFILE_DEFAULT_ENCODING"
    )

    # Paths ("host" follows the running platform)
    path_style: Literal["host", "posix", "windows"] = Field(
        default="host", validation_alias="VFILE_PATH_STYLE"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
