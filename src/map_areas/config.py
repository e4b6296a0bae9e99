"""Package configuration."""

import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``MAP_AREAS_``)."""

    model_config = SettingsConfigDict(
        env_prefix="MAP_AREAS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "info"

    # Converter defaults
    default_dialect: str = "osbot"
    default_style: str = "array"

    # Umbrella areas that are too large to import when resolving named areas
    skip_area_names: Annotated[list[str], NoDecode] = ["MAINLAND_EXTENSIONS", "OVERWORLD"]

    # Default viewport culling padding (> 1 means tiles, otherwise projection units)
    viewport_padding: float = 0.0

    @field_validator("skip_area_names", mode="before")
    @classmethod
    def parse_skip_area_names(cls, v):
        """Parse skipped area names from string (JSON or comma-separated) or list."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [name.strip() for name in v.split(",") if name.strip()]
        return v


settings = Settings()
