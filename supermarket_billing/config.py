"""Runtime settings."""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SUPERMARKET_"


class Settings(BaseModel):
    """Settings for a billing terminal."""

    store_name: str = Field(default="SUPERMARKET BILLING SYSTEM", description="Title printed on bills")
    currency: str = Field(default="$", description="Currency symbol for amounts")
    log_level: str = Field(default="WARNING", description="Logging level name")
    catalog_file: Optional[str] = Field(None, description="JSON file to load products from")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from SUPERMARKET_* environment variables."""
        if environ is None:
            environ = os.environ

        values = {}
        for field_name in cls.model_fields:
            value = environ.get(ENV_PREFIX + field_name.upper())
            if value:
                values[field_name] = value
        return cls(**values)
