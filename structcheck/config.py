"""Library configuration via environment variables."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ``STRUCTCHECK_*`` environment variables."""

    # Field annotations
    RULES_KEY: str = "validate"
    NAME_KEY: str = "json"
    IGNORE_MARKER: str = "-"

    # Engine
    MAX_DEPTH: int = 32
    CATCH_VALIDATOR_ERRORS: bool = True

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {
        "env_prefix": "STRUCTCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("MAX_DEPTH")
    @classmethod
    def _positive_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("MAX_DEPTH must be at least 1")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value.lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()
