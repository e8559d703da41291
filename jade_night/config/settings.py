"""
Jade Night - Application Settings

Loads configuration from environment variables (prefix JADE_NIGHT_) or a
.env file using Pydantic Settings, and applies the logging level.
"""

import logging
import random
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from jade_night.engine.base import MAX_PLAYERS, MIN_PLAYERS, WAITING_AREA_LIMIT

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game setup
    default_num_players: int = Field(default=4, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    rng_seed: int | None = None
    waiting_area_limit: int = Field(default=WAITING_AREA_LIMIT, ge=1)

    model_config = {
        "env_prefix": "JADE_NIGHT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger.

    Debug mode forces DEBUG regardless of log_level.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def make_rng(settings: Settings | None = None) -> random.Random:
    """Random generator seeded from rng_seed (unseeded when unset)."""
    settings = settings or get_settings()
    return random.Random(settings.rng_seed)
