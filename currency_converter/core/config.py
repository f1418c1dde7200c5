from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, LOG_FORMAT,
    SEED_DEFAULT_RATES, ENABLE_RATE_UPDATES).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Logging: "json" (one object per line) or "text"
    log_format: Literal["json", "text"] = "json"

    # Rate graph
    # Load the built-in USD->CAD->GBP->EUR chain when the app starts
    seed_default_rates: bool = True

    # Allows PUT/DELETE on /rates; conversions stay available either way
    enable_rate_updates: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
