from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Logging knobs. Validation behavior is never configurable."""
    model_config = SettingsConfigDict(env_prefix="STRVALIDATE_", env_file=".env", extra="ignore")

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)


@lru_cache
def get_settings() -> Settings:
    return Settings()
