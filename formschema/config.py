from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FORMSCHEMA_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validation
    REQUIRED_MESSAGE: str = "The input field must not be empty!"
    ZERO_IS_EMPTY: bool = True  # A required number field holding 0 counts as empty
    PASSWORD_MIN_LENGTH: int = 8


@lru_cache
def get_settings() -> Settings:
    return Settings()
