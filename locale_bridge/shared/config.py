from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Only ambient behaviour is configurable here. The locale catalog and the
    store tables are compiled in and cannot be changed at runtime.
    """

    # --- Application Meta ---
    APP_NAME: str = "locale-bridge"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON

    # Keyed conversions drop locales a store does not carry.
    # True reports each drop at WARNING, False at DEBUG.
    LOG_DROPPED_KEYS: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
