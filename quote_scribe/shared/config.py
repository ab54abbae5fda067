# quote_scribe\shared\config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class StorageBackend(str, Enum):
    MEMORY = "memory"
    FILESYSTEM = "filesystem"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    The OpenRouter credential is deliberately absent: it is user data and
    lives in the Entity Store, not in the environment.
    """

    # --- Application Meta ---
    APP_NAME: str = "quote-scribe"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "quote-scribe"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Persistence ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM

    # FILESYSTEM CONFIG
    # One file per record key lives under this directory
    STORAGE_PATH: str = "data/storage"

    # Browser-style quota in characters (key + value); 0 disables the check
    STORAGE_QUOTA_BYTES: int = 5_000_000

    # --- Generation Service (OpenRouter) ---
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODEL: str = "openai/chatgpt-4o-latest"
    OPENROUTER_TIMEOUT: float = 30.0
    OPENROUTER_MAX_TOKENS: int = 3000
    OPENROUTER_TEMPERATURE: float = 0.8
    OPENROUTER_TOP_P: float = 0.9
    OPENROUTER_REFERER: str = "http://localhost:8000"
    OPENROUTER_TITLE: str = "Quote Scribe Reflect"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
