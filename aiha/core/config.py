# aiha/core/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCT_NAME = "aiha"
PRODUCT_VERSION = "0.1.0"


class Settings(BaseSettings):
    # Registry
    HUB_ENDPOINT: str = "https://huggingface.co"
    HUB_TOKEN: Optional[str] = None
    REQUEST_TIMEOUT: float = 30.0
    USER_AGENT: Optional[str] = None

    # Local cache; defaults to ~/.cache/aiha when unset
    CACHE_DIR: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="AIHA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
