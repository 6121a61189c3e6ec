from __future__ import annotations

import os
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LANGUAGES = ("en", "pg")


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "NaijaTax"
    ENV: str = "dev"

    # Localization
    DEFAULT_LANGUAGE: str = "en"  # en = English, pg = Nigerian Pidgin

    # Exports
    CSV_EXPORT_FILENAME: str = "tax_history.csv"
    PDF_EXPORT_FILENAME: str = "Tax_Summary.pdf"
    PDF_WATERMARK_ENABLED: bool = False
    PDF_WATERMARK_TEXT: str = "ESTIMATE ONLY"

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CONTENT_SECURITY_POLICY: str = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data: https://fastapi.tiangolo.com; "
        "font-src 'self' data:; "
        "connect-src 'self'"
    )
    HSTS_SECONDS: int = 31_536_000
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    @field_validator("DEFAULT_LANGUAGE", mode="before")
    @classmethod
    def normalize_language(cls, v):
        """Accept 'EN', ' pg ' etc. from the environment."""
        if v is None:
            return "en"
        return str(v).strip().lower()

    @model_validator(mode="after")
    def _validate_fields(self) -> BaseAppSettings:
        if self.DEFAULT_LANGUAGE not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}; "
                f"got {self.DEFAULT_LANGUAGE!r}"
            )
        if self.LOG_FORMAT.lower() not in ("plain", "json"):
            raise ValueError("LOG_FORMAT must be 'plain' or 'json'")
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    LOG_LEVEL: str = "DEBUG"


class TestSettings(BaseAppSettings):
    ENV: str = "test"


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    CORS_ALLOW_ORIGINS: list[str] = [
        "http://localhost:3000",  # Local development
        "http://127.0.0.1:3000",  # Local development (alt)
    ]
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
