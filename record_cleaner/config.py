from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "AUDIT", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    database_url: str = Field(alias="DATABASE_URL")
    operator_id: str = Field(alias="OPERATOR_ID")

    translation_locale: str = Field(default="en_US", alias="TRANSLATION_LOCALE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cleanup_interval_seconds: int = Field(default=86400, alias="CLEANUP_INTERVAL_SECONDS")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL is required")
        if not self.operator_id.strip():
            raise ValueError("OPERATOR_ID is required")
        if not self.translation_locale.strip():
            raise ValueError("TRANSLATION_LOCALE must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        if self.cleanup_interval_seconds < 60:
            raise ValueError("CLEANUP_INTERVAL_SECONDS must be >= 60")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
