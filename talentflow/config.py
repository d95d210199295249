"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "TalentFlow Evaluation Platform"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Storage
    STORAGE_BACKEND: Literal["memory", "json", "redis"] = "memory"
    DATA_FILE: str = "talentflow-data.json"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "talentflow:"
    SEED_ON_STARTUP: bool = True
    ORGANIZATION_ID: str = "org-1"

    # Evaluation form
    SCORE_MIN: float = Field(default=1.0, ge=0)
    SCORE_MAX: float = Field(default=10.0, gt=0)
    DEFAULT_FORM_SCORE: float = 5.0
    FEEDBACK_FALLBACK_MESSAGE: str = (
        "Error: No se pudo generar la retroalimentación. "
        "Por favor, revisa la configuración de la API y vuelve a intentarlo."
    )

    # Analytics
    FLIGHT_RISK_WINDOW_DAYS: int = Field(default=90, ge=1, le=365)

    @model_validator(mode="after")
    def validate_score_range(self):
        """Ensure the rating scale is well formed."""
        if self.SCORE_MIN >= self.SCORE_MAX:
            raise ValueError(
                f"SCORE_MIN must be < SCORE_MAX, got {self.SCORE_MIN} >= {self.SCORE_MAX}"
            )
        if not self.SCORE_MIN <= self.DEFAULT_FORM_SCORE <= self.SCORE_MAX:
            raise ValueError("DEFAULT_FORM_SCORE must lie inside [SCORE_MIN, SCORE_MAX]")
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production must not run in debug mode or on volatile storage."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.STORAGE_BACKEND == "memory":
                raise ValueError("STORAGE_BACKEND 'memory' is not allowed in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
