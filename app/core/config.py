from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8080


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Kubernetes Routing Experiment", alias="APP_NAME")
    environment: str = Field(default="production", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, alias="PORT")

    @field_validator("port", mode="before")
    @classmethod
    def default_empty_port(cls, value: object) -> object:
        # PORT="" in a pod spec means "not set".
        if value is None:
            return DEFAULT_PORT
        if isinstance(value, str) and not value.strip():
            return DEFAULT_PORT
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return "INFO"
        normalized = value.strip().upper()
        if normalized in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            return normalized
        return "INFO"


@lru_cache

def get_settings() -> Settings:
    return Settings()
