"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration with sensible defaults."""

    log_level: str = Field(default="info", alias="LOG_LEVEL")
    metrics_enabled: bool = Field(default=True, alias="METRICS_ENABLED")
    function_name: str = Field(default="lambda-layer-test", alias="AWS_LAMBDA_FUNCTION_NAME")
    function_version: str = Field(default="$LATEST", alias="AWS_LAMBDA_FUNCTION_VERSION")
    memory_limit_mb: int = Field(default=512, alias="AWS_LAMBDA_FUNCTION_MEMORY_SIZE", ge=128)
    region: str = Field(default="us-east-1", alias="AWS_REGION")
    # Only used to fill the local context deadline
    timeout_seconds: float = Field(default=15.0, alias="FUNCTION_TIMEOUT_SECONDS", gt=0)
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=9000, alias="PORT", ge=1, le=65535)
    service_version: str = Field(default="0.1.0", alias="SERVICE_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def function_arn(self) -> str:
        return f"arn:aws:lambda:{self.region}:000000000000:function:{self.function_name}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
