from functools import lru_cache
import json
from urllib.parse import urlsplit

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="AI Content Detector API", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    api_prefix: str = Field(default="/v1", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cors_allowed_origins: str = Field(default="http://localhost:3000", alias="CORS_ALLOWED_ORIGINS")
    cors_allow_origin_regex: str = Field(default="", alias="CORS_ALLOW_ORIGIN_REGEX")

    model_version: str = Field(default="v2.1.0", alias="MODEL_VERSION")
    simulate_latency: bool = Field(default=True, alias="SIMULATE_LATENCY")
    simulated_delay_min_seconds: float = Field(default=1.0, ge=0.0, alias="SIMULATED_DELAY_MIN_SECONDS")
    simulated_delay_max_seconds: float = Field(default=3.0, ge=0.0, alias="SIMULATED_DELAY_MAX_SECONDS")
    max_simulated_delay_seconds: float = Field(default=3.0, ge=0.0, alias="MAX_SIMULATED_DELAY_SECONDS")
    detector_seed: int | None = Field(default=None, alias="DETECTOR_SEED")

    max_upload_bytes: int = Field(default=10_485_760, gt=0, alias="MAX_UPLOAD_BYTES")

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    metrics_enabled: bool = Field(default=True, alias="METRICS_ENABLED")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return "INFO"
        normalized = value.strip().upper()
        if normalized in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return normalized
        return "INFO"

    @field_validator("detector_seed", mode="before")
    @classmethod
    def empty_seed_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def order_delay_range(self) -> "Settings":
        if self.simulated_delay_min_seconds > self.simulated_delay_max_seconds:
            self.simulated_delay_min_seconds, self.simulated_delay_max_seconds = (
                self.simulated_delay_max_seconds,
                self.simulated_delay_min_seconds,
            )
        return self

    @staticmethod
    def _normalize_origin(origin: str) -> str:
        candidate = origin.strip().strip("'\"")
        if not candidate:
            return ""

        if "://" not in candidate:
            candidate = f"https://{candidate}"

        parsed = urlsplit(candidate)
        if not parsed.scheme or not parsed.netloc:
            return ""

        # CORS matching is exact on scheme+host+port; paths must be removed.
        return f"{parsed.scheme}://{parsed.netloc}".rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        raw = self.cors_allowed_origins.strip()
        if not raw:
            return []

        values: list[str]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
                if isinstance(parsed, list):
                    values = [str(item) for item in parsed]
                else:
                    values = [raw]
            except json.JSONDecodeError:
                values = [raw]
        else:
            values = raw.split(",")

        normalized = [self._normalize_origin(value) for value in values]
        return [origin for origin in normalized if origin]

    @property
    def cors_origin_regex(self) -> str | None:
        value = self.cors_allow_origin_regex.strip()
        return value or None


@lru_cache
def get_settings() -> Settings:
    return Settings()
