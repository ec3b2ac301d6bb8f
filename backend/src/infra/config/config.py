from datetime import tzinfo
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from infra.utils.version import get_version


class LoggingConfig(BaseModel):
    LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    JSON_FORMAT: bool = False
    LIBRARY_LOG_LEVELS: dict[str, str | int] = Field(default_factory=dict)


class ReportConfig(BaseModel):
    MAX_DAYS: int = Field(default=30, gt=0)
    TARGETS_FILE: str = "./urls.cfg"

    LOG_SOURCE: Literal["file", "http"] = "file"
    LOGS_DIR: str = "./logs"
    LOGS_BASE_URL: str | None = None
    FETCH_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    TIMEZONE: str | None = None

    @field_validator("TIMEZONE", mode="after")
    @classmethod
    def is_timezone_valid(cls, timezone: str | None) -> str | None:
        if timezone is None:
            return None

        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown time zone: {timezone}")

        return timezone

    @model_validator(mode="after")
    def validate_http_source_fields(self) -> "ReportConfig":
        if self.LOG_SOURCE == "http" and not self.LOGS_BASE_URL:
            raise ValueError("REPORT_CONFIG field LOGS_BASE_URL required when LOG_SOURCE=http")

        return self

    def get_tzinfo(self) -> tzinfo | None:
        if self.TIMEZONE is None:
            return None

        return ZoneInfo(self.TIMEZONE)


class Config(BaseSettings):
    APP_NAME: str = "uptime-report"
    VERSION: str = get_version()
    ENVIRONMENT: Literal["loc", "dev", "pre", "pro"] = "dev"
    ROOT_PATH: str = "/uptime-report"

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOGGING_CONFIG: LoggingConfig = LoggingConfig()
    REPORT_CONFIG: ReportConfig = ReportConfig()

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_nested_delimiter="__",
    )


@lru_cache
def get_config() -> Config:
    return Config()
