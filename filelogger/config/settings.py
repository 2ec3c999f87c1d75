from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ArchiveDateSource = Literal["boundary", "last_write"]


class Settings(BaseSettings):
    log_dir: Path = Field(default=Path("logs"), validation_alias="FILELOGGER_LOG_DIR")
    encoding: str = Field(default="utf-8", validation_alias="FILELOGGER_ENCODING")
    weekday_prefix: str = Field(default="log", validation_alias="FILELOGGER_WEEKDAY_PREFIX")
    weekend_stem: str = Field(default="weekend", validation_alias="FILELOGGER_WEEKEND_STEM")
    extension: str = Field(default=".txt", validation_alias="FILELOGGER_EXTENSION")
    archive_date_source: ArchiveDateSource = Field(
        default="boundary",
        validation_alias="FILELOGGER_ARCHIVE_DATE_SOURCE",
        description="Date used in archive names: the boundary Sunday, or the Sunday of the file's last write",
    )
    timezone: str = Field(
        default="",
        validation_alias="FILELOGGER_TIMEZONE",
        description="IANA timezone for the system clock; empty means local time",
    )
    log_level: str = Field(default="INFO", validation_alias="FILELOGGER_LOG_LEVEL")
    diagnostics_file: Path | None = Field(
        default=None,
        validation_alias="FILELOGGER_DIAGNOSTICS_FILE",
        description="Optional file receiving filelogger's own diagnostics when logging is configured",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid FILELOGGER_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, value: str) -> str:
        """Validate that the extension carries its leading dot."""
        if not value.startswith("."):
            raise ValueError(f"extension must start with '.', got: {value!r}")
        return value

    @field_validator("weekday_prefix", "weekend_stem")
    @classmethod
    def validate_name_part(cls, value: str) -> str:
        """Validate that file name parts are plain names, not paths."""
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"file name part must be a non-empty plain name, got: {value!r}")
        return value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Validate that a configured timezone is known to zoneinfo."""
        if not value:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {value!r}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Configured timezone, or None for local time."""
        return ZoneInfo(self.timezone) if self.timezone else None
