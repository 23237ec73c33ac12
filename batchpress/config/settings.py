"""Typed runtime settings with dotenv support and startup validation."""

import logging
import math

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from batchpress.domain import SizeUnit, TargetParameters


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for compression session defaults and export naming.

    Environment variable names map directly to field names in uppercase.
    Example: `default_target_size` reads from `DEFAULT_TARGET_SIZE`.

    Attributes:
        environment_name: Runtime environment label.
        log_level: Logging level name applied to the `batchpress` logger tree.
        default_target_size: Target size value assigned to newly submitted jobs.
        default_target_unit: Target size unit assigned to newly submitted jobs.
        max_dimension: Longest-edge pixel bound passed to the transformation.
        output_name_prefix: Prefix prepended to source names for export entries.
        archive_file_name: Suggested file name for the exported archive.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    log_level: str = Field(default="INFO")
    default_target_size: float = Field(default=500.0, gt=0)
    default_target_unit: SizeUnit = Field(default=SizeUnit.KB)
    max_dimension: int = Field(default=1920, ge=1)
    output_name_prefix: str = Field(default="compressed-", min_length=1)
    archive_file_name: str = Field(default="compressed-images.zip", min_length=1)

    @field_validator("output_name_prefix", "archive_file_name")
    @classmethod
    def _validate_non_blank_string(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_level), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized_level

    @field_validator("default_target_unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("default_target_size")
    @classmethod
    def _validate_finite_size(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("default_target_size must be finite")
        return value

    def default_target_parameters(self) -> TargetParameters:
        """Return target parameters assigned to newly submitted jobs.

        Returns:
            TargetParameters: Default size and unit pair.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return TargetParameters(size=self.default_target_size, unit=self.default_target_unit)


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
