from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="WODSCALE_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="WODSCALE_LOG_FILE",
        description="Optional log file path; console only when unset",
    )
    catalog_path: Path | None = Field(
        default=None,
        validation_alias="WODSCALE_CATALOG_PATH",
        description="Movement catalog YAML overriding the bundled catalog",
    )
    validate_catalog: bool = Field(
        default=True,
        validation_alias="WODSCALE_VALIDATE_CATALOG",
        description="Run the catalog integrity pass when loading",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid WODSCALE_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("catalog_path")
    @classmethod
    def validate_catalog_path(cls, value: Path | None) -> Path | None:
        """Warn early when an override points nowhere; loading will fail later."""
        if value is not None and not value.exists():
            logger.warning(f"WODSCALE_CATALOG_PATH does not exist: {value}. Catalog loading will fail.")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
