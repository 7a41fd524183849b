"""Configuration schemas."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: Literal["stdout", "file", "both"] = Field(
        "stdout", description="Where log records are written"
    )
    file_path: str = Field(
        "logs/design_patterns.log", description="Log file path when writing to file"
    )
    max_size_mb: int = Field(10, ge=1, description="Rotate the log file at this size")
    backup_count: int = Field(5, ge=0, description="Rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {list(LOG_LEVELS)}")
        return level


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output_format: Literal["json", "yaml", "table"] = Field(
        "table", description="Default format for catalog listings"
    )
