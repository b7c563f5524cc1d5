"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COVKIT__SECTION__KEY)
3. Project YAML (.covkit.yaml)
4. Global YAML (~/.config/covkit/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    COVKIT__<SECTION>__<KEY>=<VALUE>

Examples:
    COVKIT__LOGGING__LEVEL=DEBUG
    COVKIT__MERGE__STRICT_SHAPES=false
    COVKIT__REPORT__WATERMARK_HIGH=90
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COVKIT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces every merge and derivation step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class MergeConfig(BaseModel):
    """Merge behavior for coverage records of the same file.

    Env vars:
        COVKIT__MERGE__STRICT_SHAPES: Reject records whose ids differ
    """

    strict_shapes: bool = Field(
        default=True,
        description="Raise on statement/function/branch id mismatches between runs. "
        "When false, ids are unioned and branch arms zero-padded (logged as a warning).",
    )


class ReportConfig(BaseModel):
    """Terminal summary table settings.

    Env vars:
        COVKIT__REPORT__WATERMARK_LOW: Below this pct a cell is rendered red
        COVKIT__REPORT__WATERMARK_HIGH: At or above this pct a cell is rendered green
        COVKIT__REPORT__SORT_BY: Row order, "path" or "pct"
    """

    watermark_low: float = Field(default=50.0, ge=0.0, le=100.0)
    watermark_high: float = Field(default=80.0, ge=0.0, le=100.0)
    sort_by: Literal["path", "pct"] = "path"

    @model_validator(mode="after")
    def validate_watermarks(self) -> "ReportConfig":
        if self.watermark_low >= self.watermark_high:
            raise ValueError(
                f"watermark_low ({self.watermark_low}) must be below "
                f"watermark_high ({self.watermark_high})"
            )
        return self


class CovkitConfig(BaseModel):
    """Root configuration for covkit.

    All settings can be configured via:
    1. Environment variables: COVKIT__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    merge: MergeConfig = Field(default_factory=MergeConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
