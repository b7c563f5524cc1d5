"""Config module exports."""

from covkit.config.loader import CovkitSettings, load_config
from covkit.config.models import (
    CovkitConfig,
    LoggingConfig,
    MergeConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "CovkitConfig",
    "CovkitSettings",
    "LoggingConfig",
    "MergeConfig",
    "ReportConfig",
]
