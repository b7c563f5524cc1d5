"""Core module exports."""

from covkit.core.errors import (
    ConfigError,
    CoverageError,
    CovkitError,
    ErrorCode,
)
from covkit.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "CoverageError",
    "CovkitError",
    "ErrorCode",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
