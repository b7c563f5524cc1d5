"""covkit error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Coverage data
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Coverage (3xxx)
    COVERAGE_MISSING_FIELD = 3001
    COVERAGE_SHAPE_MISMATCH = 3002
    COVERAGE_PARSE_ERROR = 3003


@dataclass(frozen=True, slots=True)
class CovkitError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'COVERAGE_SHAPE_MISMATCH')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CovkitError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class CoverageError(CovkitError):
    """Malformed or incompatible coverage records."""

    @classmethod
    def missing_field(cls, field: str, path: str | None = None) -> "CoverageError":
        where = f" in {path}" if path else ""
        return cls(
            code=ErrorCode.COVERAGE_MISSING_FIELD,
            message=f"Missing required coverage field '{field}'{where}",
            details={"field": field, "path": path},
        )

    @classmethod
    def shape_mismatch(
        cls, category: str, ids: Iterable[str], path: str | None = None
    ) -> "CoverageError":
        id_list = sorted(ids)
        where = f" in {path}" if path else ""
        return cls(
            code=ErrorCode.COVERAGE_SHAPE_MISMATCH,
            message=f"Cannot merge '{category}'{where}: mismatched ids {', '.join(id_list)}",
            details={"category": category, "ids": id_list, "path": path},
        )

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "CoverageError":
        return cls(
            code=ErrorCode.COVERAGE_PARSE_ERROR,
            message=f"Failed to read coverage data at {path}: {reason}",
            details={"path": path, "reason": reason},
        )
