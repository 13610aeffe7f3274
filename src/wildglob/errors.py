"""Error hierarchy for the wildglob library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "GlobError",
    "ConfigNotFoundError",
    "ConfigError",
    "PatternTypeError",
    "ErrorCodes",
]


class GlobError(Exception):
    """Base error for all wildglob errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(GlobError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(GlobError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class PatternTypeError(GlobError):
    """Raised when a pattern or subject is not a usable character sequence.

    Covers items that are not single characters or code units, and a
    pattern and subject built from different character kinds (text
    against bytes).
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="PATTERN_TYPE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All wildglob error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    PATTERN_TYPE_ERROR = "PATTERN_TYPE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
