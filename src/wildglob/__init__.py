"""wildglob - Wildcard pattern matching with ``*`` and ``?``."""

from __future__ import annotations

# Core
from wildglob.matcher import match, match_code_units
from wildglob.pattern import GlobPattern, compile, purge

# Character policy
from wildglob.charclass import is_alpha, to_lower
from wildglob.comparator import (
    CASE_INSENSITIVE,
    CASE_SENSITIVE,
    WildcardComparator,
    comparator_for,
)

# Input adaptation
from wildglob.sequence import as_code_units

# Config
from wildglob.config import Config, MatcherSettings

# Errors
from wildglob.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GlobError,
    PatternTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "match",
    "match_code_units",
    "GlobPattern",
    "compile",
    "purge",
    # Character policy
    "is_alpha",
    "to_lower",
    "WildcardComparator",
    "CASE_SENSITIVE",
    "CASE_INSENSITIVE",
    "comparator_for",
    # Input adaptation
    "as_code_units",
    # Config
    "Config",
    "MatcherSettings",
    # Errors
    "ErrorCodes",
    "GlobError",
    "ConfigError",
    "ConfigNotFoundError",
    "PatternTypeError",
]
