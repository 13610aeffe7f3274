"""Reusable pre-compiled glob patterns."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from wildglob.comparator import comparator_for
from wildglob.matcher import match_code_units
from wildglob.sequence import CharSequence, ensure_compatible, normalize

if TYPE_CHECKING:
    from wildglob.config import Config

__all__ = ["GlobPattern", "compile", "purge"]

logger = logging.getLogger(__name__)

_MAXCACHE = 256


class GlobPattern:
    """A glob pattern bound to a case mode, normalized once for many subjects.

    Two patterns are equal when they hold the same code units, the same
    character kind and the same case mode, so ``GlobPattern("a*")`` equals
    ``GlobPattern(["a", "*"])`` but not ``GlobPattern(b"a*")``.

    Thread safety:
        Immutable after construction; safe to share between threads.
    """

    __slots__ = ("_source", "_units", "_kind", "_case_sensitive", "_comparator")

    def __init__(self, pattern: CharSequence, case_sensitive: bool = False) -> None:
        """Normalize ``pattern`` for repeated matching.

        Args:
            pattern: Glob pattern as any supported character sequence.
            case_sensitive: When False, ASCII letters compare case-insensitively.

        Raises:
            PatternTypeError: If ``pattern`` is not a character sequence.
        """
        self._source = pattern
        self._units, self._kind = normalize(pattern)
        self._case_sensitive = bool(case_sensitive)
        self._comparator = comparator_for(self._case_sensitive)

    @classmethod
    def from_config(cls, pattern: CharSequence, config: Config) -> GlobPattern:
        """Build a pattern whose case mode comes from ``config``'s ``matcher`` section."""
        settings = config.matcher_settings()
        return cls(pattern, case_sensitive=settings.case_sensitive)

    @property
    def pattern(self) -> CharSequence:
        """The pattern as originally given."""
        return self._source

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def match(self, subject: CharSequence) -> bool:
        """Return True if ``subject`` matches this pattern in its entirety."""
        subject_units, subject_kind = normalize(subject)
        ensure_compatible(self._kind, subject_kind)
        return match_code_units(self._units, subject_units, self._comparator)

    def __call__(self, subject: CharSequence) -> bool:
        return self.match(subject)

    def filter(self, subjects: Iterable[CharSequence]) -> list[CharSequence]:
        """Return the subjects that match, in their original order."""
        return [subject for subject in subjects if self.match(subject)]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GlobPattern):
            return NotImplemented
        return (
            self._units == other._units
            and self._kind == other._kind
            and self._case_sensitive == other._case_sensitive
        )

    def __hash__(self) -> int:
        return hash((self._units, self._kind, self._case_sensitive))

    def __repr__(self) -> str:
        return f"GlobPattern({self._source!r}, case_sensitive={self._case_sensitive})"


@functools.lru_cache(maxsize=_MAXCACHE, typed=True)
def _compile(pattern: CharSequence, case_sensitive: bool) -> GlobPattern:
    logger.debug("Compiling glob pattern %r (case_sensitive=%s)", pattern, case_sensitive)
    return GlobPattern(pattern, case_sensitive=case_sensitive)


def compile(pattern: CharSequence, case_sensitive: bool = False) -> GlobPattern:
    """Return a cached :class:`GlobPattern` for ``pattern`` and the case mode.

    Unhashable patterns (lists, bytearrays, writable memoryviews) are
    compiled fresh on every call.
    """
    case_sensitive = bool(case_sensitive)
    try:
        hash(pattern)
    except (TypeError, ValueError):
        return GlobPattern(pattern, case_sensitive=case_sensitive)
    return _compile(pattern, case_sensitive)


def purge() -> None:
    """Clear the compiled pattern cache."""
    _compile.cache_clear()
    logger.debug("Glob pattern cache cleared")
