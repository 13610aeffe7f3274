"""Single-character comparison policy for wildcard matching."""

from __future__ import annotations

from dataclasses import dataclass

from wildglob.charclass import is_alpha, to_lower

__all__ = [
    "STAR",
    "QUESTION",
    "DOT",
    "WildcardComparator",
    "CASE_SENSITIVE",
    "CASE_INSENSITIVE",
    "comparator_for",
]

STAR = ord("*")
QUESTION = ord("?")
DOT = ord(".")


@dataclass(frozen=True)
class WildcardComparator:
    """Decides whether one pattern code unit accepts one subject code unit.

    ``?`` accepts any subject character except ``.``. Every other pattern
    character is a literal. In case-insensitive mode two literals also match
    when both are ASCII letters with the same lowercase form; characters that
    are not letters never fold, so ``@`` (0x40) and the backtick (0x60) stay
    distinct even though they differ only by the case bit.

    ``*`` is never handed to the comparator; the matcher deals with it.

    Attributes:
        case_sensitive: Whether literal letters must match exactly.
    """

    case_sensitive: bool

    def __call__(self, pattern: int, subject: int) -> bool:
        if pattern == QUESTION:
            return subject != DOT

        if self.case_sensitive:
            return pattern == subject

        return pattern == subject or (
            is_alpha(pattern)
            and is_alpha(subject)
            and to_lower(pattern) == to_lower(subject)
        )


CASE_SENSITIVE = WildcardComparator(case_sensitive=True)
CASE_INSENSITIVE = WildcardComparator(case_sensitive=False)


def comparator_for(case_sensitive: bool) -> WildcardComparator:
    """Return the shared comparator instance for a case mode."""
    return CASE_SENSITIVE if case_sensitive else CASE_INSENSITIVE
