"""Wildcard matching with lazy backtracking over ``*``.

Supports ``*`` (zero or more characters) and ``?`` (exactly one character
other than ``.``). Matching is always against the whole subject. There are
no character classes and no escapes; a subject's own ``*`` and ``?`` are
ordinary characters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from wildglob.comparator import STAR, comparator_for
from wildglob.sequence import CharSequence, ensure_compatible, normalize

__all__ = ["match", "match_code_units"]

logger = logging.getLogger(__name__)


def match_code_units(
    pattern: Sequence[int],
    subject: Sequence[int],
    comparator: Callable[[int, int], bool],
) -> bool:
    """Match normalized code unit sequences (Algorithm: lazy star backtracking).

    The scan consumes literal and ``?`` characters in lock-step until the
    comparator rejects a pair, either side runs out, or the pattern reaches
    a ``*``. Each ``*`` opens a choice point that first consumes nothing
    and, when the rest of the pattern fails, absorbs one more subject
    character and retries. Choice points live on an explicit stack rather
    than the call stack, innermost star on top, so the number of stars in a
    pattern is not limited by the interpreter's recursion limit.

    Backtracking is exponential in the number of separate ambiguous stars
    for adversarial inputs; callers needing a bound should limit input
    length.

    Args:
        pattern: Pattern code units; ``*`` and ``?`` are special.
        subject: Subject code units.
        comparator: Decides whether a pattern unit accepts a subject unit.

    Returns:
        True if the whole subject is matched by the whole pattern.
    """
    pend = len(pattern)
    send = len(subject)
    # (index of the star in pattern, subject index the star has absorbed up to)
    choices: list[tuple[int, int]] = []
    pit = 0
    sit = 0

    while True:
        while (
            pit < pend
            and sit < send
            and pattern[pit] != STAR
            and comparator(pattern[pit], subject[sit])
        ):
            pit += 1
            sit += 1

        if pit == pend:
            if sit == send:
                return True
        elif pattern[pit] == STAR:
            # A run of stars matches exactly what one star does.
            while pit + 1 < pend and pattern[pit + 1] == STAR:
                pit += 1
            choices.append((pit, sit))
            pit += 1
            continue

        # Dead end: let the innermost star that can still grow absorb one
        # more character. A star at the subject's end has nothing left, so
        # its failure falls through to the star enclosing it.
        while choices:
            star, absorbed = choices.pop()
            if absorbed == send:
                continue
            choices.append((star, absorbed + 1))
            pit = star + 1
            sit = absorbed + 1
            break
        else:
            return False


def match(
    pattern: CharSequence,
    subject: CharSequence,
    case_sensitive: bool = False,
) -> bool:
    """Return True if ``subject`` matches ``pattern`` in its entirety.

    Args:
        pattern: Glob pattern; ``*`` matches any run of characters, ``?``
            any single character except ``.``.
        subject: The character sequence to test. Must use the same
            character kind as ``pattern`` (text with text, bytes with bytes).
        case_sensitive: When False, ASCII letters compare case-insensitively.

    Returns:
        True on a full match, False otherwise.

    Raises:
        PatternTypeError: If either argument is not a character sequence, or
            they use different character kinds.
    """
    pattern_units, pattern_kind = normalize(pattern)
    subject_units, subject_kind = normalize(subject)
    ensure_compatible(pattern_kind, subject_kind)

    result = match_code_units(pattern_units, subject_units, comparator_for(case_sensitive))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Glob match: pattern=%r subject=%r case_sensitive=%s result=%s",
            pattern,
            subject,
            case_sensitive,
            result,
        )
    return result
