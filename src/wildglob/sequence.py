"""Normalization of string-like inputs into integer code unit sequences.

The matcher works on tuples of integer code units. Anything that reads as
an ordered sequence of characters is accepted: ``str``, bytes-like objects,
and iterables of one-character strings or of non-negative integers (for
example ``array.array("H")`` holding UTF-16 code units).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Union

from wildglob.errors import PatternTypeError

__all__ = [
    "TEXT",
    "CODE",
    "CharSequence",
    "normalize",
    "as_code_units",
    "char_kind",
    "ensure_compatible",
]

TEXT = "text"
CODE = "code"

CharSequence = Union[str, bytes, bytearray, memoryview, Iterable[Any]]

_BYTES = (bytes, bytearray)


def _is_code_unit(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool) and item >= 0


def normalize(seq: CharSequence) -> tuple[tuple[int, ...], str | None]:
    """Convert ``seq`` to code units and report its character kind.

    Returns:
        A ``(units, kind)`` pair. ``kind`` is :data:`TEXT` for string
        characters, :data:`CODE` for bytes and integer code units, and None
        for an empty generic iterable, which is compatible with either.
        A ``memoryview`` is read item by item, so its format must yield
        non-negative integers.

    Raises:
        PatternTypeError: If ``seq`` is not iterable or holds items that are
            neither one-character strings nor non-negative integers, or mixes
            the two.
    """
    if isinstance(seq, str):
        return tuple(map(ord, seq)), TEXT
    if isinstance(seq, _BYTES):
        return tuple(seq), CODE

    try:
        items = tuple(seq)
    except (TypeError, NotImplementedError) as e:
        raise PatternTypeError(
            f"Expected a character sequence, got {type(seq).__name__}", cause=e
        ) from e

    if not items:
        return (), CODE if isinstance(seq, memoryview) else None

    if all(isinstance(item, str) and len(item) == 1 for item in items):
        return tuple(map(ord, items)), TEXT
    if all(_is_code_unit(item) for item in items):
        return items, CODE

    raise PatternTypeError(
        f"Sequence of {type(seq).__name__} must hold only single characters "
        "or only non-negative integer code units",
        details={"sequence_type": type(seq).__name__},
    )


def as_code_units(seq: CharSequence) -> tuple[int, ...]:
    """Return ``seq`` as a tuple of integer code units."""
    return normalize(seq)[0]


def char_kind(seq: CharSequence) -> str | None:
    """Return the character kind of ``seq`` (see :func:`normalize`)."""
    return normalize(seq)[1]


def ensure_compatible(pattern_kind: str | None, subject_kind: str | None) -> None:
    """Raise PatternTypeError if pattern and subject use different character kinds."""
    if pattern_kind is None or subject_kind is None:
        return
    if pattern_kind != subject_kind:
        raise PatternTypeError(
            f"Cannot match a {subject_kind} subject against a {pattern_kind} pattern",
            details={"pattern_kind": pattern_kind, "subject_kind": subject_kind},
        )
