"""ASCII case folding and alphabetic tests for single characters.

Both helpers assume an encoding where upper and lower case letters occupy
two contiguous, parallel ranges that differ by a single bit (ASCII and its
supersets such as Latin-1 and Unicode code points). Encodings without a
contiguous alphabet (EBCDIC) are not supported and are not detected.
"""

from __future__ import annotations

from typing import overload

__all__ = ["LOWERCASE_BIT", "to_lower", "is_alpha"]

LOWERCASE_BIT = ord("a") - ord("A")  # 0x20

_LOWER_A = ord("a")
_LOWER_Z = ord("z")


@overload
def to_lower(c: int) -> int: ...


@overload
def to_lower(c: str) -> str: ...


def to_lower(c: int | str) -> int | str:
    """Return the lowercase form of an ASCII letter by setting the case bit.

    For anything that is not an ASCII letter the result is meaningless;
    gate calls with :func:`is_alpha`.

    Args:
        c: An integer code unit or a one-character string.

    Returns:
        The folded value, of the same kind as ``c``.
    """
    if isinstance(c, str):
        return chr(ord(c) | LOWERCASE_BIT)
    return c | LOWERCASE_BIT


def is_alpha(c: int | str) -> bool:
    """Return True if ``c`` is an ASCII letter, in either case."""
    code = ord(c) if isinstance(c, str) else c
    folded = code | LOWERCASE_BIT
    return _LOWER_A <= folded <= _LOWER_Z
