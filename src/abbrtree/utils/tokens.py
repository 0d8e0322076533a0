#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/utils/tokens.py
"""Escape-aware token scanning for node values and attribute values.

Placeholder and caret tokens may be written literally by escaping them with a
backslash (``\\$#``, ``\\|``). The scanner reports both kinds of occurrences
so a single rebuild pass can substitute the real matches and strip the escape
marker from the escaped ones.

Functions
---------
find_unescaped_tokens : Locate token occurrences in a string
has_unescaped : Check whether any located occurrence is a real match
replace_ranges : Rebuild a string with matches substituted
unescape_tokens : Strip escape markers in front of tokens

Examples
--------
    >>> from abbrtree.utils.tokens import find_unescaped_tokens, replace_ranges
    >>> ranges = find_unescaped_tokens("item $# of \\\\$#", "$#")
    >>> replace_ranges("item $# of \\\\$#", ranges, "3")
    'item 3 of $#'

"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from abbrtree.constants import DEFAULT_ESCAPE


class TokenRange(NamedTuple):
    """Half-open ``[start, end)`` span of a token occurrence.

    For escaped occurrences the span covers the escape marker and the token.
    """

    start: int
    end: int
    escaped: bool = False


def find_unescaped_tokens(text: str, token: str, escape: str = DEFAULT_ESCAPE) -> list[TokenRange]:
    """Scan ``text`` left to right for occurrences of ``token``.

    An escape marker consumes the character that follows it, so ``\\\\$#``
    yields an unescaped match while ``\\$#`` yields an escaped one.

    Parameters
    ----------
    text : str
        String to scan
    token : str
        Token to look for
    escape : str, default = "\\\\"
        Single-character escape marker

    Returns
    -------
    list of TokenRange
        Ascending, non-overlapping ranges. Escaped occurrences have
        ``escaped=True``.

    Raises
    ------
    ValueError
        If ``token`` is empty or ``escape`` is not a single character

    """
    if not token:
        raise ValueError("Token must be a non-empty string")
    if len(escape) != 1:
        raise ValueError(f"Escape marker must be a single character, got {escape!r}")

    ranges: list[TokenRange] = []
    token_length = len(token)
    pos = 0
    length = len(text)

    while pos < length:
        if text[pos] == escape:
            if text.startswith(token, pos + 1):
                ranges.append(TokenRange(pos, pos + 1 + token_length, escaped=True))
                pos += 1 + token_length
            else:
                pos += 2
        elif text.startswith(token, pos):
            ranges.append(TokenRange(pos, pos + token_length))
            pos += token_length
        else:
            pos += 1

    return ranges


def has_unescaped(ranges: Sequence[TokenRange]) -> bool:
    """Return True if any range is a real (unescaped) match."""
    return any(not r.escaped for r in ranges)


def replace_ranges(text: str, ranges: Sequence[TokenRange], value: str, unescape: bool = True) -> str:
    """Rebuild ``text`` with every matched range replaced by ``value``.

    Escaped ranges are rewritten to the literal token, dropping the escape
    marker, unless ``unescape`` is False, in which case they are copied
    verbatim. Ranges must be ascending and disjoint, as returned by
    :func:`find_unescaped_tokens`.

    Parameters
    ----------
    text : str
        Original string
    ranges : sequence of TokenRange
        Ranges found in ``text``
    value : str
        Substitution for unescaped matches
    unescape : bool, default = True
        Strip the escape marker from escaped ranges

    Returns
    -------
    str
        Rebuilt string

    """
    parts: list[str] = []
    cursor = 0

    for r in ranges:
        parts.append(text[cursor : r.start])
        if not r.escaped:
            parts.append(value)
        elif unescape:
            parts.append(text[r.start + 1 : r.end])
        else:
            parts.append(text[r.start : r.end])
        cursor = r.end

    parts.append(text[cursor:])
    return "".join(parts)


def unescape_tokens(text: str, tokens: Sequence[str], escape: str = DEFAULT_ESCAPE) -> str:
    """Strip the escape marker in front of any of ``tokens``.

    Uses the same scanning rules as :func:`find_unescaped_tokens`: a marker
    followed by anything other than a token is kept along with the character
    it consumes.

    Examples
    --------
    >>> unescape_tokens("\\\\$# and \\\\|", ["$#", "|"])
    '$# and |'

    """
    if len(escape) != 1:
        raise ValueError(f"Escape marker must be a single character, got {escape!r}")

    parts: list[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]
        if char == escape:
            token = next((t for t in tokens if t and text.startswith(t, pos + 1)), None)
            if token is not None:
                parts.append(token)
                pos += 1 + len(token)
            else:
                parts.append(text[pos : pos + 2])
                pos += 2
        else:
            parts.append(char)
            pos += 1

    return "".join(parts)


__all__ = ["TokenRange", "find_unescaped_tokens", "has_unescaped", "replace_ranges", "unescape_tokens"]
