#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/utils/__init__.py
"""Utility modules for abbrtree package."""

from abbrtree.utils.tokens import TokenRange, find_unescaped_tokens, has_unescaped, replace_ranges, unescape_tokens

__all__ = [
    "TokenRange",
    "find_unescaped_tokens",
    "has_unescaped",
    "replace_ranges",
    "unescape_tokens",
]
