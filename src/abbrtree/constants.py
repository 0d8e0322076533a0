#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for abbrtree library.

This module centralizes the tokens, patterns and lookup tables used by the
abbreviation tree transforms.

Constants are organized by category:
1. Content Insertion Tokens - Placeholder, caret and escape markers
2. Link Detection - URL, email and scheme patterns for link-shaped nodes
3. Implicit Tag Names - Parent-to-child tag mapping and inline elements
4. BEM Class Names - Separators and short-notation patterns
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# =============================================================================
# Content Insertion Tokens
# =============================================================================

# Marks where repeated content goes inside a template node or its attributes
DEFAULT_PLACEHOLDER = "$#"

# Marks the preferred cursor position when no placeholder is present
DEFAULT_CARET = "|"

# A token preceded by this marker is literal text
DEFAULT_ESCAPE = "\\"

# Joins content items when no implicitly repeated node exists
DEFAULT_CONTENT_SEPARATOR = "\n"

# =============================================================================
# Link Detection
# =============================================================================

DEFAULT_URL_SCHEME = "http://"
DEFAULT_MAILTO_PREFIX = "mailto:"

# Optional scheme, domain, 2-6 letter TLD, optional path (use with fullmatch)
URL_PATTERN = re.compile(r"((?:https?|ftp|file)://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?")

# local@domain.tld (use with fullmatch)
EMAIL_PATTERN = re.compile(r"([a-z0-9_.-]+)@([\da-z.-]+)\.([a-z.]{2,6})")

# Content already carrying `scheme://` or a protocol-relative `//`
SCHEME_PATTERN = re.compile(r"^([a-z]+:)?//", re.IGNORECASE)

LINK_ELEMENT_NAME = "a"
LINK_ATTRIBUTE_NAME = "href"

# =============================================================================
# Implicit Tag Names
# =============================================================================

DEFAULT_IMPLICIT_NAME = "div"
DEFAULT_INLINE_IMPLICIT_NAME = "span"

IMPLICIT_ELEMENT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "p": "span",
        "ul": "li",
        "ol": "li",
        "table": "tr",
        "tr": "td",
        "tbody": "tr",
        "thead": "tr",
        "tfoot": "tr",
        "colgroup": "col",
        "select": "option",
        "optgroup": "option",
        "audio": "source",
        "video": "source",
        "object": "param",
        "map": "area",
    }
)

INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "applet",
        "b",
        "basefont",
        "bdo",
        "big",
        "br",
        "button",
        "cite",
        "code",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "iframe",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "map",
        "object",
        "q",
        "s",
        "samp",
        "select",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "textarea",
        "tt",
        "u",
        "var",
    }
)

# =============================================================================
# BEM Class Names
# =============================================================================

CLASS_ATTRIBUTE_NAME = "class"

DEFAULT_BEM_ELEMENT_SEPARATOR = "__"
DEFAULT_BEM_MODIFIER_SEPARATOR = "_"

# Short notation: ``-elem`` / ``--elem`` (one dash per ancestor level) and ``_mod``
BEM_ELEMENT_PATTERN = re.compile(r"^(-+)([a-z0-9]+[a-z0-9-]*)", re.IGNORECASE)
BEM_MODIFIER_PATTERN = re.compile(r"^(_+)([a-z0-9]+[a-z0-9-]*)", re.IGNORECASE)

# Block name candidates, in order of preference
BEM_PREFIXED_BLOCK_PATTERN = re.compile(r"^[a-z]-", re.IGNORECASE)
BEM_BLOCK_PATTERN = re.compile(r"^[a-z]", re.IGNORECASE)
