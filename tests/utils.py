"""Test utilities for abbrtree test suite.

This module provides compact builders for abbreviation trees so tests can
mirror the abbreviation they represent (``ul>li*`` and so on).
"""

from __future__ import annotations

from typing import Optional

from abbrtree.ast import AbbreviationNode, Attribute, RepeatState


def el(
    name: str = "",
    *children: AbbreviationNode,
    value: Optional[str] = None,
    attrs: Optional[dict[str, Optional[str]]] = None,
    repeat: Optional[RepeatState] = None,
) -> AbbreviationNode:
    """Build a node with the given children and attributes."""
    return AbbreviationNode(
        name=name,
        value=value,
        attributes=[Attribute(key, val) for key, val in (attrs or {}).items()],
        children=list(children),
        repeat=repeat,
    )


def implicit(name: str = "", *children: AbbreviationNode, **kwargs) -> AbbreviationNode:
    """Build a node marked for implicit repetition (``name*``)."""
    return el(name, *children, repeat=RepeatState(), **kwargs)


def root(*children: AbbreviationNode) -> AbbreviationNode:
    """Build the nameless tree root."""
    return el("", *children)


def attrs_of(node: AbbreviationNode) -> dict[str, Optional[str]]:
    """Return node attributes as a plain dict."""
    return {attr.name: attr.value for attr in node.attributes}


def names(nodes: list[AbbreviationNode]) -> list[str]:
    return [node.name for node in nodes]
