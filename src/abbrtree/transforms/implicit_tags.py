#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/implicit_tags.py
"""Implicit tag name resolution.

Abbreviations may omit the tag name of an element (``.item``, ``[title]``).
The missing name is inferred from the parent: list parents get ``li``,
tables get ``tr``, rows get ``td``, inline parents get ``span`` and
everything else gets ``div``. A nameless node without attributes is a text
node (``{text}``) and keeps no name.

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode, Attribute
    >>> item = AbbreviationNode(attributes=[Attribute("class", "item")])
    >>> tree = AbbreviationNode(children=[AbbreviationNode(name="ul", children=[item])])
    >>> _ = resolve_implicit_tags(tree)
    >>> item.name
    'li'

"""

from __future__ import annotations

import logging
from typing import Optional

from abbrtree.ast.nodes import AbbreviationNode
from abbrtree.transforms.base import TreeTransform
from abbrtree.transforms.options import ImplicitTagOptions

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = ImplicitTagOptions()


def resolve_implicit_name(parent_name: Optional[str], options: ImplicitTagOptions | None = None) -> str:
    """Return the tag name for a nameless child of ``parent_name``.

    Parameters
    ----------
    parent_name : str or None
        Tag name of the parent, compared case-insensitively
    options : ImplicitTagOptions, optional
        Mapping tables and fallback names

    Returns
    -------
    str
        Resolved tag name

    Examples
    --------
    >>> resolve_implicit_name("UL")
    'li'
    >>> resolve_implicit_name("em")
    'span'
    >>> resolve_implicit_name(None)
    'div'

    """
    options = options or _DEFAULT_OPTIONS
    parent_name = (parent_name or "").lower()

    mapped = options.element_map.get(parent_name)
    if mapped:
        return mapped
    if parent_name in options.inline_elements:
        return options.inline_name
    return options.default_name


def resolve_implicit_tags(tree: AbbreviationNode, options: ImplicitTagOptions | None = None) -> AbbreviationNode:
    """Name every nameless element node of ``tree`` from its parent.

    Nodes are visited top-down so that a parent named in this pass informs
    its own children (``table>.row>.cell`` becomes ``tr`` then ``td``). The
    root and text nodes are left unnamed.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree root (mutated in place)
    options : ImplicitTagOptions, optional
        Mapping tables and fallback names

    Returns
    -------
    AbbreviationNode
        The same tree

    """
    options = options or _DEFAULT_OPTIONS

    resolved = 0
    for node in tree.walk():
        parent = node.parent
        if node.name or not node.attributes or parent is None:
            continue
        node.name = resolve_implicit_name(parent.name, options)
        resolved += 1

    if resolved:
        logger.debug(f"Resolved {resolved} implicit tag name(s)")

    return tree


class ImplicitTagsTransform(TreeTransform):
    """Transform wrapper around :func:`resolve_implicit_tags`."""

    def __init__(self, options: ImplicitTagOptions | None = None):
        self.options = options or _DEFAULT_OPTIONS

    def transform(self, tree: AbbreviationNode) -> AbbreviationNode:
        return resolve_implicit_tags(tree, self.options)


__all__ = [
    "resolve_implicit_name",
    "resolve_implicit_tags",
    "ImplicitTagsTransform",
]
