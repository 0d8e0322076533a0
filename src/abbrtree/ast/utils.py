#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/ast/utils.py
"""Utility functions for navigating abbreviation trees.

Functions
---------
find_deepest_node : Follow last-child links down to a leaf
find_first_unresolved_repeat : Locate the first implicit repeat awaiting a count
collect_implicit_repeats : Snapshot nodes whose repeat count came from content

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode
    >>> from abbrtree.ast.utils import find_deepest_node
    >>> leaf = AbbreviationNode(name="span")
    >>> tree = AbbreviationNode(name="div", children=[AbbreviationNode(name="p"), AbbreviationNode(children=[leaf])])
    >>> find_deepest_node(tree) is leaf
    True

"""

from __future__ import annotations

from typing import Optional

from abbrtree.ast.nodes import AbbreviationNode


def find_deepest_node(node: AbbreviationNode) -> AbbreviationNode:
    """Return the node reached by repeatedly following the last child.

    Parameters
    ----------
    node : AbbreviationNode
        Starting node

    Returns
    -------
    AbbreviationNode
        The first childless node on the last-child path (``node`` itself if
        it has no children)

    """
    while node.children:
        node = node.children[-1]
    return node


def find_first_unresolved_repeat(tree: AbbreviationNode) -> Optional[AbbreviationNode]:
    """Return the first node in document order with an unresolved repeat.

    Nodes without a parent are skipped since they cannot receive siblings.
    """
    for node in tree.walk():
        if node.repeat is not None and node.repeat.is_unresolved and node.parent is not None:
            return node
    return None


def collect_implicit_repeats(tree: AbbreviationNode) -> list[AbbreviationNode]:
    """Return all implicitly repeated nodes of ``tree`` in document order."""
    return [node for node in tree.walk() if node.repeat is not None and node.repeat.implicit]
