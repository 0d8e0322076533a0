#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/ast/__init__.py
"""Abbreviation tree module.

The module consists of several components:

- nodes: node, attribute and repeat-state classes with mutation primitives
- utils: navigation helpers (deepest node, repeat lookups)
- serialization: dictionary and JSON interchange with parsers and serializers

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode, Attribute
    >>> link = AbbreviationNode(name="a", attributes=[Attribute("href", "")])
    >>> tree = AbbreviationNode(children=[link])
    >>> tree.last_child is link
    True

"""

from __future__ import annotations

from abbrtree.ast.nodes import AbbreviationNode, Attribute, RepeatState
from abbrtree.ast.serialization import dict_to_node, json_to_tree, node_to_dict, tree_to_json
from abbrtree.ast.utils import collect_implicit_repeats, find_deepest_node, find_first_unresolved_repeat

__all__ = [
    # Nodes
    "AbbreviationNode",
    "Attribute",
    "RepeatState",
    # Navigation
    "find_deepest_node",
    "find_first_unresolved_repeat",
    "collect_implicit_repeats",
    # Serialization
    "node_to_dict",
    "dict_to_node",
    "tree_to_json",
    "json_to_tree",
]
