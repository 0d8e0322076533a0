#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/__init__.py
"""Transforms that complete a parsed abbreviation tree before serialization.

- repeater: implicit repeat expansion and repeated content insertion
- implicit_tags: tag names for nameless elements
- bem: BEM class name expansion
- options: frozen configuration dataclasses
- base: the :class:`TreeTransform` interface

Examples
--------
Wrap each selected line in a list item:

    >>> from abbrtree.transforms import insert_repeated_content
    >>> insert_repeated_content(tree, ["Home", "About", "Contact"])

Run both transforms as instances:

    >>> from abbrtree.transforms import ImplicitTagsTransform, RepeatedContentTransform
    >>> for transform in (ImplicitTagsTransform(), RepeatedContentTransform(lines)):
    ...     tree = transform.transform(tree)

"""

from abbrtree.transforms.base import TreeTransform
from abbrtree.transforms.bem import BemTransform, expand_bem_classes
from abbrtree.transforms.implicit_tags import ImplicitTagsTransform, resolve_implicit_name, resolve_implicit_tags
from abbrtree.transforms.options import BemOptions, ImplicitTagOptions, RepeaterOptions
from abbrtree.transforms.repeater import (
    RepeatedContentTransform,
    insert,
    insert_content,
    insert_repeated_content,
    is_link_node,
    normalize_content,
    prepare,
    set_node_content,
)

__all__ = [
    # Base
    "TreeTransform",
    # Options
    "RepeaterOptions",
    "ImplicitTagOptions",
    "BemOptions",
    # Repeated content
    "prepare",
    "insert",
    "insert_content",
    "set_node_content",
    "is_link_node",
    "normalize_content",
    "insert_repeated_content",
    "RepeatedContentTransform",
    # Implicit tags
    "resolve_implicit_name",
    "resolve_implicit_tags",
    "ImplicitTagsTransform",
    # BEM
    "expand_bem_classes",
    "BemTransform",
]
