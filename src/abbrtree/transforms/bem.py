#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/bem.py
"""BEM class name expansion.

Expands the short BEM notation in ``class`` attributes into full
block/element/modifier class names:

- ``div.b_m`` becomes ``class="b b_m"``: a modifier is split off its block
  and the block class is kept.
- ``div.b>div._m`` becomes ``class="b b_m"`` on the child: a bare modifier
  takes the block name of the nearest node that has one.
- ``div.b>div.-e`` becomes ``class="b__e"``: an element prefix takes the
  block name as well. Each extra dash moves the block lookup one ancestor
  up, so ``--e`` names an element of the grandparent's block.

Class names without BEM prefixes are kept unchanged.

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode, Attribute
    >>> child = AbbreviationNode(name="div", attributes=[Attribute("class", "-title")])
    >>> tree = AbbreviationNode(children=[
    ...     AbbreviationNode(name="div", attributes=[Attribute("class", "card")], children=[child])
    ... ])
    >>> _ = expand_bem_classes(tree)
    >>> child.get_attribute("class").value
    'card__title'

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from abbrtree.ast.nodes import AbbreviationNode
from abbrtree.constants import (
    BEM_BLOCK_PATTERN,
    BEM_ELEMENT_PATTERN,
    BEM_MODIFIER_PATTERN,
    BEM_PREFIXED_BLOCK_PATTERN,
    CLASS_ATTRIBUTE_NAME,
)
from abbrtree.transforms.base import TreeTransform
from abbrtree.transforms.options import BemOptions

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = BemOptions()

# Short-notation modifiers are always written with an underscore
_SHORT_MODIFIER = "_"


def _class_names(node: AbbreviationNode) -> list[str]:
    attr = node.get_attribute(CLASS_ATTRIBUTE_NAME)
    if attr is None or not attr.value:
        return []
    return attr.value.split()


def _set_class_names(node: AbbreviationNode, names: dict[str, None]) -> bool:
    classes = " ".join(name for name in names if name)
    attr = node.get_attribute(CLASS_ATTRIBUTE_NAME)
    if not classes or (attr is not None and attr.value == classes):
        return False
    node.set_attribute(CLASS_ATTRIBUTE_NAME, classes)
    return True


def _first_match(names: list[str], pattern: re.Pattern[str]) -> Optional[str]:
    return next((name for name in names if pattern.match(name)), None)


def _split_modifiers(node: AbbreviationNode) -> bool:
    """Split ``block_mod`` class names into ``block`` and ``_mod``."""
    names: dict[str, None] = {}
    for name in _class_names(node):
        position = name.find(_SHORT_MODIFIER)
        if position > 0 and not name.startswith("-"):
            names[name[:position]] = None
            names[name[position:]] = None
        else:
            names[name] = None
    return _set_class_names(node, names)


def _build_block_lookup(tree: AbbreviationNode) -> dict[int, Optional[str]]:
    """Map each node with classes to its block name.

    A node's own block-like class wins; otherwise it inherits the block of
    its parent, if the parent has classes.
    """
    lookup: dict[int, Optional[str]] = {}
    for node in tree.walk():
        names = _class_names(node)
        if not names:
            continue
        parent = node.parent
        lookup[id(node)] = (
            _first_match(names, BEM_PREFIXED_BLOCK_PATTERN)
            or _first_match(names, BEM_BLOCK_PATTERN)
            or (lookup.get(id(parent)) if parent is not None else None)
        )
    return lookup


def _block_name(node: AbbreviationNode, lookup: dict[int, Optional[str]], prefix: str) -> str:
    depth = len(prefix) if len(prefix) > 1 else 0
    # Never climb to the root: stop at its child when the prefix is too deep
    while depth and node.parent is not None and node.parent.parent is not None:
        node = node.parent
        depth -= 1
    return lookup.get(id(node)) or ""


def _expand_short_notation(
    node: AbbreviationNode, lookup: dict[int, Optional[str]], options: BemOptions
) -> bool:
    names: dict[str, None] = {}
    for original in _class_names(node):
        name = original
        prefix = ""

        match = BEM_ELEMENT_PATTERN.match(name)
        if match:
            prefix = _block_name(node, lookup, match.group(1)) + options.element + match.group(2)
            names[prefix] = None
            name = name[match.end() :]

        match = BEM_MODIFIER_PATTERN.match(name)
        if match:
            if not prefix:
                prefix = _block_name(node, lookup, match.group(1))
                names[prefix] = None
            names[f"{prefix}{options.modifier}{match.group(2)}"] = None
            name = name[match.end() :]

        if name == original:
            names[original] = None

    return _set_class_names(node, names)


def expand_bem_classes(tree: AbbreviationNode, options: BemOptions | None = None) -> AbbreviationNode:
    """Expand BEM short notation in every ``class`` attribute of ``tree``.

    Runs in two passes. The first splits ``block_mod`` names. The second
    resolves element and modifier prefixes against a block lookup built
    between the passes, so it sees each node's classes as written rather
    than the expanded result.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree root (mutated in place)
    options : BemOptions, optional
        Element and modifier separators

    Returns
    -------
    AbbreviationNode
        The same tree

    """
    options = options or _DEFAULT_OPTIONS

    for node in tree.walk():
        _split_modifiers(node)

    lookup = _build_block_lookup(tree)

    changed = 0
    for node in tree.walk():
        if _expand_short_notation(node, lookup, options):
            changed += 1

    if changed:
        logger.debug(f"Expanded BEM class names on {changed} node(s)")

    return tree


class BemTransform(TreeTransform):
    """Transform wrapper around :func:`expand_bem_classes`.

    Parameters
    ----------
    options : BemOptions, optional
        Element and modifier separators

    Examples
    --------
    >>> transform = BemTransform(BemOptions(element="-", modifier="--"))
    >>> tree = transform.transform(tree)

    """

    def __init__(self, options: BemOptions | None = None):
        self.options = options or _DEFAULT_OPTIONS

    def transform(self, tree: AbbreviationNode) -> AbbreviationNode:
        return expand_bem_classes(tree, self.options)


__all__ = ["expand_bem_classes", "BemTransform"]
