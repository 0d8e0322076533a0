#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/repeater.py
"""Implicit repeat expansion and repeated content insertion.

An abbreviation such as ``ul>li*`` marks ``li`` for implicit repetition: the
number of copies is unknown until external content (for example the lines of
a text selection) is supplied. Insertion happens in two steps that can be
used separately:

1. :func:`prepare` clones every unresolved repeated node once per content
   item and numbers the clones.
2. :func:`insert` writes each content item into its clone, either in place
   of ``$#`` placeholders, at a ``|`` caret, or into the deepest descendant.
   Link-shaped nodes receiving a URL or email also get an ``href``.

When the tree has no implicitly repeated node, all content items are joined
with newlines and written once into the deepest node of the tree.

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode, RepeatState
    >>> item = AbbreviationNode(name="li", repeat=RepeatState())
    >>> tree = AbbreviationNode(children=[AbbreviationNode(name="ul", children=[item])])
    >>> _ = insert_repeated_content(tree, ["one", "two"])
    >>> [li.value for li in tree.children[0].children]
    ['one', 'two']

"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from abbrtree.ast.nodes import AbbreviationNode, RepeatState
from abbrtree.ast.utils import collect_implicit_repeats, find_deepest_node, find_first_unresolved_repeat
from abbrtree.constants import (
    EMAIL_PATTERN,
    LINK_ATTRIBUTE_NAME,
    LINK_ELEMENT_NAME,
    SCHEME_PATTERN,
    URL_PATTERN,
)
from abbrtree.transforms.base import TreeTransform
from abbrtree.transforms.options import RepeaterOptions
from abbrtree.utils.tokens import find_unescaped_tokens, has_unescaped, replace_ranges, unescape_tokens

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = RepeaterOptions()


def normalize_content(content: Any) -> list[str]:
    """Normalize the content argument to a list of strings.

    ``None`` and the empty string mean "no content". A single string or any
    other non-iterable value becomes a one-element list. Items of a list or
    tuple are converted with ``str()``.

    Parameters
    ----------
    content : Any
        String, sequence of strings, or a single value

    Returns
    -------
    list of str
        Content items (possibly empty)

    """
    if content is None:
        return []
    if isinstance(content, str):
        return [content] if content else []
    if isinstance(content, (list, tuple)):
        return [item if isinstance(item, str) else str(item) for item in content]
    return [str(content)]


def prepare(tree: AbbreviationNode, amount: Optional[int] = 1) -> AbbreviationNode:
    """Replace every unresolved repeated node with ``amount`` numbered clones.

    Nodes are processed in document order. Each clone is a deep copy with
    ``RepeatState(count=amount, implicit=True, value=i + 1, index=i)`` and is
    inserted before the original, which is then removed. Unresolved repeats
    nested inside a clone are resolved the same way with the same
    ``amount``. Nodes with an explicit count are left untouched.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree root (mutated in place)
    amount : int or None, default = 1
        Number of copies; values below 1 are treated as 1

    Returns
    -------
    AbbreviationNode
        The same tree

    """
    if not amount or amount < 1:
        amount = 1

    if tree.repeat is not None and tree.repeat.is_unresolved:
        logger.warning("Tree root carries an unresolved repeat and cannot be expanded; leaving it untouched")

    expanded = 0
    node = find_first_unresolved_repeat(tree)
    while node is not None:
        parent = node.parent
        assert parent is not None

        for i in range(amount):
            clone = node.clone(deep=True)
            clone.repeat = RepeatState(count=amount, implicit=True, value=i + 1, index=i)
            parent.insert_before(clone, node)

        node.remove()
        expanded += 1
        node = find_first_unresolved_repeat(tree)

    if expanded:
        logger.debug(f"Expanded {expanded} implicit repeat(s) into {amount} cop{'y' if amount == 1 else 'ies'} each")

    return tree


def insert(
    tree: AbbreviationNode, content: Sequence[str] | str | None, options: RepeaterOptions | None = None
) -> AbbreviationNode:
    """Insert content items into implicitly repeated nodes.

    Each node with ``repeat.implicit`` receives ``content[node.repeat.index]``
    via :func:`insert_content`. If the tree holds no such node, the content
    items are joined with ``options.separator`` and written into the deepest
    node of the tree. Empty content is a no-op.

    Escape markers stay in place while the targets are processed, since
    nested repeats visit the same nodes more than once. They are stripped
    from the whole tree in one pass at the end.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree root, usually processed by :func:`prepare` (mutated in place)
    content : sequence of str, str or None
        Content items; see :func:`normalize_content`
    options : RepeaterOptions, optional
        Tokens and link settings

    Returns
    -------
    AbbreviationNode
        The same tree

    """
    options = options or _DEFAULT_OPTIONS
    items = normalize_content(content)
    if not items:
        return tree

    targets = collect_implicit_repeats(tree)
    if not targets:
        logger.debug("No implicitly repeated nodes found, inserting joined content into deepest node")
        _set_node_content(find_deepest_node(tree), options.separator.join(items), options, unescape=False)

    for node in targets:
        index = node.repeat.index if node.repeat is not None else None
        if index is None or not 0 <= index < len(items):
            logger.debug(f"Skipping repeated node {node.name!r}: index {index} outside of {len(items)} content item(s)")
            continue
        _insert_content(node, items[index], options, unescape=False)

    _unescape_tree(tree, options)
    return tree


def insert_content(
    node: AbbreviationNode, content: str, options: RepeaterOptions | None = None
) -> AbbreviationNode:
    """Insert ``content`` into ``node`` and its subtree.

    Every unescaped placeholder in the value or attribute values of ``node``
    and its descendants is replaced, and escaped placeholders lose their
    escape marker. If no placeholder exists anywhere in the subtree, the
    content goes to the deepest descendant through :func:`set_node_content`.

    Parameters
    ----------
    node : AbbreviationNode
        Subtree root
    content : str
        Content item
    options : RepeaterOptions, optional
        Tokens and link settings

    Returns
    -------
    AbbreviationNode
        The same node

    """
    return _insert_content(node, content, options or _DEFAULT_OPTIONS, unescape=True)


def _insert_content(
    node: AbbreviationNode, content: str, options: RepeaterOptions, unescape: bool
) -> AbbreviationNode:
    inserted = False
    for target in list(node.walk()):
        if _insert_into_placeholders(target, content, options, unescape):
            inserted = True

    if not inserted:
        _set_node_content(find_deepest_node(node), content, options, unescape)

    return node


def _replace_placeholder(text: str, content: str, options: RepeaterOptions, unescape: bool) -> tuple[str, bool]:
    ranges = find_unescaped_tokens(text, options.placeholder, options.escape)
    if has_unescaped(ranges):
        return replace_ranges(text, ranges, content, unescape=unescape), True
    if ranges and unescape:
        return replace_ranges(text, ranges, content), False
    return text, False


def _insert_into_placeholders(
    node: AbbreviationNode, content: str, options: RepeaterOptions, unescape: bool
) -> bool:
    replaced = False

    if node.value:
        node.value, found = _replace_placeholder(node.value, content, options, unescape)
        replaced = replaced or found

    for attr in list(node.attributes):
        if attr.value:
            new_value, found = _replace_placeholder(attr.value, content, options, unescape)
            if new_value != attr.value:
                node.set_attribute(attr.name, new_value)
            replaced = replaced or found

    return replaced


def _unescape_tree(tree: AbbreviationNode, options: RepeaterOptions) -> None:
    tokens = (options.placeholder, options.caret)
    for node in tree.walk():
        if node.value:
            node.value = unescape_tokens(node.value, tokens, options.escape)
        for attr in list(node.attributes):
            if attr.value:
                new_value = unescape_tokens(attr.value, tokens, options.escape)
                if new_value != attr.value:
                    node.set_attribute(attr.name, new_value)


def is_link_node(node: AbbreviationNode) -> bool:
    """Whether ``node`` is an ``a`` element or already declares an ``href``."""
    return node.name.lower() == LINK_ELEMENT_NAME or node.has_attribute(LINK_ATTRIBUTE_NAME)


def set_node_content(
    node: AbbreviationNode, content: str, options: RepeaterOptions | None = None
) -> AbbreviationNode:
    """Write ``content`` as the text of a single node.

    If the node value holds unescaped caret tokens, every caret is replaced
    by the content and escaped carets lose their escape marker. Otherwise
    link-shaped nodes get an ``href`` derived from URL (``http://`` added
    unless a scheme is present) or email (``mailto:``) content, and the node
    value is overwritten with the content.

    Parameters
    ----------
    node : AbbreviationNode
        Target node
    content : str
        Text to write
    options : RepeaterOptions, optional
        Tokens and link settings

    Returns
    -------
    AbbreviationNode
        The same node

    """
    return _set_node_content(node, content, options or _DEFAULT_OPTIONS, unescape=True)


def _set_node_content(
    node: AbbreviationNode, content: str, options: RepeaterOptions, unescape: bool
) -> AbbreviationNode:
    if node.value:
        ranges = find_unescaped_tokens(node.value, options.caret, options.escape)
        if has_unescaped(ranges):
            node.value = replace_ranges(node.value, ranges, content, unescape=unescape)
            return node

    if options.detect_links and is_link_node(node):
        if URL_PATTERN.fullmatch(content):
            prefix = "" if SCHEME_PATTERN.match(content) else options.default_url_scheme
            node.set_attribute(LINK_ATTRIBUTE_NAME, prefix + content)
        elif EMAIL_PATTERN.fullmatch(content):
            node.set_attribute(LINK_ATTRIBUTE_NAME, options.mailto_prefix + content)

    node.value = content
    return node


def insert_repeated_content(
    tree: AbbreviationNode, content: Sequence[str] | str | None, options: RepeaterOptions | None = None
) -> AbbreviationNode:
    """Expand implicit repeats for ``content`` and insert the items.

    Runs :func:`prepare` with the number of content items, then
    :func:`insert`. Empty content leaves the tree untouched.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree root (mutated in place)
    content : sequence of str, str or None
        Content items; a single string is one item
    options : RepeaterOptions, optional
        Tokens and link settings

    Returns
    -------
    AbbreviationNode
        The same tree

    """
    items = normalize_content(content)
    if items:
        prepare(tree, len(items))
        insert(tree, items, options)
    return tree


class RepeatedContentTransform(TreeTransform):
    """Transform wrapper around :func:`insert_repeated_content`.

    Parameters
    ----------
    content : sequence of str or str
        Content items to distribute
    options : RepeaterOptions, optional
        Tokens and link settings

    Examples
    --------
    >>> transform = RepeatedContentTransform(["Home", "About"])
    >>> tree = transform.transform(tree)

    """

    def __init__(self, content: Sequence[str] | str | None, options: RepeaterOptions | None = None):
        """Initialize with the content to distribute."""
        self.content = normalize_content(content)
        self.options = options or _DEFAULT_OPTIONS

    def transform(self, tree: AbbreviationNode) -> AbbreviationNode:
        return insert_repeated_content(tree, self.content, self.options)


__all__ = [
    "normalize_content",
    "prepare",
    "insert",
    "insert_content",
    "set_node_content",
    "is_link_node",
    "insert_repeated_content",
    "RepeatedContentTransform",
]
