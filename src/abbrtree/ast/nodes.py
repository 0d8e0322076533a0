#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/ast/nodes.py
"""Node classes for abbreviation tree representation.

An abbreviation tree is the parsed form of an abbreviation such as
``ul>li.item*>a``: every element becomes an :class:`AbbreviationNode` with a
tag name, an optional text value, ordered attributes, ordered children and an
optional :class:`RepeatState`. Text-only nodes (``{text}``) are nodes without
a name and without attributes.

Unlike document ASTs that are rebuilt on every transform, abbreviation trees
are mutated in place: the repeat expander clones and removes nodes, the
content distributor rewrites values and attributes. Nodes therefore carry
structural mutation primitives and a parent back-reference.

Ownership
---------
A node owns its children. The parent link is a :mod:`weakref` and never keeps
a parent alive. Detached nodes (fresh clones, removed nodes) have no parent.

Examples
--------
Build ``ul>li*`` with an unresolved repeat on the item:

    >>> from abbrtree.ast.nodes import AbbreviationNode, RepeatState
    >>> item = AbbreviationNode(name="li", repeat=RepeatState())
    >>> root = AbbreviationNode(children=[AbbreviationNode(name="ul", children=[item])])
    >>> item.parent.name
    'ul'
    >>> item.repeat.is_unresolved
    True

"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass
class RepeatState:
    """Repeat directive attached to a node.

    Parameters
    ----------
    count : int or None, default = None
        Number of repetitions. ``None`` means the count is not known yet
        and depends on externally supplied content (implicit repeat).
    implicit : bool, default = False
        True once the count has been resolved from content length
    value : int or None, default = None
        1-based position of this copy within the repetition
    index : int or None, default = None
        0-based position of this copy within the repetition

    """

    count: Optional[int] = None
    implicit: bool = False
    value: Optional[int] = None
    index: Optional[int] = None

    @property
    def is_unresolved(self) -> bool:
        """Whether the repetition count still waits for content."""
        return self.count is None

    def copy(self) -> RepeatState:
        """Return an independent copy of this state."""
        return replace(self)


@dataclass
class Attribute:
    """A single ``name="value"`` pair on a node.

    ``value`` is ``None`` for boolean-style attributes declared without a
    value.
    """

    name: str
    value: Optional[str] = None


@dataclass
class AbbreviationNode:
    """One element (or text fragment) of an abbreviation tree.

    Parameters
    ----------
    name : str, default = ""
        Tag name, case preserved. Empty for the tree root, for text nodes
        and for elements whose name is inferred later.
    value : str or None, default = None
        Text content of the node
    attributes : list of Attribute, default = empty list
        Attributes in declaration order
    children : list of AbbreviationNode, default = empty list
        Child nodes in document order. Children passed here are adopted
        (their parent link is set to this node).
    repeat : RepeatState or None, default = None
        Repeat directive, if the node is repeated

    Notes
    -----
    Equality compares name, value, attributes, repeat state and children
    recursively; the parent link is not part of equality. Structural
    operations locate children by identity.

    """

    name: str = ""
    value: Optional[str] = None
    attributes: list[Attribute] = field(default_factory=list)
    children: list[AbbreviationNode] = field(default_factory=list)
    repeat: Optional[RepeatState] = None
    _parent: Optional[weakref.ref[AbbreviationNode]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child._parent = weakref.ref(self)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Optional[AbbreviationNode]:
        """Parent node, or None for the root and detached nodes."""
        return self._parent() if self._parent is not None else None

    @property
    def first_child(self) -> Optional[AbbreviationNode]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[AbbreviationNode]:
        return self.children[-1] if self.children else None

    @property
    def is_text_node(self) -> bool:
        """A nameless node without attributes only carries text."""
        return not self.name and not self.attributes

    def walk(self) -> Iterator[AbbreviationNode]:
        """Traverse the subtree depth-first, yielding self then descendants.

        Children are read from a snapshot of each child list, but callers that
        restructure the tree should still materialize the walk first.
        """
        yield self
        for child in list(self.children):
            yield from child.walk()

    def _child_position(self, child: AbbreviationNode) -> int:
        for position, candidate in enumerate(self.children):
            if candidate is child:
                return position
        raise ValueError(f"Node {child.name or '<text>'!r} is not a child of {self.name or '<root>'!r}")

    # ------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------

    def append_child(self, node: AbbreviationNode) -> AbbreviationNode:
        """Append ``node`` as the last child, detaching it from any previous parent."""
        node.remove()
        self.children.append(node)
        node._parent = weakref.ref(self)
        return node

    def insert_before(self, node: AbbreviationNode, reference: Optional[AbbreviationNode]) -> AbbreviationNode:
        """Insert ``node`` immediately before the child ``reference``.

        Parameters
        ----------
        node : AbbreviationNode
            Node to insert; detached from its previous parent first
        reference : AbbreviationNode or None
            Existing child of this node. ``None`` appends.

        Returns
        -------
        AbbreviationNode
            The inserted node

        Raises
        ------
        ValueError
            If ``reference`` is not a child of this node

        """
        if reference is None:
            return self.append_child(node)

        node.remove()
        position = self._child_position(reference)
        self.children.insert(position, node)
        node._parent = weakref.ref(self)
        return node

    def remove_child(self, node: AbbreviationNode) -> AbbreviationNode:
        """Detach the child ``node`` from this node."""
        del self.children[self._child_position(node)]
        node._parent = None
        return node

    def remove(self) -> AbbreviationNode:
        """Detach this node from its parent, if it has one."""
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)
        self._parent = None
        return self

    def clone(self, deep: bool = False) -> AbbreviationNode:
        """Copy this node.

        The copy shares no mutable state with the original: attributes and
        repeat state are copied, and with ``deep=True`` every descendant is
        cloned as well. The copy is detached.

        Parameters
        ----------
        deep : bool, default = False
            Also clone all descendants

        Returns
        -------
        AbbreviationNode
            Detached copy

        """
        copy = AbbreviationNode(
            name=self.name,
            value=self.value,
            attributes=[replace(attr) for attr in self.attributes],
            repeat=self.repeat.copy() if self.repeat is not None else None,
        )
        if deep:
            for child in self.children:
                copy.append_child(child.clone(deep=True))
        return copy

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def get_attribute(self, name: str) -> Optional[Attribute]:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    def set_attribute(self, name: str, value: Optional[str]) -> Attribute:
        """Set attribute ``name``, keeping its position if it already exists."""
        attr = self.get_attribute(name)
        if attr is None:
            attr = Attribute(name=name, value=value)
            self.attributes.append(attr)
        else:
            attr.value = value
        return attr

    def remove_attribute(self, name: str) -> Optional[Attribute]:
        attr = self.get_attribute(name)
        if attr is not None:
            self.attributes.remove(attr)
        return attr


__all__ = ["AbbreviationNode", "Attribute", "RepeatState"]
