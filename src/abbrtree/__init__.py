"""abbrtree - Completion transforms for parsed markup abbreviations.

abbrtree sits between an abbreviation parser and a markup serializer. Given
the tree parsed from an abbreviation such as ``nav>ul>li*>a``, it fills in
what the abbreviation left open:

- Implicit repeats (``li*``) are expanded to one copy per content item and
  each copy receives its item, at a ``$#`` placeholder, at a ``|`` caret, or
  in its deepest descendant. Links receiving a URL or email get an ``href``.
- Nameless elements (``.item``) get a tag name inferred from their parent.
- Optionally, BEM short notation (``.b_m``, ``.-e``) is expanded into full
  block, element and modifier class names.

Examples
--------
Wrap selected lines in list items:

    >>> from abbrtree import AbbreviationNode, RepeatState, expand_tree
    >>> item = AbbreviationNode(name="li", repeat=RepeatState())
    >>> tree = AbbreviationNode(children=[AbbreviationNode(name="ul", children=[item])])
    >>> _ = expand_tree(tree, ["Home", "About"])
    >>> [li.value for li in tree.children[0].children]
    ['Home', 'About']

See Also
--------
abbrtree.transforms : the individual transforms and their options
abbrtree.ast : node classes and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from abbrtree.api import expand_tree
from abbrtree.ast import AbbreviationNode, Attribute, RepeatState, json_to_tree, tree_to_json
from abbrtree.exceptions import AbbrTreeError, TransformError, TreeFormatError, ValidationError
from abbrtree.transforms import (
    BemOptions,
    ImplicitTagOptions,
    RepeaterOptions,
    expand_bem_classes,
    insert,
    insert_repeated_content,
    prepare,
    resolve_implicit_tags,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Entry point
    "expand_tree",
    # Tree
    "AbbreviationNode",
    "Attribute",
    "RepeatState",
    "tree_to_json",
    "json_to_tree",
    # Transforms
    "prepare",
    "insert",
    "insert_repeated_content",
    "resolve_implicit_tags",
    "expand_bem_classes",
    "RepeaterOptions",
    "ImplicitTagOptions",
    "BemOptions",
    # Exceptions
    "AbbrTreeError",
    "ValidationError",
    "TreeFormatError",
    "TransformError",
]
