#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/ast/serialization.py
"""JSON serialization and deserialization for abbreviation trees.

Abbreviation trees travel between three components: the external parser that
builds them, the transforms in this package, and the external serializer that
turns them into markup. This module provides a plain dictionary / JSON
interchange format for that handover.

The dictionary shape of a node is::

    {
        "name": "li",
        "value": null,
        "attributes": [{"name": "class", "value": "item"}],
        "children": [...],
        "repeat": {"count": null, "implicit": false, "value": null, "index": null}
    }

``repeat`` is ``null`` for nodes that are not repeated. Parent links are
implied by nesting.

Examples
--------
    >>> from abbrtree.ast import AbbreviationNode, RepeatState
    >>> from abbrtree.ast.serialization import json_to_tree, tree_to_json
    >>> tree = AbbreviationNode(children=[AbbreviationNode(name="li", repeat=RepeatState())])
    >>> restored = json_to_tree(tree_to_json(tree))
    >>> restored == tree
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any

from abbrtree.ast.nodes import AbbreviationNode, Attribute, RepeatState
from abbrtree.exceptions import TreeFormatError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

_NODE_KEYS = frozenset({"name", "value", "attributes", "children", "repeat"})
_REPEAT_KEYS = frozenset({"count", "implicit", "value", "index"})
_ATTRIBUTE_KEYS = frozenset({"name", "value"})


def _serialize_repeat(repeat: RepeatState | None) -> dict[str, Any] | None:
    if repeat is None:
        return None
    return {
        "count": repeat.count,
        "implicit": repeat.implicit,
        "value": repeat.value,
        "index": repeat.index,
    }


def node_to_dict(node: AbbreviationNode) -> dict[str, Any]:
    """Convert a node and its subtree to a dictionary.

    Parameters
    ----------
    node : AbbreviationNode
        Root of the subtree to convert

    Returns
    -------
    dict
        Dictionary representation of the subtree

    """
    return {
        "name": node.name,
        "value": node.value,
        "attributes": [{"name": attr.name, "value": attr.value} for attr in node.attributes],
        "children": [node_to_dict(child) for child in node.children],
        "repeat": _serialize_repeat(node.repeat),
    }


def _check_keys(data: dict[str, Any], allowed: frozenset[str], path: str, strict_mode: bool) -> None:
    unknown = set(data) - allowed
    if not unknown:
        return
    if strict_mode:
        raise TreeFormatError(f"Unknown keys: {', '.join(sorted(unknown))}", path=path)
    logger.warning(f"Ignoring unknown keys at {path}: {', '.join(sorted(unknown))}")


def _optional_int(data: dict[str, Any], key: str, path: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TreeFormatError(f"'{key}' must be an integer or null, got {type(value).__name__}", path=path)
    return value


def _optional_str(data: dict[str, Any], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TreeFormatError(f"'{key}' must be a string or null, got {type(value).__name__}", path=path)
    return value


def _bool(data: dict[str, Any], key: str, path: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise TreeFormatError(f"'{key}' must be a boolean, got {type(value).__name__}", path=path)
    return value


def _deserialize_repeat(data: Any, path: str, strict_mode: bool) -> RepeatState | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TreeFormatError(f"'repeat' must be an object or null, got {type(data).__name__}", path=path)

    _check_keys(data, _REPEAT_KEYS, path, strict_mode)
    return RepeatState(
        count=_optional_int(data, "count", path),
        implicit=_bool(data, "implicit", path),
        value=_optional_int(data, "value", path),
        index=_optional_int(data, "index", path),
    )


def _deserialize_attributes(data: Any, path: str, strict_mode: bool) -> list[Attribute]:
    if not isinstance(data, list):
        raise TreeFormatError(f"'attributes' must be a list, got {type(data).__name__}", path=path)

    attributes = []
    for position, attr_data in enumerate(data):
        attr_path = f"{path}.attributes[{position}]"
        if not isinstance(attr_data, dict):
            raise TreeFormatError("Attribute must be an object", path=attr_path)
        _check_keys(attr_data, _ATTRIBUTE_KEYS, attr_path, strict_mode)

        name = attr_data.get("name")
        if not isinstance(name, str) or not name:
            raise TreeFormatError("Attribute 'name' must be a non-empty string", path=attr_path)
        attributes.append(Attribute(name=name, value=_optional_str(attr_data, "value", attr_path)))
    return attributes


def _deserialize_node(data: Any, path: str, strict_mode: bool) -> AbbreviationNode:
    if not isinstance(data, dict):
        raise TreeFormatError(f"Node must be an object, got {type(data).__name__}", path=path)

    _check_keys(data, _NODE_KEYS, path, strict_mode)

    children_data = data.get("children", [])
    if not isinstance(children_data, list):
        raise TreeFormatError(f"'children' must be a list, got {type(children_data).__name__}", path=path)

    return AbbreviationNode(
        name=_optional_str(data, "name", path) or "",
        value=_optional_str(data, "value", path),
        attributes=_deserialize_attributes(data.get("attributes", []), path, strict_mode),
        children=[
            _deserialize_node(child, f"{path}.children[{position}]", strict_mode)
            for position, child in enumerate(children_data)
        ],
        repeat=_deserialize_repeat(data.get("repeat"), path, strict_mode),
    )


def dict_to_node(data: dict[str, Any], strict_mode: bool = True) -> AbbreviationNode:
    """Convert a dictionary representation back to a tree.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node, as produced by :func:`node_to_dict`
    strict_mode : bool, default True
        If True, raise on unknown keys. If False, log a warning and ignore
        them (useful for parsers that attach extra data).

    Returns
    -------
    AbbreviationNode
        Reconstructed subtree with parent links set

    Raises
    ------
    TreeFormatError
        If the data is structurally invalid, or has unknown keys in strict mode

    """
    return _deserialize_node(data, "root", strict_mode)


def tree_to_json(node: AbbreviationNode, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string with a schema version.

    Parameters
    ----------
    node : AbbreviationNode
        Tree root
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON document of the form ``{"schema_version": 1, "name": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **node_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_tree(json_str: str, strict_mode: bool = True) -> AbbreviationNode:
    """Deserialize a JSON string produced by :func:`tree_to_json`.

    Parameters
    ----------
    json_str : str
        JSON document
    strict_mode : bool, default True
        Passed to :func:`dict_to_node`

    Returns
    -------
    AbbreviationNode
        Reconstructed tree

    Raises
    ------
    TreeFormatError
        If the JSON is malformed, the schema version is unsupported, or the
        tree structure is invalid

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON: {e.msg}", original_error=e) from e

    if not isinstance(data, dict):
        raise TreeFormatError(f"Tree JSON must be an object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise TreeFormatError(
            f"Unsupported schema version: {schema_version}. Supported version is {SCHEMA_VERSION}."
        )

    return dict_to_node(data, strict_mode=strict_mode)


__all__ = [
    "node_to_dict",
    "dict_to_node",
    "tree_to_json",
    "json_to_tree",
]
