#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for abbreviation tree serialization."""

import json
import logging

import pytest
from utils import el, implicit, root

from abbrtree.ast import RepeatState, dict_to_node, json_to_tree, node_to_dict, tree_to_json
from abbrtree.exceptions import TreeFormatError, ValidationError


@pytest.mark.unit
class TestNodeToDict:
    """Tests for node_to_dict."""

    def test_leaf(self):
        node = el("a", value="Home", attrs={"href": "/"})
        assert node_to_dict(node) == {
            "name": "a",
            "value": "Home",
            "attributes": [{"name": "href", "value": "/"}],
            "children": [],
            "repeat": None,
        }

    def test_repeat_state(self):
        node = el("li", repeat=RepeatState(count=2, implicit=True, value=1, index=0))
        assert node_to_dict(node)["repeat"] == {"count": 2, "implicit": True, "value": 1, "index": 0}

    def test_nesting(self):
        data = node_to_dict(root(el("ul", implicit("li"))))
        assert data["children"][0]["name"] == "ul"
        assert data["children"][0]["children"][0]["repeat"]["count"] is None


@pytest.mark.unit
class TestDictToNode:
    """Tests for dict_to_node."""

    def test_restores_structure_and_parents(self):
        tree = root(el("ul", implicit("li", el("a", attrs={"href": ""}))))
        restored = dict_to_node(node_to_dict(tree))
        assert restored == tree
        link = restored.children[0].children[0].children[0]
        assert link.parent is restored.children[0].children[0]

    def test_minimal_dict(self):
        """Test that optional keys default sensibly."""
        node = dict_to_node({"name": "br"})
        assert node.name == "br"
        assert node.value is None
        assert node.attributes == []
        assert node.children == []
        assert node.repeat is None

    def test_null_name_becomes_empty(self):
        assert dict_to_node({"name": None, "value": "text"}).name == ""

    def test_unknown_key_strict(self):
        with pytest.raises(TreeFormatError, match="Unknown keys: selfClosing"):
            dict_to_node({"name": "br", "selfClosing": True})

    def test_unknown_key_lenient(self, caplog):
        with caplog.at_level(logging.WARNING, logger="abbrtree.ast.serialization"):
            node = dict_to_node({"name": "br", "selfClosing": True}, strict_mode=False)
        assert node.name == "br"
        assert "selfClosing" in caplog.text

    def test_error_reports_path(self):
        data = {"name": "ul", "children": [{"name": "li"}, {"name": 5}]}
        with pytest.raises(TreeFormatError) as exc_info:
            dict_to_node(data)
        assert exc_info.value.path == "root.children[1]"
        assert isinstance(exc_info.value, ValidationError)

    @pytest.mark.parametrize(
        "data, message",
        [
            ("not a node", "Node must be an object"),
            ({"children": {}}, "'children' must be a list"),
            ({"attributes": "class"}, "'attributes' must be a list"),
            ({"attributes": [{"value": "x"}]}, "Attribute 'name'"),
            ({"attributes": ["class"]}, "Attribute must be an object"),
            ({"repeat": 3}, "'repeat' must be an object"),
            ({"repeat": {"count": "3"}}, "'count' must be an integer"),
            ({"repeat": {"index": True}}, "'index' must be an integer"),
            ({"repeat": {"implicit": "false"}}, "'implicit' must be a boolean"),
            ({"repeat": {"implicit": 1}}, "'implicit' must be a boolean"),
            ({"value": 1}, "'value' must be a string"),
        ],
    )
    def test_malformed(self, data, message):
        with pytest.raises(TreeFormatError, match=message):
            dict_to_node(data)


@pytest.mark.unit
class TestJson:
    """Tests for JSON helpers."""

    def test_schema_version_written(self):
        data = json.loads(tree_to_json(root(el("p"))))
        assert data["schema_version"] == 1

    def test_unicode_preserved(self):
        assert "café" in tree_to_json(el("p", value="café"))

    def test_json_restores_tree(self):
        tree = root(el("ul", implicit("li", value="$#", attrs={"title": "\\$#"})))
        assert json_to_tree(tree_to_json(tree, indent=2)) == tree

    def test_missing_schema_version_accepted(self):
        assert json_to_tree('{"name": "p"}').name == "p"

    def test_unsupported_schema_version(self):
        with pytest.raises(TreeFormatError, match="Unsupported schema version"):
            json_to_tree('{"schema_version": 2, "name": "p"}')

    def test_invalid_json(self):
        with pytest.raises(TreeFormatError, match="Invalid JSON") as exc_info:
            json_to_tree("{not json")
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_non_object_json(self):
        with pytest.raises(TreeFormatError, match="must be an object"):
            json_to_tree("[]")
