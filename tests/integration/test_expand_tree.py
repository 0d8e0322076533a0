#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the expand_tree entry point."""

import pytest
from utils import attrs_of, el, implicit, names, root

from abbrtree import (
    AbbrTreeError,
    BemOptions,
    RepeaterOptions,
    TransformError,
    expand_tree,
    json_to_tree,
    tree_to_json,
)
from abbrtree.ast import AbbreviationNode
from abbrtree.transforms import TreeTransform

# Test transforms


class UppercaseNamesTransform(TreeTransform):
    """Transform that uppercases all tag names."""

    def transform(self, tree):
        for node in tree.walk():
            node.name = node.name.upper()
        return tree


class ReplacingTransform(TreeTransform):
    """Transform that wrongly returns a new tree."""

    def transform(self, tree):
        return AbbreviationNode()


class FailingTransform(TreeTransform):
    """Transform that raises."""

    def transform(self, tree):
        raise RuntimeError("boom")


class LibraryErrorTransform(TreeTransform):
    """Transform that raises a library error."""

    def transform(self, tree):
        raise AbbrTreeError("already reported")


@pytest.mark.integration
class TestExpandTree:
    """Tests for the full completion pipeline."""

    def test_implicit_names_then_repeat(self):
        """Test ``ul>.item*`` with content: names resolved, items expanded."""
        tree = root(el("ul", implicit(attrs={"class": "item"})))
        result = expand_tree(tree, ["One", "Two"])

        assert result is tree
        items = tree.children[0].children
        assert names(items) == ["li", "li"]
        assert [item.value for item in items] == ["One", "Two"]
        assert [attrs_of(item) for item in items] == [{"class": "item"}, {"class": "item"}]

    def test_table_rows_with_placeholders(self):
        """Test ``table>.row*>.cell{$#}`` distributes one item per row."""
        tree = root(el("table", implicit("", el("", value="$#", attrs={"class": "cell"}), attrs={"class": "row"})))
        expand_tree(tree, ["a", "b", "c"])

        rows = tree.children[0].children
        assert names(rows) == ["tr", "tr", "tr"]
        assert [row.children[0].name for row in rows] == ["td", "td", "td"]
        assert [row.children[0].value for row in rows] == ["a", "b", "c"]

    def test_nav_links(self):
        """Test ``nav>ul>li*>a`` with link-like content."""
        tree = root(el("nav", el("ul", implicit("li", el("a")))))
        expand_tree(tree, ["example.com", "mail@example.org"])

        links = [li.children[0] for li in tree.children[0].children[0].children]
        assert [attrs_of(link) for link in links] == [
            {"href": "http://example.com"},
            {"href": "mailto:mail@example.org"},
        ]

    def test_without_content(self):
        """Test that only tag names change without content."""
        tree = root(el("ul", implicit(attrs={"class": "item"})))
        expand_tree(tree)
        item = tree.children[0].children[0]
        assert item.name == "li"
        assert item.repeat.is_unresolved

    def test_implicit_tags_disabled(self):
        tree = root(el(attrs={"class": "x"}))
        expand_tree(tree, implicit_tags=False)
        assert tree.children[0].name == ""

    def test_repeater_options(self):
        tree = root(implicit("li", value="* |"))
        expand_tree(tree, ["a", "b"], repeater_options=RepeaterOptions(caret="*"))
        assert [li.value for li in tree.children] == ["a |", "b |"]

    def test_extra_transforms_run_last(self):
        tree = root(el("ul", implicit(attrs={"class": "item"})))
        expand_tree(tree, ["x"], transforms=[UppercaseNamesTransform()])
        assert names(tree.children[0].children) == ["LI"]

    def test_failing_transform_wrapped(self):
        with pytest.raises(TransformError) as exc_info:
            expand_tree(root(), transforms=[FailingTransform()])
        assert exc_info.value.transform_name == "FailingTransform"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_library_errors_propagate_unwrapped(self):
        with pytest.raises(AbbrTreeError, match="already reported") as exc_info:
            expand_tree(root(), transforms=[LibraryErrorTransform()])
        assert not isinstance(exc_info.value, TransformError)

    def test_transform_must_return_same_tree(self):
        with pytest.raises(TransformError, match="must mutate and return"):
            expand_tree(root(), transforms=[ReplacingTransform()])

    def test_json_handover(self):
        """Test parser JSON in, serializer JSON out."""
        parsed = tree_to_json(root(el("ul", implicit("li", value="Item $#"))))
        tree = expand_tree(json_to_tree(parsed), ["1", "2"])
        restored = json_to_tree(tree_to_json(tree))

        assert restored == tree
        assert [li.value for li in restored.children[0].children] == ["Item 1", "Item 2"]
        assert [li.repeat.index for li in restored.children[0].children] == [0, 1]

    def test_bem_after_repeat(self):
        """Test ``ul.menu>.-item*`` with BEM enabled."""
        tree = root(el("ul", implicit(attrs={"class": "-item"}), attrs={"class": "menu"}))
        expand_tree(tree, ["Home", "About"], bem=True)

        items = tree.children[0].children
        assert names(items) == ["li", "li"]
        assert [attrs_of(item) for item in items] == [{"class": "menu__item"}] * 2
        assert [item.value for item in items] == ["Home", "About"]

    def test_bem_disabled_by_default(self):
        tree = root(el("div", attrs={"class": "b_m"}))
        expand_tree(tree)
        assert attrs_of(tree.children[0]) == {"class": "b_m"}

    def test_bem_options_enable_stage(self):
        tree = root(el("div", attrs={"class": "b_m"}))
        expand_tree(tree, bem_options=BemOptions(modifier="--"))
        assert attrs_of(tree.children[0]) == {"class": "b b--m"}
