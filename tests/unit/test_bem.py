#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for BEM class name expansion."""

import pytest
from utils import el, root

from abbrtree.exceptions import ValidationError
from abbrtree.transforms.bem import BemTransform, expand_bem_classes
from abbrtree.transforms.options import BemOptions


def div(classes, *children):
    return el("div", *children, attrs={"class": classes})


def classes_of(node):
    attr = node.get_attribute("class")
    return attr.value if attr is not None else None


@pytest.mark.unit
class TestBemModifiers:
    """Tests for modifier expansion."""

    def test_block_modifier_split(self):
        """Test ``div.b_m``."""
        tree = root(div("b_m"))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "b b_m"

    def test_bare_modifier_on_block(self):
        """Test ``div.b._m``."""
        tree = root(div("b _m"))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "b b_m"

    def test_multiple_modifiers(self):
        """Test ``div.b_m1._m2``."""
        tree = root(div("b_m1 _m2"))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "b b_m1 b_m2"

    def test_modifier_takes_parent_block(self):
        """Test ``div.b>div._m``."""
        tree = root(div("b", div("_m")))
        expand_bem_classes(tree)
        block = tree.children[0]
        assert classes_of(block) == "b"
        assert classes_of(block.children[0]) == "b b_m"

    def test_block_inherited_through_modifiers(self):
        """Test ``div.b>div._m1>div._m2``."""
        tree = root(div("b", div("_m1", div("_m2"))))
        expand_bem_classes(tree)
        block = tree.children[0]
        assert classes_of(block) == "b"
        assert classes_of(block.children[0]) == "b b_m1"
        assert classes_of(block.children[0].children[0]) == "b b_m2"


@pytest.mark.unit
class TestBemElements:
    """Tests for element expansion."""

    def test_element(self):
        """Test ``div.b>div.-e``."""
        tree = root(div("b", div("-e")))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "b"
        assert classes_of(tree.children[0].children[0]) == "b__e"

    def test_nested_elements(self):
        """Test ``div.b>div.-e>div.-e``."""
        tree = root(div("b", div("-e", div("-e"))))
        expand_bem_classes(tree)
        element = tree.children[0].children[0]
        assert classes_of(element) == "b__e"
        assert classes_of(element.children[0]) == "b__e"

    def test_block_from_ancestor(self):
        """Test ``div.b1>div.b2_m1>div.-e1+div.--e2_m2``."""
        tree = root(div("b1", div("b2_m1", div("-e1"), div("--e2_m2"))))
        expand_bem_classes(tree)

        outer = tree.children[0]
        inner = outer.children[0]
        assert classes_of(outer) == "b1"
        assert classes_of(inner) == "b2 b2_m1"
        assert classes_of(inner.children[0]) == "b2__e1"
        assert classes_of(inner.children[1]) == "b1__e2 b1__e2_m2"

    def test_too_many_dashes_stop_below_root(self):
        """Test ``div.b>div.---e`` resolves against the top-level block."""
        tree = root(div("b", div("---e")))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0].children[0]) == "b__e"

    def test_prefixed_block_preferred(self):
        """Test that ``x-name`` style classes win as block names."""
        tree = root(div("menu b-nav", div("-item")))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0].children[0]) == "b-nav__item"


@pytest.mark.unit
class TestBemTransform:
    """Tests for options, untouched nodes and the transform wrapper."""

    def test_plain_classes_kept(self):
        tree = root(div("wrapper clearfix", el("span")))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "wrapper clearfix"
        assert classes_of(tree.children[0].children[0]) is None

    def test_no_block_available(self):
        """Test that a modifier without any block keeps just the modifier."""
        tree = root(div("_active"))
        expand_bem_classes(tree)
        assert classes_of(tree.children[0]) == "_active"

    def test_other_attributes_keep_position(self):
        node = el("div", attrs={"id": "main", "class": "b_m", "title": "t"})
        expand_bem_classes(root(node))
        assert [attr.name for attr in node.attributes] == ["id", "class", "title"]

    def test_custom_separators(self):
        options = BemOptions(element="-", modifier="--")
        tree = root(div("b_m", div("-e")))
        expand_bem_classes(tree, options)
        assert classes_of(tree.children[0]) == "b b--m"
        assert classes_of(tree.children[0].children[0]) == "b-e"

    @pytest.mark.parametrize("field_name", ["element", "modifier"])
    def test_empty_separator_rejected(self, field_name):
        with pytest.raises(ValidationError) as exc_info:
            BemOptions(**{field_name: ""})
        assert exc_info.value.parameter_name == field_name

    def test_transform_wrapper(self):
        tree = root(div("card", div("-title")))
        transform = BemTransform()
        assert transform.transform(tree) is tree
        assert classes_of(tree.children[0].children[0]) == "card__title"
        assert transform.name == "BemTransform"
