#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/abbrtree/api.py
"""The main entry point for completing a parsed abbreviation tree."""

import logging
from typing import Optional, Sequence, Union

from abbrtree.ast.nodes import AbbreviationNode
from abbrtree.exceptions import AbbrTreeError, TransformError
from abbrtree.transforms.base import TreeTransform
from abbrtree.transforms.bem import BemTransform
from abbrtree.transforms.implicit_tags import ImplicitTagsTransform
from abbrtree.transforms.options import BemOptions, ImplicitTagOptions, RepeaterOptions
from abbrtree.transforms.repeater import RepeatedContentTransform, normalize_content

logger = logging.getLogger(__name__)


def _build_transforms(
    content: Union[Sequence[str], str, None],
    implicit_tags: bool,
    repeater_options: Optional[RepeaterOptions],
    implicit_tag_options: Optional[ImplicitTagOptions],
    bem: bool,
    bem_options: Optional[BemOptions],
    extra: Optional[Sequence[TreeTransform]],
) -> list[TreeTransform]:
    transforms: list[TreeTransform] = []
    if implicit_tags:
        transforms.append(ImplicitTagsTransform(implicit_tag_options))
    if normalize_content(content):
        transforms.append(RepeatedContentTransform(content, repeater_options))
    if bem or bem_options is not None:
        transforms.append(BemTransform(bem_options))
    if extra:
        transforms.extend(extra)
    return transforms


def expand_tree(
    tree: AbbreviationNode,
    content: Union[Sequence[str], str, None] = None,
    *,
    implicit_tags: bool = True,
    repeater_options: Optional[RepeaterOptions] = None,
    implicit_tag_options: Optional[ImplicitTagOptions] = None,
    bem: bool = False,
    bem_options: Optional[BemOptions] = None,
    transforms: Optional[Sequence[TreeTransform]] = None,
) -> AbbreviationNode:
    """Complete a parsed abbreviation tree in place.

    Resolves implicit tag names, then expands implicit repeats and inserts
    ``content``, then expands BEM class names if requested, then runs any
    extra ``transforms`` in order.

    Parameters
    ----------
    tree : AbbreviationNode
        Tree produced by an abbreviation parser (mutated in place)
    content : sequence of str, str or None, default None
        Content to distribute over implicitly repeated nodes. ``None`` or
        empty content skips the repeat stage.
    implicit_tags : bool, default True
        Resolve names of nameless element nodes
    repeater_options : RepeaterOptions, optional
        Placeholder, caret and link settings
    implicit_tag_options : ImplicitTagOptions, optional
        Tag name mapping tables
    bem : bool, default False
        Expand BEM short notation in class names
    bem_options : BemOptions, optional
        BEM separators; passing options also enables the BEM stage
    transforms : sequence of TreeTransform, optional
        Additional transforms applied after the built-in ones

    Returns
    -------
    AbbreviationNode
        The same tree, ready for serialization

    Raises
    ------
    TransformError
        If a transform fails or returns a different tree

    Examples
    --------
    >>> from abbrtree import expand_tree
    >>> tree = expand_tree(parsed, ["Home", "About"])

    """
    for transform in _build_transforms(
        content, implicit_tags, repeater_options, implicit_tag_options, bem, bem_options, transforms
    ):
        logger.debug(f"Applying transform: {transform.name}")
        try:
            result = transform.transform(tree)
        except AbbrTreeError:
            raise
        except Exception as e:
            logger.error(f"Transform {transform.name} failed: {e}", exc_info=True)
            raise TransformError(
                f"Transform {transform.name} failed: {e}", transform_name=transform.name, original_error=e
            ) from e

        if result is not tree:
            raise TransformError(
                f"Transform {transform.name} must mutate and return the tree it was given",
                transform_name=transform.name,
            )

    return tree


__all__ = ["expand_tree"]
