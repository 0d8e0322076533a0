#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/base.py
"""Base class for in-place abbreviation tree transforms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from abbrtree.ast.nodes import AbbreviationNode


class TreeTransform(ABC):
    """Base class for transforms that mutate an abbreviation tree in place.

    Subclasses implement :meth:`transform`, which must return the same tree
    reference it received so calls can be chained into a serializer.

    Examples
    --------
    >>> class UppercaseNames(TreeTransform):
    ...     def transform(self, tree):
    ...         for node in tree.walk():
    ...             node.name = node.name.upper()
    ...         return tree

    """

    @property
    def name(self) -> str:
        """Name used in log records and errors."""
        return self.__class__.__name__

    @abstractmethod
    def transform(self, tree: AbbreviationNode) -> AbbreviationNode:
        """Apply the transform to ``tree`` and return it.

        Parameters
        ----------
        tree : AbbreviationNode
            Root of the tree to mutate

        Returns
        -------
        AbbreviationNode
            The same tree reference

        """
