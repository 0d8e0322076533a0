#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/abbrtree/transforms/options.py
"""Configuration dataclasses for the tree transforms.

Options are frozen; use ``create_updated`` to derive a modified copy.

Examples
--------
Use ``{}`` as the placeholder instead of ``$#``:

    >>> options = RepeaterOptions(placeholder="{}")
    >>> insert_repeated_content(tree, ["a", "b"], options=options)

Map children of ``dl`` to ``dt``:

    >>> base = ImplicitTagOptions()
    >>> options = base.create_updated(element_map={**base.element_map, "dl": "dt"})

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from abbrtree.constants import (
    DEFAULT_BEM_ELEMENT_SEPARATOR,
    DEFAULT_BEM_MODIFIER_SEPARATOR,
    DEFAULT_CARET,
    DEFAULT_CONTENT_SEPARATOR,
    DEFAULT_ESCAPE,
    DEFAULT_IMPLICIT_NAME,
    DEFAULT_INLINE_IMPLICIT_NAME,
    DEFAULT_MAILTO_PREFIX,
    DEFAULT_PLACEHOLDER,
    DEFAULT_URL_SCHEME,
    IMPLICIT_ELEMENT_MAP,
    INLINE_ELEMENTS,
)
from abbrtree.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RepeaterOptions(CloneFrozenMixin):
    """Options for repeated content insertion.

    Parameters
    ----------
    placeholder : str, default = "$#"
        Token replaced by the content item inside values and attributes
    caret : str, default = "|"
        Token marking the insertion point in a node value when no
        placeholder exists
    escape : str, default = "\\\\"
        Single-character marker that makes the following token literal
    separator : str, default = "\\n"
        Joins content items when the tree has no implicitly repeated node
    default_url_scheme : str, default = "http://"
        Prefix added to URL content without an explicit scheme
    mailto_prefix : str, default = "mailto:"
        Prefix added to email content
    detect_links : bool, default = True
        Fill ``href`` of link-shaped nodes from URL or email content

    Raises
    ------
    ValidationError
        If a token is empty, the escape marker is not a single character,
        or the escape marker is part of a token

    """

    placeholder: str = DEFAULT_PLACEHOLDER
    caret: str = DEFAULT_CARET
    escape: str = DEFAULT_ESCAPE
    separator: str = DEFAULT_CONTENT_SEPARATOR
    default_url_scheme: str = DEFAULT_URL_SCHEME
    mailto_prefix: str = DEFAULT_MAILTO_PREFIX
    detect_links: bool = True

    def __post_init__(self) -> None:
        for name in ("placeholder", "caret"):
            token = getattr(self, name)
            if not isinstance(token, str) or not token:
                raise ValidationError(f"{name} must be a non-empty string", parameter_name=name, parameter_value=token)

        if not isinstance(self.escape, str) or len(self.escape) != 1:
            raise ValidationError(
                "escape must be a single character", parameter_name="escape", parameter_value=self.escape
            )

        if self.escape in self.placeholder or self.escape in self.caret:
            raise ValidationError(
                f"escape marker {self.escape!r} cannot be part of a token",
                parameter_name="escape",
                parameter_value=self.escape,
            )


@dataclass(frozen=True)
class ImplicitTagOptions(CloneFrozenMixin):
    """Options for implicit tag name resolution.

    Parameters
    ----------
    element_map : dict[str, str], default = built-in map
        Lowercase parent tag name to the tag name given to nameless children
        (e.g. ``ul`` to ``li``)
    inline_elements : frozenset[str], default = HTML inline elements
        Lowercase parent tag names whose nameless children become
        ``inline_name``
    inline_name : str, default = "span"
        Name used inside inline parents
    default_name : str, default = "div"
        Name used everywhere else

    """

    element_map: dict[str, str] = field(default_factory=lambda: dict(IMPLICIT_ELEMENT_MAP))
    inline_elements: frozenset[str] = INLINE_ELEMENTS
    inline_name: str = DEFAULT_INLINE_IMPLICIT_NAME
    default_name: str = DEFAULT_IMPLICIT_NAME

    def __post_init__(self) -> None:
        for name in ("inline_name", "default_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"{name} must be a non-empty string", parameter_name=name, parameter_value=value)


@dataclass(frozen=True)
class BemOptions(CloneFrozenMixin):
    """Options for BEM class name expansion.

    Parameters
    ----------
    element : str, default = "__"
        Separator between block and element names (``block__elem``)
    modifier : str, default = "_"
        Separator before a modifier name (``block_mod``, ``block__elem_mod``)

    """

    element: str = DEFAULT_BEM_ELEMENT_SEPARATOR
    modifier: str = DEFAULT_BEM_MODIFIER_SEPARATOR

    def __post_init__(self) -> None:
        for name in ("element", "modifier"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"{name} must be a non-empty string", parameter_name=name, parameter_value=value)


__all__ = [
    "CloneFrozenMixin",
    "RepeaterOptions",
    "ImplicitTagOptions",
    "BemOptions",
]
