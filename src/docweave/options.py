#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/options.py
"""Configuration options for the content builder, signature renderer and markdown adapter.

All option classes are frozen dataclasses. Use ``create_updated`` to derive a
modified copy instead of mutating an existing instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docweave.constants import (
    DEFAULT_ELIDED_MODIFIERS,
    DEFAULT_LIST_SEPARATOR,
    DEFAULT_MAX_MARKUP_DEPTH,
    DEFAULT_MAX_SIGNATURE_DEPTH,
)


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
class ContentBuilderOptions(CloneFrozenMixin):
    """Options controlling markup-to-content conversion.

    Parameters
    ----------
    enable_code_references : bool, default = False
        Resolve ``code`` directives into block code excerpts. Requires a
        resolution context to be given to the builder.
    max_depth : int, default = 256
        Maximum nesting of markup nodes before ``MarkupDepthError`` is raised.

    """

    enable_code_references: bool = field(
        default=False,
        metadata={"help": "Resolve inline code-reference directives to source excerpts"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_MARKUP_DEPTH,
        metadata={"help": "Maximum markup nesting depth", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_depth is not positive.

        """
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


@dataclass(frozen=True)
class SignatureOptions(CloneFrozenMixin):
    """Options controlling signature token emission.

    Parameters
    ----------
    list_separator : str, default = ", "
        Separator symbol placed between items of comma-joined lists
    elided_modifiers : frozenset of str, default = {"final", "internal"}
        Modifiers that are implied and never displayed
    max_depth : int, default = 64
        Maximum nesting of type arguments before ``SignatureDepthError`` is raised

    """

    list_separator: str = field(
        default=DEFAULT_LIST_SEPARATOR,
        metadata={"help": "Separator between list items in signatures"},
    )
    elided_modifiers: frozenset[str] = field(
        default=DEFAULT_ELIDED_MODIFIERS,
        metadata={"help": "Modifiers omitted from rendered signatures"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_SIGNATURE_DEPTH,
        metadata={"help": "Maximum type nesting depth", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If max_depth is not positive or the separator is empty.

        """
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if not self.list_separator:
            raise ValueError("list_separator must not be empty")
        # Accept any iterable of names, store as frozenset
        if not isinstance(self.elided_modifiers, frozenset):
            object.__setattr__(self, "elided_modifiers", frozenset(self.elided_modifiers))


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Options for turning markdown text into a markup tree.

    Parameters
    ----------
    recognize_sections : bool, default = True
        Turn paragraphs starting with ``$label:`` or ``${label}:`` into sections
    recognize_short_links : bool, default = True
        Turn bare ``[label]`` text into short reference links

    """

    recognize_sections: bool = field(
        default=True,
        metadata={"help": "Recognize $label: section paragraphs"},
    )
    recognize_short_links: bool = field(
        default=True,
        metadata={"help": "Recognize bare [label] short reference links"},
    )
