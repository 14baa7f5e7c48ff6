#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/content/nodes.py
"""Content node classes for format-independent documentation prose.

The content tree is the output of the markup builder and the input of the
format-specific writers (HTML, Markdown, plain text). It carries structure
only; it has no opinion about how any node is finally formatted.

Node Hierarchy
--------------
All nodes inherit from ContentNode, own an ordered list of children and
support the visitor pattern.

Containers:
    - Content (root), Paragraph, List, ListItem, Section

Inline wrappers:
    - Emphasis, Strong, Code, ExternalLink

Text-bearing nodes:
    - Text, BlockCode

A node is owned by at most one parent. Appending a node that already has a
parent raises ValidationError, so the structure is always a tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from docweave.exceptions import ValidationError


class ContentNode(ABC):
    """Base class for all content nodes.

    Subclasses are dataclasses declaring a ``children`` list and a ``parent``
    back-reference. The parent is excluded from equality and repr so that
    structurally equal trees compare equal.

    """

    children: list[ContentNode]
    parent: Optional[ContentNode]

    def __post_init__(self) -> None:
        """Adopt children passed at construction time."""
        initial = list(self.children)
        self.children = []
        for child in initial:
            self.append(child)

    def append(self, child: ContentNode) -> ContentNode:
        """Append a child node, taking ownership of it.

        Parameters
        ----------
        child : ContentNode
            Node to append. Must not already belong to another parent.

        Returns
        -------
        ContentNode
            The appended child

        Raises
        ------
        ValidationError
            If the child already has a parent or is this node itself

        """
        if child is self:
            raise ValidationError("Cannot append a content node to itself", parameter_name="child")
        if child.parent is not None:
            raise ValidationError(
                f"{type(child).__name__} node already belongs to a {type(child.parent).__name__} node",
                parameter_name="child",
                parameter_value=child,
            )
        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children: list[ContentNode]) -> None:
        """Append several children in order."""
        for child in children:
            self.append(child)

    def walk(self) -> Iterator[ContentNode]:
        """Iterate over this node and all descendants in document order."""
        stack: list[ContentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def text_content(self) -> str:
        """Concatenate the text of all descendant text-bearing nodes."""
        return "".join(node.text for node in self.walk() if isinstance(node, (Text, BlockCode)) and node.text)

    @property
    def is_empty(self) -> bool:
        """Whether the node has no children."""
        return not self.children

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Containers
# ============================================================================


@dataclass(eq=True)
class Content(ContentNode):
    """Root container of a content tree.

    Parameters
    ----------
    children : list of ContentNode, default = empty list
        Top-level content

    """

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_content``."""
        return visitor.visit_content(self)


@dataclass(eq=True)
class Paragraph(ContentNode):
    """A paragraph of inline content."""

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass(eq=True)
class List(ContentNode):
    """A list of ListItem nodes.

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists, False for bulleted lists
    children : list of ContentNode, default = empty list
        List items

    """

    ordered: bool = False
    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass(eq=True)
class ListItem(ContentNode):
    """A single item of a List."""

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass(eq=True)
class Section(ContentNode):
    """A labelled documentation section such as ``$summary`` or ``$throws``.

    Parameters
    ----------
    label : str, default = ""
        Section label without sigil or braces
    children : list of ContentNode, default = empty list
        Section body

    """

    label: str = ""
    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_section``."""
        return visitor.visit_section(self)


# ============================================================================
# Inline wrappers
# ============================================================================


@dataclass(eq=True)
class Emphasis(ContentNode):
    """Emphasized (typically italic) content."""

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass(eq=True)
class Strong(ContentNode):
    """Strongly emphasized (typically bold) content."""

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass(eq=True)
class Code(ContentNode):
    """Inline code span."""

    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass(eq=True)
class ExternalLink(ContentNode):
    """Hyperlink to an external destination.

    Parameters
    ----------
    destination : str
        Link target, either an explicit URL or the link's own label text
    children : list of ContentNode, default = empty list
        Link body

    """

    destination: str
    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_external_link``."""
        return visitor.visit_external_link(self)


# ============================================================================
# Text-bearing nodes
# ============================================================================


@dataclass(eq=True)
class Text(ContentNode):
    """Literal text.

    Characters such as ``<`` or ``"`` are kept verbatim; escaping is the
    writer's job.

    Parameters
    ----------
    text : str
        Text content

    """

    text: str
    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(eq=True)
class BlockCode(ContentNode):
    """Block of preformatted code.

    The code itself is held by Text children, matching how the builder emits
    source excerpts and placeholders.

    Parameters
    ----------
    text : str, default = ""
        Optional code carried directly on the node
    children : list of ContentNode, default = empty list
        Text nodes holding the code

    """

    text: str = ""
    children: list[ContentNode] = field(default_factory=list)
    parent: Optional[ContentNode] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_code``."""
        return visitor.visit_block_code(self)
