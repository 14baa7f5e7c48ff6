#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/markup/nodes.py
"""Markup parse tree consumed by the content builder.

A markup tree is the lightweight parse of a documentation comment. Each node
carries a :class:`MarkupType` tag, an ordered list of children, a parent
back-reference and the raw text it covers. The tree is produced by a markup
parser (see :mod:`docweave.markup.markdown`) and is read-only while the
content builder walks it.

Token types name single lexical units (``TEXT``, ``WHITESPACE``, ``COLON``);
element types name constructs with children (``PARAGRAPH``, ``EMPH``,
``INLINE_LINK``). Types the builder does not know about are passed through:
their children are still visited.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class MarkupType(Enum):
    """Type tags of markup parse nodes."""

    # Elements
    MARKDOWN_FILE = "MARKDOWN_FILE"
    PARAGRAPH = "PARAGRAPH"
    UNORDERED_LIST = "UNORDERED_LIST"
    ORDERED_LIST = "ORDERED_LIST"
    LIST_ITEM = "LIST_ITEM"
    EMPH = "EMPH"
    STRONG = "STRONG"
    CODE_SPAN = "CODE_SPAN"
    CODE_BLOCK = "CODE_BLOCK"
    ATX_HEADER = "ATX_HEADER"
    BLOCK_QUOTE = "BLOCK_QUOTE"
    SECTION = "SECTION"
    INLINE_LINK = "INLINE_LINK"
    SHORT_REFERENCE_LINK = "SHORT_REFERENCE_LINK"
    LINK_TEXT = "LINK_TEXT"
    LINK_DESTINATION = "LINK_DESTINATION"
    LINK_LABEL = "LINK_LABEL"
    DIRECTIVE = "DIRECTIVE"
    DIRECTIVE_NAME = "DIRECTIVE_NAME"
    DIRECTIVE_PARAMS = "DIRECTIVE_PARAMS"
    UNKNOWN = "UNKNOWN"

    # Tokens
    TEXT = "TEXT"
    WHITESPACE = "WHITESPACE"
    EOL = "EOL"
    COLON = "COLON"
    DOUBLE_QUOTE = "DOUBLE_QUOTE"
    LT = "LT"
    GT = "GT"
    BACKTICK = "BACKTICK"
    SECTION_ID = "SECTION_ID"


@dataclass(eq=True)
class MarkupNode:
    """A node of the markup parse tree.

    Parameters
    ----------
    type : MarkupType
        Type tag of the node
    raw : str or None, default = None
        Text covered by the node. When None, ``text`` is the concatenated
        text of the children.
    children : list of MarkupNode, default = empty list
        Ordered child nodes. Their ``parent`` is set on construction.

    Examples
    --------
        >>> para = MarkupNode(MarkupType.PARAGRAPH, children=[
        ...     MarkupNode(MarkupType.TEXT, "a"),
        ...     MarkupNode(MarkupType.WHITESPACE, " "),
        ... ])
        >>> para.text
        'a '

    """

    type: MarkupType
    raw: Optional[str] = None
    children: list[MarkupNode] = field(default_factory=list)
    parent: Optional[MarkupNode] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Point each initial child back at this node."""
        for child in self.children:
            child.parent = self

    @property
    def text(self) -> str:
        """Raw text covered by this node."""
        if self.raw is not None:
            return self.raw
        return "".join(child.text for child in self.children)

    def append(self, child: MarkupNode) -> MarkupNode:
        """Append a child and set its parent."""
        child.parent = self
        self.children.append(child)
        return child

    def child(self, node_type: MarkupType) -> Optional[MarkupNode]:
        """Return the first direct child of the given type, if any."""
        for candidate in self.children:
            if candidate.type is node_type:
                return candidate
        return None

    def is_last_child(self) -> bool:
        """Whether this node is the last child of its parent.

        A node without a parent is never considered the last child.
        """
        return self.parent is not None and bool(self.parent.children) and self.parent.children[-1] is self

    def walk(self) -> Iterator[MarkupNode]:
        """Iterate over this node and its descendants in document order."""
        stack: list[MarkupNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_test_string(self, indent: int = 0) -> str:
        """Render the subtree as an indented outline, one node per line."""
        lines = []
        for node, depth in _walk_with_depth(self, indent):
            label = node.type.value
            if node.raw is not None:
                label += f" {node.raw!r}"
            lines.append("  " * depth + label)
        return "\n".join(lines)


def _walk_with_depth(root: MarkupNode, start: int) -> Iterator[tuple[MarkupNode, int]]:
    stack: list[tuple[MarkupNode, int]] = [(root, start)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))
