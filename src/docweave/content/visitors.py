#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/content/visitors.py
"""Visitor base class for content tree traversal.

Writers that turn a content tree into HTML, Markdown or plain text subclass
:class:`ContentVisitor` and override the ``visit_*`` methods for the node
types they care about. Every method not overridden falls back to
:meth:`ContentVisitor.generic_visit`, which visits the node's children.

"""

from __future__ import annotations

from typing import Any

from docweave.content.nodes import (
    BlockCode,
    Code,
    Content,
    ContentNode,
    Emphasis,
    ExternalLink,
    List,
    ListItem,
    Paragraph,
    Section,
    Strong,
    Text,
)


class ContentVisitor:
    """Base class for content node visitors.

    Examples
    --------
    Collecting link destinations:

        >>> class LinkCollector(ContentVisitor):
        ...     def __init__(self):
        ...         self.destinations = []
        ...
        ...     def visit_external_link(self, node):
        ...         self.destinations.append(node.destination)
        ...         self.generic_visit(node)
        ...
        >>> collector = LinkCollector()
        >>> collector.visit(content)

    """

    def visit(self, node: ContentNode) -> Any:
        """Visit a node by dispatching through ``node.accept``."""
        return node.accept(self)

    def generic_visit(self, node: ContentNode) -> Any:
        """Visit every child of ``node`` in order."""
        for child in node.children:
            child.accept(self)
        return None

    def visit_content(self, node: Content) -> Any:
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Any:
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        return self.generic_visit(node)

    def visit_section(self, node: Section) -> Any:
        return self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> Any:
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Any:
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Any:
        return self.generic_visit(node)

    def visit_external_link(self, node: ExternalLink) -> Any:
        return self.generic_visit(node)

    def visit_text(self, node: Text) -> Any:
        return self.generic_visit(node)

    def visit_block_code(self, node: BlockCode) -> Any:
        return self.generic_visit(node)


class SectionCollector(ContentVisitor):
    """Collect Section nodes by label.

    Writers use this to lay out ``$summary`` and other labelled sections
    separately from the main description.

    """

    def __init__(self) -> None:
        """Initialize with an empty label mapping."""
        self.sections: dict[str, list[Section]] = {}

    def visit_section(self, node: Section) -> Any:
        self.sections.setdefault(node.label, []).append(node)
        return self.generic_visit(node)
