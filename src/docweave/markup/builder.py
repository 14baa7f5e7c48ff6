#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/markup/builder.py
"""Conversion of markup parse trees into content trees.

The :class:`ContentBuilder` walks a markup tree depth-first with an explicit
work stack and keeps a second stack of open content containers. The top of
the container stack is always the node that newly built content is appended
to. A container-producing markup node pushes a fresh content node, its
children are processed, and the finished node is popped and appended to the
container below it.

Supported constructs are paragraphs, ordered and unordered lists, emphasis,
strong emphasis, code spans, labelled sections, inline and short reference
links, and literal text tokens. Any other markup type is transparent: it
produces nothing itself but its children are still visited.

Examples
--------
    >>> from docweave.markup.markdown import parse_markdown
    >>> content = build_content(parse_markdown("Hello *world*"))
    >>> content.children[0]
    Paragraph(children=[Text(text='Hello', ...), Text(text=' ', ...), Emphasis(...)])

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from docweave.constants import CODE_DIRECTIVE_NAME, SECTION_CLOSE_BRACE, SECTION_OPEN_BRACE, SECTION_SIGIL
from docweave.content.nodes import (
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
from docweave.exceptions import MarkupDepthError, StackBalanceError, ValidationError
from docweave.markup.nodes import MarkupNode, MarkupType
from docweave.options import ContentBuilderOptions
from docweave.resolver import ResolutionContext, code_reference

logger = logging.getLogger(__name__)


class _Close:
    """Work item marking the end of a container's children."""

    __slots__ = ("parent",)

    def __init__(self, parent: ContentNode):
        self.parent = parent


_WorkItem = Union[tuple[MarkupNode, int], _Close]


def section_label(node: MarkupNode) -> str:
    """Extract a section label from the ``SECTION_ID`` child of a section node.

    ``"${summary}"`` and ``"$summary"`` both yield ``"summary"``; a section
    without an id yields ``""``.
    """
    section_id = node.child(MarkupType.SECTION_ID)
    if section_id is None:
        return ""
    label = section_id.text.removeprefix(SECTION_SIGIL)
    return label.removeprefix(SECTION_OPEN_BRACE).removesuffix(SECTION_CLOSE_BRACE)


def is_colon_after_section_label(node: MarkupNode) -> bool:
    """Whether ``node`` is the second child of a SECTION, i.e. the label delimiter."""
    parent = node.parent
    return (
        parent is not None
        and parent.type is MarkupType.SECTION
        and len(parent.children) >= 2
        and parent.children[1] is node
    )


class ContentBuilder:
    """Stack-based converter from a markup tree to a content tree.

    Parameters
    ----------
    owner : Any, default = None
        Declaration whose documentation is being built. Only used to resolve
        code-reference directives.
    options : ContentBuilderOptions or None, default = None
        Builder configuration
    context : ResolutionContext or None, default = None
        Host scope services, required when code references are enabled

    Raises
    ------
    ValidationError
        If code references are enabled without a resolution context

    """

    def __init__(
        self,
        owner: Any = None,
        options: ContentBuilderOptions | None = None,
        context: ResolutionContext | None = None,
    ):
        """Initialize the builder; the stacks are created per ``build`` call."""
        self.owner = owner
        self.options = options or ContentBuilderOptions()
        self.context = context
        if self.options.enable_code_references and context is None:
            raise ValidationError(
                "Code references are enabled but no resolution context was given",
                parameter_name="context",
            )
        self._stack: list[ContentNode] = []

        self._containers: dict[MarkupType, Callable[[MarkupNode], ContentNode]] = {
            MarkupType.UNORDERED_LIST: lambda node: List(ordered=False),
            MarkupType.ORDERED_LIST: lambda node: List(ordered=True),
            MarkupType.LIST_ITEM: lambda node: ListItem(),
            MarkupType.EMPH: lambda node: Emphasis(),
            MarkupType.STRONG: lambda node: Strong(),
            MarkupType.CODE_SPAN: lambda node: Code(),
            MarkupType.PARAGRAPH: lambda node: Paragraph(),
            MarkupType.SECTION: lambda node: Section(label=section_label(node)),
            MarkupType.TEXT: lambda node: Text(node.text),
        }
        self._leaves: dict[MarkupType, Callable[[MarkupNode], None]] = {
            MarkupType.INLINE_LINK: self._handle_inline_link,
            MarkupType.SHORT_REFERENCE_LINK: self._handle_short_reference_link,
            MarkupType.COLON: self._handle_colon,
            MarkupType.DOUBLE_QUOTE: self._handle_literal,
            MarkupType.LT: self._handle_literal,
            MarkupType.GT: self._handle_literal,
        }

    @property
    def current(self) -> ContentNode:
        """The open container that new content is appended to."""
        if not self._stack:
            raise StackBalanceError("Content stack is empty", depth=0)
        return self._stack[-1]

    @property
    def stack_depth(self) -> int:
        """Number of open containers, including the root."""
        return len(self._stack)

    def build(self, tree: MarkupNode) -> Content:
        """Convert a markup tree into a content tree.

        Parameters
        ----------
        tree : MarkupNode
            Root of the markup parse tree

        Returns
        -------
        Content
            Root of the new content tree

        Raises
        ------
        MarkupDepthError
            If the markup is nested deeper than ``options.max_depth``
        StackBalanceError
            If the container stack does not end with exactly the root

        """
        self._stack = [Content()]
        work: list[_WorkItem] = [(tree, 0)]

        while work:
            item = work.pop()
            if isinstance(item, _Close):
                self._close(item)
                continue

            node, depth = item
            if depth > self.options.max_depth:
                raise MarkupDepthError(self.options.max_depth)
            self._dispatch(node, depth, work)

        if len(self._stack) != 1:
            raise StackBalanceError(
                f"Expected only the root on the content stack, found {len(self._stack)} nodes",
                depth=len(self._stack),
            )
        root = self._stack.pop()
        if not isinstance(root, Content):
            raise StackBalanceError(f"Content stack ended with {type(root).__name__} instead of Content", depth=0)

        logger.debug("Built content tree with %d top-level nodes", len(root.children))
        return root

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _dispatch(self, node: MarkupNode, depth: int, work: list[_WorkItem]) -> None:
        factory = self._containers.get(node.type)
        if factory is not None:
            self._open(factory(node), node, depth, work)
            return

        if node.type in (MarkupType.WHITESPACE, MarkupType.EOL):
            # Only meaningful between words of a paragraph
            if isinstance(self.current, Paragraph) and not node.is_last_child():
                self._open(Text(node.text), node, depth, work)
            return

        handler = self._leaves.get(node.type)
        if handler is not None:
            handler(node)
            return

        if node.type is MarkupType.DIRECTIVE and self.options.enable_code_references:
            if self._handle_directive(node):
                return

        self._schedule_children(node, depth, work)

    def _open(self, content: ContentNode, node: MarkupNode, depth: int, work: list[_WorkItem]) -> None:
        parent = self.current
        self._stack.append(content)
        work.append(_Close(parent))
        self._schedule_children(node, depth, work)

    def _close(self, item: _Close) -> None:
        if len(self._stack) < 2:
            raise StackBalanceError("Content stack underflow while closing a container", depth=len(self._stack))
        finished = self._stack.pop()
        if self._stack[-1] is not item.parent:
            raise StackBalanceError(
                f"{type(finished).__name__} closed onto an unexpected parent {type(self._stack[-1]).__name__}",
                depth=len(self._stack),
            )
        item.parent.append(finished)

    @staticmethod
    def _schedule_children(node: MarkupNode, depth: int, work: list[_WorkItem]) -> None:
        work.extend((child, depth + 1) for child in reversed(node.children))

    # ------------------------------------------------------------------
    # Leaf handlers
    # ------------------------------------------------------------------

    def _handle_inline_link(self, node: MarkupNode) -> None:
        link_text = node.child(MarkupType.LINK_TEXT)
        label = link_text.child(MarkupType.TEXT) if link_text is not None else None
        if label is None:
            return
        destination = node.child(MarkupType.LINK_DESTINATION)
        self._append_link(destination.text if destination is not None else label.text, label.text)

    def _handle_short_reference_link(self, node: MarkupNode) -> None:
        link_label = node.child(MarkupType.LINK_LABEL)
        label = link_label.child(MarkupType.TEXT) if link_label is not None else None
        if label is None:
            return
        self._append_link(label.text, label.text)

    def _append_link(self, destination: str, label: str) -> None:
        link = ExternalLink(destination)
        link.append(Text(label))
        self.current.append(link)

    def _handle_colon(self, node: MarkupNode) -> None:
        if not is_colon_after_section_label(node):
            self.current.append(Text(node.text))

    def _handle_literal(self, node: MarkupNode) -> None:
        self.current.append(Text(node.text))

    def _handle_directive(self, node: MarkupNode) -> bool:
        name_node = node.child(MarkupType.DIRECTIVE_NAME)
        if self.context is None or name_node is None or name_node.text.strip() != CODE_DIRECTIVE_NAME:
            return False
        params_node = node.child(MarkupType.DIRECTIVE_PARAMS)
        target = _strip_directive_params(params_node.text if params_node is not None else "")
        self.current.append(code_reference(target, self.owner, self.context))
        return True


def _strip_directive_params(params: str) -> str:
    target = params.strip()
    if target.startswith("(") and target.endswith(")"):
        target = target[1:-1].strip()
    if len(target) >= 2 and target[0] == target[-1] and target[0] in "\"'":
        target = target[1:-1]
    return target


def build_content(
    tree: MarkupNode,
    owner: Any = None,
    options: Optional[ContentBuilderOptions] = None,
    context: Optional[ResolutionContext] = None,
) -> Content:
    """Convert a markup tree into a content tree.

    Convenience wrapper around :class:`ContentBuilder`.

    Parameters
    ----------
    tree : MarkupNode
        Root of the markup parse tree
    owner : Any, default = None
        Declaration the documentation belongs to
    options : ContentBuilderOptions or None, default = None
        Builder configuration
    context : ResolutionContext or None, default = None
        Host scope services for code references

    Returns
    -------
    Content
        Root of the content tree

    """
    return ContentBuilder(owner=owner, options=options, context=context).build(tree)
