"""Test utilities for the docweave test suite.

Helpers for building markup trees and declaration models without a parser
or a compiler front end.
"""

from __future__ import annotations

from docweave.markup.nodes import MarkupNode, MarkupType
from docweave.model import DocumentationNode, NodeKind


def token(node_type: MarkupType, text: str) -> MarkupNode:
    """Create a markup token with raw text."""
    return MarkupNode(node_type, text)


def element(node_type: MarkupType, *children: MarkupNode) -> MarkupNode:
    """Create a markup element with the given children."""
    return MarkupNode(node_type, children=list(children))


def text(value: str) -> MarkupNode:
    return token(MarkupType.TEXT, value)


def ws(value: str = " ") -> MarkupNode:
    return token(MarkupType.WHITESPACE, value)


def eol() -> MarkupNode:
    return token(MarkupType.EOL, "\n")


def root(*children: MarkupNode) -> MarkupNode:
    return element(MarkupType.MARKDOWN_FILE, *children)


def type_ref(name: str, *arguments: DocumentationNode, link: DocumentationNode | None = None) -> DocumentationNode:
    """Create a Type node with type arguments and an optional link target."""
    node = DocumentationNode(name, NodeKind.Type)
    node.add_details(arguments)
    if link is not None:
        node.append(link, "link")
    return node


def declaration(name: str, kind: NodeKind, *details: DocumentationNode) -> DocumentationNode:
    """Create a declaration node with the given details."""
    node = DocumentationNode(name, kind)
    node.add_details(details)
    return node


def modifier(name: str) -> DocumentationNode:
    return DocumentationNode(name, NodeKind.Modifier)


def parameter(name: str, parameter_type: DocumentationNode) -> DocumentationNode:
    return declaration(name, NodeKind.Parameter, parameter_type)


def type_parameter(name: str, *bounds: DocumentationNode) -> DocumentationNode:
    node = DocumentationNode(name, NodeKind.TypeParameter)
    for bound in bounds:
        bound.kind = NodeKind.UpperBound
        node.append(bound, "detail")
    return node


def receiver(receiver_type: DocumentationNode) -> DocumentationNode:
    return declaration("$receiver", NodeKind.Receiver, receiver_type)
