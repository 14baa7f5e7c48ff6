#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/signatures/kotlin.py
"""Kotlin signature rendering.

:class:`KotlinLanguageService` walks a declaration node and emits the tokens
of its Kotlin signature, for example::

    public fun <T> List<T>.firstOr(default: T): T

Only the declaration head is rendered, never a body. Each call builds a fresh
token stream, so rendering the same node twice yields identical tokens.

"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from docweave.constants import INTERFACE_IMPLICIT_MODIFIER
from docweave.exceptions import SignatureDepthError, UnexpectedKindError
from docweave.model import (
    CLASS_LIKE_KINDS,
    FUNCTION_LIKE_KINDS,
    PROPERTY_LIKE_KINDS,
    DocumentationNode,
    NodeKind,
)
from docweave.signatures.base import LanguageService
from docweave.signatures.function_types import FunctionTypeForm, recognize_function_type
from docweave.signatures.tokens import Token, TokenStream

logger = logging.getLogger(__name__)

CLASS_KEYWORDS: dict[NodeKind, str] = {
    NodeKind.Class: "class ",
    NodeKind.Interface: "trait ",
    NodeKind.Enum: "enum class ",
    NodeKind.EnumItem: "enum val ",
    NodeKind.Object: "object ",
}


class KotlinLanguageService(LanguageService):
    """Render declaration signatures as Kotlin source.

    Parameters
    ----------
    options : SignatureOptions or None, default = None
        Separator, elided modifiers and depth limit

    Examples
    --------
        >>> service = KotlinLanguageService()
        >>> tokens = service.render(function_node)
        >>> tokens_to_text(tokens)
        'fun length(): Int'

    """

    def render(self, node: DocumentationNode) -> list[Token]:
        """Render the signature of ``node``.

        Parameters
        ----------
        node : DocumentationNode
            Declaration to render

        Returns
        -------
        list of Token
            Signature tokens in display order

        Raises
        ------
        ModelError
            If the node's details are inconsistent with its kind
        SignatureDepthError
            If type arguments nest deeper than ``options.max_depth``

        """
        out = TokenStream()
        renderers: dict[NodeKind, Callable[[TokenStream, DocumentationNode], None]] = {
            NodeKind.Package: self._render_package,
            NodeKind.TypeParameter: self._render_type_parameter,
            NodeKind.Type: self._render_type,
            NodeKind.UpperBound: self._render_type,
            NodeKind.Modifier: self._render_modifier,
        }
        renderers.update(dict.fromkeys(CLASS_LIKE_KINDS, self._render_class))
        renderers.update(dict.fromkeys(FUNCTION_LIKE_KINDS, self._render_function))
        renderers.update(dict.fromkeys(PROPERTY_LIKE_KINDS, self._render_property))

        renderer = renderers.get(node.kind)
        if renderer is None:
            out.text(f"{node.kind}: {node.name}")
        else:
            renderer(out, node)

        logger.debug("Rendered signature of %r", node)
        return out.tokens

    def render_class(self, node: DocumentationNode) -> list[Token]:
        """Render ``node`` as a class-like declaration.

        Raises
        ------
        UnexpectedKindError
            If ``node`` is not a class, interface, enum, enum entry or object

        """
        out = TokenStream()
        self._render_class(out, node)
        return out.tokens

    def render_function(self, node: DocumentationNode) -> list[Token]:
        """Render ``node`` as a function or constructor.

        Raises
        ------
        UnexpectedKindError
            If ``node`` is not function-like

        """
        out = TokenStream()
        self._render_function(out, node)
        return out.tokens

    def render_property(self, node: DocumentationNode) -> list[Token]:
        """Render ``node`` as a property.

        Raises
        ------
        UnexpectedKindError
            If ``node`` is not a property

        """
        out = TokenStream()
        self._render_property(out, node)
        return out.tokens

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _render_list(
        self,
        out: TokenStream,
        nodes: Sequence[DocumentationNode],
        render_item: Callable[[DocumentationNode], None],
        separator: str | None = None,
    ) -> None:
        if not nodes:
            return
        separator = self.options.list_separator if separator is None else separator
        render_item(nodes[0])
        for node in nodes[1:]:
            out.symbol(separator)
            render_item(node)

    @staticmethod
    def _render_linked(
        out: TokenStream, node: DocumentationNode, body: Callable[[DocumentationNode], None]
    ) -> None:
        target = node.link
        if target is None:
            body(node)
            return
        with out.link(target):
            body(node)

    # ------------------------------------------------------------------
    # Node kinds
    # ------------------------------------------------------------------

    def _render_package(self, out: TokenStream, node: DocumentationNode) -> None:
        out.keyword("package")
        out.text(" ")
        out.identifier(node.name)

    def _render_type(self, out: TokenStream, node: DocumentationNode, depth: int = 0) -> None:
        if depth > self.options.max_depth:
            raise SignatureDepthError(self.options.max_depth, node.name)

        arguments = node.details_of(NodeKind.Type)
        form = recognize_function_type(node.name, len(arguments))

        def render_argument(argument: DocumentationNode) -> None:
            self._render_type(out, argument, depth + 1)

        if form is FunctionTypeForm.FUNCTION:
            out.symbol("(")
            self._render_list(out, arguments[:-1], render_argument)
            self._render_arrow(out)
            render_argument(arguments[-1])
            return

        if form is FunctionTypeForm.EXTENSION_FUNCTION:
            render_argument(arguments[0])
            out.symbol(".")
            out.symbol("(")
            self._render_list(out, arguments[1:-1], render_argument)
            self._render_arrow(out)
            render_argument(arguments[-1])
            return

        self._render_linked(out, node, lambda linked: out.identifier(linked.name))
        if arguments:
            out.symbol("<")
            self._render_list(out, arguments, render_argument)
            out.symbol(">")

    @staticmethod
    def _render_arrow(out: TokenStream) -> None:
        out.symbol(")")
        out.text(" ")
        out.symbol("->")
        out.text(" ")

    def _render_modifier(self, out: TokenStream, node: DocumentationNode) -> None:
        if node.name in self.options.elided_modifiers:
            return
        out.keyword(node.name)
        out.text(" ")

    def _render_type_parameter(self, out: TokenStream, node: DocumentationNode) -> None:
        out.identifier(node.name)
        bounds = node.details_of(NodeKind.UpperBound)
        if bounds:
            out.symbol(" : ")
            self._render_list(out, bounds, lambda bound: self._render_type(out, bound))

    def _render_parameter(self, out: TokenStream, node: DocumentationNode) -> None:
        out.identifier(node.name)
        out.symbol(": ")
        self._render_type(out, node.detail(NodeKind.Type))

    def _render_type_parameters_for_node(self, out: TokenStream, node: DocumentationNode, closing: str = "> ") -> None:
        type_parameters = node.details_of(NodeKind.TypeParameter)
        if type_parameters:
            out.symbol("<")
            self._render_list(out, type_parameters, lambda parameter: self._render_type(out, parameter))
            out.symbol(closing)

    def _render_supertypes_for_node(self, out: TokenStream, node: DocumentationNode) -> None:
        supertypes = node.details_of(NodeKind.Supertype)
        if supertypes:
            out.symbol(" : ")
            self._render_list(out, supertypes, lambda supertype: self._render_type(out, supertype))

    def _render_modifiers_for_node(self, out: TokenStream, node: DocumentationNode) -> None:
        for modifier in node.details_of(NodeKind.Modifier):
            # Interfaces are abstract by definition
            if node.kind is NodeKind.Interface and modifier.name == INTERFACE_IMPLICIT_MODIFIER:
                continue
            self._render_modifier(out, modifier)

    def _render_receiver_for_node(self, out: TokenStream, node: DocumentationNode) -> None:
        receivers = node.details_of(NodeKind.Receiver)
        if len(receivers) == 1:
            self._render_type(out, receivers[0].detail(NodeKind.Type))
            out.symbol(".")

    def _render_class(self, out: TokenStream, node: DocumentationNode) -> None:
        keyword = CLASS_KEYWORDS.get(node.kind)
        if keyword is None:
            raise UnexpectedKindError(node.kind, node.name, "class-like")

        self._render_modifiers_for_node(out, node)
        out.keyword(keyword)
        out.identifier(node.name)
        self._render_type_parameters_for_node(out, node, closing=">")
        self._render_supertypes_for_node(out, node)

    def _render_function(self, out: TokenStream, node: DocumentationNode) -> None:
        if node.kind not in FUNCTION_LIKE_KINDS:
            raise UnexpectedKindError(node.kind, node.name, "function-like")
        is_constructor = node.kind is NodeKind.Constructor

        self._render_modifiers_for_node(out, node)
        if is_constructor:
            out.identifier(self.render_name(node))
        else:
            out.keyword("fun ")
        self._render_type_parameters_for_node(out, node)
        self._render_receiver_for_node(out, node)

        if not is_constructor:
            out.identifier(node.name)

        out.symbol("(")
        self._render_list(
            out,
            node.details_of(NodeKind.Parameter),
            lambda parameter: self._render_parameter(out, parameter),
        )
        out.symbol(")")
        if not is_constructor:
            out.symbol(": ")
            self._render_type(out, node.detail(NodeKind.Type))

    def _render_property(self, out: TokenStream, node: DocumentationNode) -> None:
        if node.kind not in PROPERTY_LIKE_KINDS:
            raise UnexpectedKindError(node.kind, node.name, "property")

        self._render_modifiers_for_node(out, node)
        out.keyword("val ")
        self._render_type_parameters_for_node(out, node)
        self._render_receiver_for_node(out, node)
        out.identifier(node.name)
        out.symbol(": ")
        self._render_type(out, node.detail(NodeKind.Type))
