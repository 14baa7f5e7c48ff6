#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/resolver.py
"""Dotted-name resolution for code-reference directives.

A documentation comment can ask for the source of another declaration, for
example ``code("samples.basicUsage")``. This module resolves such a dotted
name against the scope of the documented declaration, falling back to the
root scope, and produces the block of code (or a placeholder) that the
content builder inserts into the tree.

Scopes are supplied by the host through the :class:`ResolutionScope` and
:class:`ResolutionContext` protocols; resolution only reads from them.
:class:`MemoryScope` is a dictionary-backed scope for hosts that build their
symbol tables in Python and for tests.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

from docweave.constants import SOURCE_NOT_FOUND_PREFIX, UNRESOLVED_PREFIX
from docweave.content.nodes import BlockCode, Text

logger = logging.getLogger(__name__)


class ResolutionScope(Protocol):
    """Lookup interface of one lexical scope."""

    def get_local_variable(self, name: str) -> Optional[Any]: ...

    def get_properties(self, name: str) -> Sequence[Any]: ...

    def get_functions(self, name: str) -> Sequence[Any]: ...

    def get_classifier(self, name: str) -> Optional[Any]: ...

    def get_package(self, name: str) -> Optional[Any]: ...


class ResolutionContext(Protocol):
    """Host services needed to resolve code references."""

    def resolution_scope(self, symbol: Any) -> ResolutionScope:
        """Return the scope introduced by ``symbol`` (its members, locals, etc.)."""
        ...

    def root_scope(self) -> ResolutionScope:
        """Return the global scope used when the local lookup fails."""
        ...

    def source_text(self, symbol: Any) -> Optional[str]:
        """Return the declaration source of ``symbol``, or None if unavailable."""
        ...


@dataclass
class MemoryScope:
    """A scope backed by dictionaries.

    Parameters
    ----------
    local_variables : dict
        Local variables by name
    properties : dict
        Properties by name; each value is a list of overloads
    functions : dict
        Functions by name; each value is a list of overloads
    classifiers : dict
        Classes, interfaces and other types by name
    packages : dict
        Sub-packages by name

    """

    local_variables: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, list[Any]] = field(default_factory=dict)
    functions: dict[str, list[Any]] = field(default_factory=dict)
    classifiers: dict[str, Any] = field(default_factory=dict)
    packages: dict[str, Any] = field(default_factory=dict)

    def get_local_variable(self, name: str) -> Optional[Any]:
        return self.local_variables.get(name)

    def get_properties(self, name: str) -> Sequence[Any]:
        return self.properties.get(name, [])

    def get_functions(self, name: str) -> Sequence[Any]:
        return self.functions.get(name, [])

    def get_classifier(self, name: str) -> Optional[Any]:
        return self.classifiers.get(name)

    def get_package(self, name: str) -> Optional[Any]:
        return self.packages.get(name)


def _first(candidates: Sequence[Any]) -> Optional[Any]:
    return candidates[0] if candidates else None


def lookup_segment(scope: ResolutionScope, name: str) -> Optional[Any]:
    """Look up one name segment in a single scope.

    Precedence is local variable, property, function, classifier, package.
    The first hit wins.
    """
    lookups: tuple[Callable[[str], Optional[Any]], ...] = (
        scope.get_local_variable,
        lambda segment: _first(scope.get_properties(segment)),
        lambda segment: _first(scope.get_functions(segment)),
        scope.get_classifier,
        scope.get_package,
    )
    for lookup in lookups:
        symbol = lookup(name)
        if symbol is not None:
            return symbol
    return None


def resolve_in_scope(
    dotted_name: str,
    scope: ResolutionScope,
    scope_of: Callable[[Any], ResolutionScope],
) -> Optional[Any]:
    """Resolve a dotted name starting from ``scope``.

    Parameters
    ----------
    dotted_name : str
        Name such as ``"kotlin.collections.listOf"``
    scope : ResolutionScope
        Scope in which the first segment is looked up
    scope_of : callable
        Returns the scope introduced by a resolved symbol; each following
        segment is looked up there

    Returns
    -------
    Any or None
        Symbol matched by the last segment, or None if any segment fails

    """
    current_scope = scope
    symbol: Optional[Any] = None

    for segment in dotted_name.split("."):
        symbol = lookup_segment(current_scope, segment)
        if symbol is None:
            return None
        current_scope = scope_of(symbol)

    return symbol


def resolve_symbol(dotted_name: str, owner: Any, context: ResolutionContext) -> Optional[Any]:
    """Resolve a dotted name in the scope of ``owner``, falling back to the root scope."""
    symbol = resolve_in_scope(dotted_name, context.resolution_scope(owner), context.resolution_scope)
    if symbol is None:
        symbol = resolve_in_scope(dotted_name, context.root_scope(), context.resolution_scope)
    return symbol


def _block_code(text: str) -> BlockCode:
    block = BlockCode()
    block.append(Text(text))
    return block


def code_reference(dotted_name: str, owner: Any, context: ResolutionContext) -> BlockCode:
    """Build the block of code for a code-reference directive.

    Parameters
    ----------
    dotted_name : str
        Name of the referenced declaration
    owner : Any
        Declaration whose documentation contains the directive
    context : ResolutionContext
        Host scope and source services

    Returns
    -------
    BlockCode
        Block holding the referenced source, or an ``Unresolved:`` /
        ``Source not found:`` placeholder

    """
    symbol = resolve_symbol(dotted_name, owner, context)
    if symbol is None:
        logger.warning("Unresolved code reference: %s", dotted_name)
        return _block_code(f"{UNRESOLVED_PREFIX}{dotted_name}")

    source = context.source_text(symbol)
    if source is None:
        logger.warning("Source not found for code reference: %s", dotted_name)
        return _block_code(f"{SOURCE_NOT_FOUND_PREFIX}{dotted_name}")

    return _block_code(source)
