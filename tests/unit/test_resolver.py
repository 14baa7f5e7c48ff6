#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for dotted-name resolution and code-reference blocks."""

import copy
import logging

import pytest

from docweave.content import BlockCode, Text
from docweave.resolver import MemoryScope, code_reference, lookup_segment, resolve_in_scope, resolve_symbol


class Context:
    def __init__(self, scopes, root_scope, sources=None):
        self.scopes = scopes
        self.root = root_scope
        self.sources = sources or {}

    def resolution_scope(self, symbol):
        return self.scopes.get(symbol, MemoryScope())

    def root_scope(self):
        return self.root

    def source_text(self, symbol):
        return self.sources.get(symbol)


@pytest.mark.unit
class TestLookupPrecedence:
    """Test the per-segment lookup order."""

    def test_local_variable_beats_function(self) -> None:
        """Test that a local variable shadows a function of the same name."""
        scope = MemoryScope(local_variables={"foo": "local foo"}, functions={"foo": ["fun foo"]})
        assert lookup_segment(scope, "foo") == "local foo"

    def test_full_precedence_chain(self) -> None:
        """Test property, function, classifier and package order."""
        scope = MemoryScope(
            properties={"x": ["prop x"]},
            functions={"x": ["fun x"], "y": ["fun y"]},
            classifiers={"x": "class x", "y": "class y", "z": "class z"},
            packages={"x": "pkg x", "y": "pkg y", "z": "pkg z", "w": "pkg w"},
        )
        assert lookup_segment(scope, "x") == "prop x"
        assert lookup_segment(scope, "y") == "fun y"
        assert lookup_segment(scope, "z") == "class z"
        assert lookup_segment(scope, "w") == "pkg w"

    def test_first_overload_wins(self) -> None:
        """Test that the first of several overloads is chosen."""
        scope = MemoryScope(functions={"f": ["f(Int)", "f(String)"]})
        assert lookup_segment(scope, "f") == "f(Int)"

    def test_missing_name(self) -> None:
        """Test that unknown names resolve to None."""
        assert lookup_segment(MemoryScope(), "nope") is None


@pytest.mark.unit
class TestResolveInScope:
    """Test multi-segment resolution."""

    @pytest.fixture
    def scopes(self):
        return {
            "kotlin": MemoryScope(packages={"collections": "kotlin.collections"}),
            "kotlin.collections": MemoryScope(functions={"listOf": ["kotlin.collections.listOf"]}),
        }

    def test_dotted_name(self, scopes) -> None:
        """Test that each segment is looked up in the previous symbol's scope."""
        start = MemoryScope(packages={"kotlin": "kotlin"})
        symbol = resolve_in_scope("kotlin.collections.listOf", start, lambda s: scopes.get(s, MemoryScope()))
        assert symbol == "kotlin.collections.listOf"

    def test_failure_at_middle_segment(self, scopes) -> None:
        """Test that a missing segment fails the whole name."""
        start = MemoryScope(packages={"kotlin": "kotlin"})
        assert resolve_in_scope("kotlin.text.listOf", start, lambda s: scopes.get(s, MemoryScope())) is None

    def test_scope_is_not_mutated(self, scopes) -> None:
        """Test that resolution only reads scopes."""
        start = MemoryScope(packages={"kotlin": "kotlin"})
        before = copy.deepcopy(start)
        resolve_in_scope("kotlin.collections.listOf", start, lambda s: scopes.get(s, MemoryScope()))
        assert start == before

    def test_root_fallback(self) -> None:
        """Test that resolve_symbol falls back to the root scope."""
        context = Context({"owner": MemoryScope()}, MemoryScope(classifiers={"Global": "Global"}))
        assert resolve_symbol("Global", "owner", context) == "Global"

    def test_local_scope_preferred_over_root(self) -> None:
        """Test that the owner's scope is searched first."""
        context = Context(
            {"owner": MemoryScope(classifiers={"Name": "local Name"})},
            MemoryScope(classifiers={"Name": "global Name"}),
        )
        assert resolve_symbol("Name", "owner", context) == "local Name"


@pytest.mark.unit
class TestCodeReference:
    """Test the code-reference block factory."""

    def test_source_block(self) -> None:
        """Test that source text is wrapped in a BlockCode."""
        context = Context({}, MemoryScope(functions={"main": ["main"]}), {"main": "fun main() {}"})
        assert code_reference("main", None, context) == BlockCode(children=[Text("fun main() {}")])

    def test_unresolved_logs_warning(self, caplog) -> None:
        """Test that an unresolved name is reported and rendered as a placeholder."""
        context = Context({}, MemoryScope())
        with caplog.at_level(logging.WARNING, logger="docweave.resolver"):
            block = code_reference("a.b", None, context)
        assert block.text_content() == "Unresolved: a.b"
        assert "a.b" in caplog.text

    def test_source_not_found(self) -> None:
        """Test the placeholder for symbols without source."""
        context = Context({}, MemoryScope(classifiers={"Lib": "Lib"}))
        assert code_reference("Lib", None, context).text_content() == "Source not found: Lib"
