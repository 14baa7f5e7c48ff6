#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for Kotlin signature rendering.

Test Coverage:
- Packages, class-like declarations, functions, constructors and properties
- Function and extension-function types
- Modifier elision and interface handling
- Links around referenced types
- Contract violations in the declaration model
"""

import pytest
from utils import declaration, modifier, parameter, receiver, type_parameter, type_ref

from docweave.exceptions import DetailLookupError, ModelError, SignatureDepthError, UnexpectedKindError
from docweave.model import DocumentationNode, NodeKind
from docweave.options import SignatureOptions
from docweave.signatures import (
    Identifier,
    Keyword,
    KotlinLanguageService,
    Link,
    PlainText,
    Symbol,
    tokens_to_text,
)


def render_text(service, node) -> str:
    return tokens_to_text(service.render(node))


@pytest.mark.unit
class TestPackagesAndClasses:
    """Test package and class-like declarations."""

    def test_package(self, service) -> None:
        """Test the package header tokens."""
        node = DocumentationNode("kotlin.collections", NodeKind.Package)
        assert service.render(node) == [Keyword("package"), PlainText(" "), Identifier("kotlin.collections")]

    def test_simple_class(self, service) -> None:
        """Test a class without type parameters or supertypes."""
        node = declaration("Box", NodeKind.Class)
        assert service.render(node) == [Keyword("class "), Identifier("Box")]

    def test_class_with_type_parameters_and_supertypes(self, service) -> None:
        """Test that type parameters and supertypes follow the name."""
        supertype = type_ref("Comparable", type_ref("Box", type_ref("T")))
        supertype.kind = NodeKind.Supertype
        node = declaration("Box", NodeKind.Class, type_parameter("T"), supertype)
        assert render_text(service, node) == "class Box<T> : Comparable<Box<T>>"

    def test_class_with_several_supertypes(self, service) -> None:
        """Test the comma-joined supertype list."""
        first = type_ref("Any")
        first.kind = NodeKind.Supertype
        second = type_ref("Serializable")
        second.kind = NodeKind.Supertype
        node = declaration("Point", NodeKind.Class, first, second)
        assert render_text(service, node) == "class Point : Any, Serializable"

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (NodeKind.Interface, "trait Named"),
            (NodeKind.Enum, "enum class Named"),
            (NodeKind.EnumItem, "enum val Named"),
            (NodeKind.Object, "object Named"),
        ],
    )
    def test_class_keywords(self, service, kind, expected) -> None:
        """Test the keyword chosen for each class-like kind."""
        assert render_text(service, declaration("Named", kind)) == expected

    def test_abstract_class_keeps_modifier(self, service) -> None:
        """Test that abstract is shown on classes."""
        node = declaration("Shape", NodeKind.Class, modifier("abstract"))
        assert render_text(service, node) == "abstract class Shape"

    def test_interface_drops_abstract(self, service) -> None:
        """Test that abstract is implied for interfaces."""
        node = declaration("Shape", NodeKind.Interface, modifier("public"), modifier("abstract"))
        assert service.render(node) == [
            Keyword("public"),
            PlainText(" "),
            Keyword("trait "),
            Identifier("Shape"),
        ]

    def test_elided_modifiers(self, service) -> None:
        """Test that final and internal are never shown."""
        node = declaration("Box", NodeKind.Class, modifier("final"), modifier("internal"), modifier("open"))
        assert render_text(service, node) == "open class Box"


@pytest.mark.unit
class TestFunctions:
    """Test function and constructor signatures."""

    def test_sample_function_text(self, service, sample_function) -> None:
        """Test the full plain-text signature."""
        assert render_text(service, sample_function) == "public fun <T> join(items: List<T>, separator: String): String"

    def test_sample_function_tokens(self, service, sample_function, string_class) -> None:
        """Test the exact token sequence, including links."""
        string_link = Link(string_class, (Identifier("String"),))
        assert service.render(sample_function) == [
            Keyword("public"),
            PlainText(" "),
            Keyword("fun "),
            Symbol("<"),
            Identifier("T"),
            Symbol("> "),
            Identifier("join"),
            Symbol("("),
            Identifier("items"),
            Symbol(": "),
            Identifier("List"),
            Symbol("<"),
            Identifier("T"),
            Symbol(">"),
            Symbol(", "),
            Identifier("separator"),
            Symbol(": "),
            string_link,
            Symbol(")"),
            Symbol(": "),
            string_link,
        ]

    def test_no_parameters(self, service) -> None:
        """Test an empty parameter list."""
        node = declaration("length", NodeKind.Function, type_ref("Int"))
        assert render_text(service, node) == "fun length(): Int"

    def test_extension_function(self, service) -> None:
        """Test that a single receiver is rendered before the name."""
        node = declaration(
            "firstOr",
            NodeKind.Function,
            type_parameter("T"),
            receiver(type_ref("List", type_ref("T"))),
            parameter("default", type_ref("T")),
            type_ref("T"),
        )
        assert render_text(service, node) == "fun <T> List<T>.firstOr(default: T): T"

    def test_ambiguous_receivers_are_skipped(self, service) -> None:
        """Test that a function with two receivers renders none."""
        node = declaration(
            "shout",
            NodeKind.Function,
            receiver(type_ref("String")),
            receiver(type_ref("CharSequence")),
            type_ref("Unit"),
        )
        assert render_text(service, node) == "fun shout(): Unit"

    def test_class_object_function(self, service) -> None:
        """Test that companion functions render like functions."""
        node = declaration("create", NodeKind.ClassObjectFunction, type_ref("Box"))
        assert render_text(service, node) == "fun create(): Box"

    def test_constructor_uses_owner_name(self, service) -> None:
        """Test that constructors show the class name and no return type."""
        owner = DocumentationNode("Box", NodeKind.Class)
        constructor = declaration("<init>", NodeKind.Constructor, modifier("public"), parameter("value", type_ref("T")))
        owner.append(constructor, "member")
        assert render_text(service, constructor) == "public Box(value: T)"

    def test_constructor_without_owner(self, service) -> None:
        """Test that an orphan constructor is a model error."""
        constructor = declaration("<init>", NodeKind.Constructor)
        with pytest.raises(ModelError):
            service.render(constructor)

    def test_missing_return_type(self, service) -> None:
        """Test that a function needs exactly one Type detail."""
        node = declaration("broken", NodeKind.Function)
        with pytest.raises(DetailLookupError) as exc_info:
            service.render(node)
        assert exc_info.value.count == 0
        assert exc_info.value.expected_kind is NodeKind.Type

    def test_custom_separator(self) -> None:
        """Test that the list separator comes from the options."""
        service = KotlinLanguageService(SignatureOptions(list_separator=","))
        node = declaration(
            "pair", NodeKind.Function, parameter("a", type_ref("A")), parameter("b", type_ref("B")), type_ref("Unit")
        )
        assert render_text(service, node) == "fun pair(a: A,b: B): Unit"


@pytest.mark.unit
class TestProperties:
    """Test property signatures."""

    def test_property(self, service) -> None:
        """Test a plain property."""
        node = declaration("size", NodeKind.Property, type_ref("Int"))
        assert service.render(node) == [Keyword("val "), Identifier("size"), Symbol(": "), Identifier("Int")]

    def test_extension_property(self, service) -> None:
        """Test a generic extension property."""
        node = declaration(
            "lastIndex",
            NodeKind.Property,
            type_parameter("T"),
            receiver(type_ref("List", type_ref("T"))),
            type_ref("Int"),
        )
        assert render_text(service, node) == "val <T> List<T>.lastIndex: Int"

    def test_class_object_property(self, service) -> None:
        """Test that companion properties render like properties."""
        node = declaration("EMPTY", NodeKind.ClassObjectProperty, modifier("public"), type_ref("Box"))
        assert render_text(service, node) == "public val EMPTY: Box"


@pytest.mark.unit
class TestTypes:
    """Test type references, including function types."""

    def test_function_type(self, service) -> None:
        """Test Function2<A, B, C> as a lambda type."""
        node = type_ref("Function2", type_ref("A"), type_ref("B"), type_ref("C"))
        assert service.render(node) == [
            Symbol("("),
            Identifier("A"),
            Symbol(", "),
            Identifier("B"),
            Symbol(")"),
            PlainText(" "),
            Symbol("->"),
            PlainText(" "),
            Identifier("C"),
        ]

    def test_function_type_without_parameters(self, service) -> None:
        """Test Function0<R>."""
        assert render_text(service, type_ref("Function0", type_ref("R"))) == "() -> R"

    def test_extension_function_type(self, service) -> None:
        """Test ExtensionFunction1<R, A, B> as an extension lambda type."""
        node = type_ref("ExtensionFunction1", type_ref("R"), type_ref("A"), type_ref("B"))
        assert render_text(service, node) == "R.(A) -> B"

    def test_nested_function_type(self, service) -> None:
        """Test function types inside type arguments."""
        lambda_type = type_ref("Function1", type_ref("List", type_ref("Int")), type_ref("Unit"))
        node = type_ref("Array", lambda_type)
        assert render_text(service, node) == "Array<(List<Int>) -> Unit>"

    def test_wrong_arity_is_ordinary_type(self, service) -> None:
        """Test that a FunctionN name with the wrong argument count is generic."""
        node = type_ref("Function2", type_ref("A"), type_ref("B"))
        assert render_text(service, node) == "Function2<A, B>"

    def test_linked_type(self, service, string_class) -> None:
        """Test that a type with a link is wrapped in a Link token."""
        node = type_ref("String", link=string_class)
        tokens = service.render(node)
        assert len(tokens) == 1
        assert isinstance(tokens[0], Link)
        assert tokens[0].target is string_class
        assert tokens[0].text == "String"

    def test_type_arguments_outside_link(self, service, string_class) -> None:
        """Test that only the type name is linked, not its arguments."""
        node = type_ref("Array", type_ref("Int"), link=string_class)
        tokens = service.render(node)
        assert tokens[0] == Link(string_class, (Identifier("Array"),))
        assert tokens[1:] == [Symbol("<"), Identifier("Int"), Symbol(">")]

    def test_type_parameter_with_bounds(self, service) -> None:
        """Test that upper bounds follow a colon."""
        node = type_parameter("T", type_ref("Comparable", type_ref("T")), type_ref("CharSequence"))
        assert render_text(service, node) == "T : Comparable<T>, CharSequence"

    def test_bounds_omitted_in_declaration(self, service) -> None:
        """Test that a declaration's type parameter list shows names only."""
        node = declaration(
            "max",
            NodeKind.Function,
            type_parameter("T", type_ref("Comparable", type_ref("T"))),
            parameter("a", type_ref("T")),
            type_ref("T"),
        )
        assert render_text(service, node) == "fun <T> max(a: T): T"

    def test_linked_type_parameter_in_declaration(self, service, string_class) -> None:
        """Test that a type parameter with a link target is wrapped in a Link token."""
        parameter_node = type_parameter("T")
        parameter_node.append(string_class, "link")
        node = declaration("identity", NodeKind.Function, parameter_node, parameter("a", type_ref("T")), type_ref("T"))
        tokens = service.render(node)
        assert tokens[1:4] == [Symbol("<"), Link(string_class, (Identifier("T"),)), Symbol("> ")]

    def test_depth_limit(self) -> None:
        """Test that runaway nesting raises instead of recursing forever."""
        service = KotlinLanguageService(SignatureOptions(max_depth=8))
        node = type_ref("Leaf")
        for _ in range(20):
            node = type_ref("Box", node)
        with pytest.raises(SignatureDepthError) as exc_info:
            service.render(node)
        assert exc_info.value.max_depth == 8


@pytest.mark.unit
class TestModifiersAndFallback:
    """Test modifier nodes and kinds without a dedicated renderer."""

    def test_visible_modifier(self, service) -> None:
        """Test a displayed modifier."""
        assert service.render(modifier("open")) == [Keyword("open"), PlainText(" ")]

    def test_elided_modifier(self, service) -> None:
        """Test that an elided modifier renders nothing."""
        assert service.render(modifier("final")) == []

    def test_custom_elided_modifiers(self) -> None:
        """Test that the elided set comes from the options."""
        service = KotlinLanguageService(SignatureOptions(elided_modifiers=["public"]))
        assert service.render(modifier("public")) == []
        assert service.render(modifier("final")) == [Keyword("final"), PlainText(" ")]

    @pytest.mark.parametrize("kind", [NodeKind.Parameter, NodeKind.Annotation, NodeKind.Module])
    def test_fallback_text(self, service, kind) -> None:
        """Test the kind: name text for unsupported kinds."""
        node = DocumentationNode("x", kind)
        assert service.render(node) == [PlainText(f"{kind.value}: x")]


@pytest.mark.unit
class TestContractViolations:
    """Test renderers invoked with nodes of the wrong kind."""

    def test_render_class_rejects_function(self, service, sample_function) -> None:
        """Test that render_class refuses a function."""
        with pytest.raises(UnexpectedKindError) as exc_info:
            service.render_class(sample_function)
        assert exc_info.value.kind is NodeKind.Function
        assert "class-like" in str(exc_info.value)

    def test_render_function_rejects_property(self, service) -> None:
        """Test that render_function refuses a property."""
        node = declaration("size", NodeKind.Property, type_ref("Int"))
        with pytest.raises(UnexpectedKindError):
            service.render_function(node)

    def test_render_property_rejects_class(self, service) -> None:
        """Test that render_property refuses a class."""
        with pytest.raises(UnexpectedKindError):
            service.render_property(declaration("Box", NodeKind.Class))

    def test_public_entry_points_match_render(self, service, sample_function) -> None:
        """Test that the direct entry points agree with render()."""
        node = declaration("size", NodeKind.Property, type_ref("Int"))
        assert service.render_property(node) == service.render(node)
        assert service.render_function(sample_function) == service.render(sample_function)


@pytest.mark.unit
class TestRenderName:
    """Test display names."""

    def test_plain_name(self, service, sample_function) -> None:
        """Test that ordinary nodes use their own name."""
        assert service.render_name(sample_function) == "join"

    def test_constructor_name(self, service) -> None:
        """Test that constructors use their owner's name."""
        owner = DocumentationNode("Box", NodeKind.Class)
        constructor = DocumentationNode("<init>", NodeKind.Constructor, owner=owner)
        assert service.render_name(constructor) == "Box"


@pytest.mark.unit
def test_rendering_is_idempotent(service, sample_function) -> None:
    """Test that rendering the same node twice gives the same tokens."""
    assert service.render(sample_function) == service.render(sample_function)
