"""Pytest configuration and shared fixtures for the docweave test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import declaration, modifier, parameter, type_ref

from docweave.model import DocumentationNode, NodeKind
from docweave.signatures import KotlinLanguageService

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture
def service() -> KotlinLanguageService:
    """Provide a Kotlin language service with default options."""
    return KotlinLanguageService()


@pytest.fixture
def string_class() -> DocumentationNode:
    """Provide a class node that type references can link to."""
    return DocumentationNode("String", NodeKind.Class)


@pytest.fixture
def sample_function(string_class: DocumentationNode) -> DocumentationNode:
    """Provide ``public fun <T> join(items: List<T>, separator: String): String``.

    Returns
    -------
    DocumentationNode
        Function node with modifiers, a type parameter, two parameters and a
        linked return type.

    """
    return declaration(
        "join",
        NodeKind.Function,
        modifier("public"),
        modifier("final"),
        declaration("T", NodeKind.TypeParameter),
        parameter("items", type_ref("List", type_ref("T"))),
        parameter("separator", type_ref("String", link=string_class)),
        type_ref("String", link=string_class),
    )
