"""docweave - documentation rendering core for source-code documentation generators.

docweave turns two inputs into format-independent output that HTML, Markdown
or plain-text writers can consume:

- documentation comments, parsed into a markup tree, become a *content tree*
  of paragraphs, lists, emphasis, code, sections and links;
- declaration models (classes, functions, properties, type parameters)
  become a flat stream of *signature tokens* (keyword, identifier, symbol,
  text, link).

Key Features
------------
- mistune-based markdown adapter with ``$section:`` and ``[short link]``
  recognition
- Stack-based markup-to-content builder that tolerates unknown markup
- Optional code-reference directives resolved against host scopes
- Kotlin signature renderer with lambda and extension-lambda type support
- JSON serialization for content trees and signature tokens

Examples
--------
    >>> from docweave import KotlinLanguageService, build_content, parse_markdown, tokens_to_text
    >>> content = build_content(parse_markdown("Returns the *first* element."))
    >>> tokens_to_text(KotlinLanguageService().render(function_node))
    'fun first(): T'

"""

from __future__ import annotations

from docweave.content import (
    BlockCode,
    Code,
    Content,
    ContentNode,
    ContentVisitor,
    Emphasis,
    ExternalLink,
    List,
    ListItem,
    Paragraph,
    Section,
    Strong,
    Text,
    content_to_dict,
    content_to_json,
)
from docweave.exceptions import (
    ContentBuildError,
    DetailLookupError,
    DocweaveError,
    MarkupDepthError,
    ModelError,
    SignatureDepthError,
    StackBalanceError,
    UnexpectedKindError,
    ValidationError,
)
from docweave.logging_utils import configure_logging
from docweave.markup import ContentBuilder, MarkupNode, MarkupType, build_content, parse_markdown
from docweave.model import DocumentationNode, NodeKind
from docweave.options import ContentBuilderOptions, MarkdownParserOptions, SignatureOptions
from docweave.resolver import MemoryScope, ResolutionContext, ResolutionScope, code_reference, resolve_in_scope
from docweave.signatures import KotlinLanguageService, LanguageService, TokenStream, tokens_to_dict, tokens_to_text

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "configure_logging",
    # Content
    "BlockCode",
    "Code",
    "Content",
    "ContentNode",
    "ContentVisitor",
    "Emphasis",
    "ExternalLink",
    "List",
    "ListItem",
    "Paragraph",
    "Section",
    "Strong",
    "Text",
    "content_to_dict",
    "content_to_json",
    # Markup
    "ContentBuilder",
    "MarkupNode",
    "MarkupType",
    "build_content",
    "parse_markdown",
    # Model
    "DocumentationNode",
    "NodeKind",
    # Resolution
    "MemoryScope",
    "ResolutionContext",
    "ResolutionScope",
    "code_reference",
    "resolve_in_scope",
    # Signatures
    "KotlinLanguageService",
    "LanguageService",
    "TokenStream",
    "tokens_to_dict",
    "tokens_to_text",
    # Options
    "ContentBuilderOptions",
    "MarkdownParserOptions",
    "SignatureOptions",
    # Exceptions
    "ContentBuildError",
    "DetailLookupError",
    "DocweaveError",
    "MarkupDepthError",
    "ModelError",
    "SignatureDepthError",
    "StackBalanceError",
    "UnexpectedKindError",
    "ValidationError",
]
