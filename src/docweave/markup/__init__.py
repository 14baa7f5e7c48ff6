#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/markup/__init__.py
"""Markup parse trees and their conversion to content trees.

- nodes: markup node type tags and tree node class
- markdown: mistune-based markdown adapter producing markup trees
- builder: stack-based markup-to-content converter
"""

from __future__ import annotations

from docweave.markup.builder import ContentBuilder, build_content
from docweave.markup.markdown import MarkdownToMarkupConverter, lex_text, parse_markdown
from docweave.markup.nodes import MarkupNode, MarkupType

__all__ = [
    "ContentBuilder",
    "MarkdownToMarkupConverter",
    "MarkupNode",
    "MarkupType",
    "build_content",
    "lex_text",
    "parse_markdown",
]
