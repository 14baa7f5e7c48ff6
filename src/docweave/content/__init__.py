#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/content/__init__.py
"""Format-independent content tree.

- nodes: content node classes
- visitors: visitor base class for writers
- serialization: dictionary and JSON conversion
"""

from __future__ import annotations

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
from docweave.content.serialization import content_from_dict, content_to_dict, content_to_json, json_to_content
from docweave.content.visitors import ContentVisitor, SectionCollector

__all__ = [
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
    "SectionCollector",
    "Strong",
    "Text",
    "content_from_dict",
    "content_to_dict",
    "content_to_json",
    "json_to_content",
]
