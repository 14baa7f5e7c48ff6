#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/content/serialization.py
"""JSON serialization and deserialization for content trees.

Writers running in another process (or in another language) can consume a
content tree through its dictionary form. Every node becomes a dict with a
``node_type`` key, its own attributes, and a ``children`` list.

Examples
--------
    >>> from docweave.content import Content, Paragraph, Text
    >>> tree = Content(children=[Paragraph(children=[Text("Hello")])])
    >>> content_to_dict(tree)
    {'node_type': 'Content', 'children': [{'node_type': 'Paragraph', 'children': [...]}]}

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
from docweave.exceptions import ValidationError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Attributes serialized for each node type besides children
_NODE_ATTRIBUTES: dict[type[ContentNode], tuple[str, ...]] = {
    Content: (),
    Paragraph: (),
    List: ("ordered",),
    ListItem: (),
    Section: ("label",),
    Emphasis: (),
    Strong: (),
    Code: (),
    ExternalLink: ("destination",),
    Text: ("text",),
    BlockCode: ("text",),
}

_NODE_TYPES: dict[str, type[ContentNode]] = {cls.__name__: cls for cls in _NODE_ATTRIBUTES}


def content_to_dict(node: ContentNode) -> dict[str, Any]:
    """Convert a content node and its subtree to a dictionary.

    Parameters
    ----------
    node : ContentNode
        Root of the subtree to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValidationError
        If the node type is not part of the content vocabulary

    """
    attributes = _NODE_ATTRIBUTES.get(type(node))
    if attributes is None:
        raise ValidationError(
            f"Unknown content node type for serialization: {type(node).__name__}",
            parameter_name="node",
            parameter_value=node,
        )

    result: dict[str, Any] = {"node_type": type(node).__name__}
    for attribute in attributes:
        result[attribute] = getattr(node, attribute)
    result["children"] = [content_to_dict(child) for child in node.children]
    return result


def content_from_dict(data: dict[str, Any], strict_mode: bool = True) -> ContentNode:
    """Reconstruct a content node from its dictionary form.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`content_to_dict`
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log a warning and
        substitute a placeholder Text node.

    Returns
    -------
    ContentNode
        Reconstructed node

    Raises
    ------
    ValidationError
        If the node type is missing or unknown and strict_mode is True

    """
    node_type = data.get("node_type")
    cls = _NODE_TYPES.get(node_type) if isinstance(node_type, str) else None
    if cls is None:
        if strict_mode:
            raise ValidationError(f"Unknown content node type: {node_type}", parameter_name="node_type")
        logger.warning("Unknown content node type '%s', substituting placeholder", node_type)
        return Text(f"[Unknown node type: {node_type}]")

    kwargs = {attribute: data[attribute] for attribute in _NODE_ATTRIBUTES[cls] if attribute in data}
    children = [content_from_dict(child, strict_mode=strict_mode) for child in data.get("children", [])]
    factory: Callable[..., ContentNode] = cls
    return factory(children=children, **kwargs)


def content_to_json(node: ContentNode, indent: int | None = None) -> str:
    """Serialize a content tree to a JSON string with a schema version.

    Parameters
    ----------
    node : ContentNode
        Root of the tree to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    payload = {"schema_version": SCHEMA_VERSION, **content_to_dict(node)}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def json_to_content(json_str: str, strict_mode: bool = True) -> ContentNode:
    """Deserialize a JSON string produced by :func:`content_to_json`.

    Raises
    ------
    ValidationError
        If the JSON is not an object or the schema version is unsupported
    json.JSONDecodeError
        If the string is not valid JSON

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected a JSON object for a content tree, got {type(data).__name__}",
            parameter_name="json_str",
            parameter_value=json_str,
        )
    version = data.pop("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported content schema version: {version}",
            parameter_name="schema_version",
            parameter_value=version,
        )
    return content_from_dict(data, strict_mode=strict_mode)
