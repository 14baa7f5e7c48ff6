#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/markup/markdown.py
"""Markdown to markup tree adapter.

This module parses documentation comments with mistune in AST mode and
reshapes mistune's token dictionaries into the :class:`MarkupNode` tree that
the content builder consumes.

Besides the structural mapping, the adapter re-lexes runs of text into the
fine-grained tokens the builder distinguishes (``TEXT``, ``WHITESPACE``,
``COLON``, ``DOUBLE_QUOTE``, ``LT``, ``GT``) and recognizes two comment
conventions that plain markdown lacks:

- a paragraph starting with ``$label:`` or ``${label}:`` becomes a labelled
  ``SECTION``;
- a bare ``[label]`` in running text becomes a ``SHORT_REFERENCE_LINK``.

"""

from __future__ import annotations

import logging
import re
from typing import Any

from docweave.constants import INLINE_TOKEN_PATTERN, SECTION_LABEL_PATTERN, SHORT_REFERENCE_PATTERN
from docweave.markup.nodes import MarkupNode, MarkupType
from docweave.options import MarkdownParserOptions

logger = logging.getLogger(__name__)

_INLINE_TOKEN_RE = re.compile(INLINE_TOKEN_PATTERN)
_SECTION_LABEL_RE = re.compile(SECTION_LABEL_PATTERN)
_SHORT_REFERENCE_RE = re.compile(SHORT_REFERENCE_PATTERN)

_SINGLE_CHAR_TOKENS = {
    "\n": MarkupType.EOL,
    ":": MarkupType.COLON,
    '"': MarkupType.DOUBLE_QUOTE,
    "<": MarkupType.LT,
    ">": MarkupType.GT,
}

# Token types whose raw text joins the surrounding text run
_TEXT_LIKE_TOKENS = {"text", "inline_html"}

_LINE_BREAK_TOKENS = {"softbreak", "linebreak"}

_CONTAINER_TOKENS = {
    "emphasis": MarkupType.EMPH,
    "strong": MarkupType.STRONG,
    "list_item": MarkupType.LIST_ITEM,
    "block_text": MarkupType.PARAGRAPH,
    "heading": MarkupType.ATX_HEADER,
    "block_quote": MarkupType.BLOCK_QUOTE,
}


def lex_text(raw: str) -> list[MarkupNode]:
    """Split a run of plain text into markup tokens.

    Parameters
    ----------
    raw : str
        Text to split

    Returns
    -------
    list of MarkupNode
        TEXT, WHITESPACE, EOL, COLON, DOUBLE_QUOTE, LT and GT tokens in order

    Examples
    --------
        >>> [node.type.value for node in lex_text('a: "b"')]
        ['TEXT', 'COLON', 'WHITESPACE', 'DOUBLE_QUOTE', 'TEXT', 'DOUBLE_QUOTE']

    """
    nodes: list[MarkupNode] = []
    for match in _INLINE_TOKEN_RE.finditer(raw):
        value = match.group(0)
        token_type = _SINGLE_CHAR_TOKENS.get(value)
        if token_type is None:
            token_type = MarkupType.WHITESPACE if value.isspace() else MarkupType.TEXT
        nodes.append(MarkupNode(token_type, value))
    return nodes


class MarkdownToMarkupConverter:
    """Convert markdown text into a markup tree using mistune.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Recognition options for sections and short reference links

    Examples
    --------
        >>> converter = MarkdownToMarkupConverter()
        >>> tree = converter.parse("$summary: Returns *nothing*")
        >>> tree.children[0].type
        <MarkupType.SECTION: 'SECTION'>

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the converter with optional recognition options."""
        self.options = options or MarkdownParserOptions()

    def parse(self, text: str) -> MarkupNode:
        """Parse markdown text into a ``MARKDOWN_FILE`` rooted markup tree.

        Parameters
        ----------
        text : str
            Markdown source of a documentation comment

        Returns
        -------
        MarkupNode
            Root of the markup tree

        """
        import mistune

        markdown = mistune.create_markdown(renderer=None)
        tokens, _state = markdown.parse(text)
        if not isinstance(tokens, list):
            tokens = []

        root = MarkupNode(MarkupType.MARKDOWN_FILE, children=self._convert_sequence(tokens))
        logger.debug("Parsed markdown into %d top-level markup nodes", len(root.children))
        return root

    # ------------------------------------------------------------------
    # Token sequences
    # ------------------------------------------------------------------

    def _convert_sequence(self, tokens: list[dict[str, Any]]) -> list[MarkupNode]:
        """Convert sibling tokens, merging adjacent text-like tokens into one run."""
        nodes: list[MarkupNode] = []
        pending_text: list[str] = []

        def flush() -> None:
            if pending_text:
                nodes.extend(self._convert_text_run("".join(pending_text)))
                pending_text.clear()

        for token in tokens:
            if not isinstance(token, dict):
                continue
            if token.get("type") in _TEXT_LIKE_TOKENS:
                pending_text.append(token.get("raw", ""))
                continue
            flush()
            node = self._convert_token(token)
            if node is not None:
                nodes.append(node)
        flush()
        return nodes

    def _convert_text_run(self, raw: str) -> list[MarkupNode]:
        if not self.options.recognize_short_links:
            return lex_text(raw)

        nodes: list[MarkupNode] = []
        position = 0
        for match in _SHORT_REFERENCE_RE.finditer(raw):
            nodes.extend(lex_text(raw[position : match.start()]))
            label = MarkupNode(MarkupType.LINK_LABEL, children=[MarkupNode(MarkupType.TEXT, match.group(1))])
            nodes.append(MarkupNode(MarkupType.SHORT_REFERENCE_LINK, match.group(0), children=[label]))
            position = match.end()
        nodes.extend(lex_text(raw[position:]))
        return nodes

    # ------------------------------------------------------------------
    # Single tokens
    # ------------------------------------------------------------------

    def _convert_token(self, token: dict[str, Any]) -> MarkupNode | None:
        token_type = token.get("type", "")
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        if token_type == "blank_line":
            return None
        if token_type == "paragraph":
            return self._convert_paragraph(children)
        if token_type == "list":
            attrs = token.get("attrs", {})
            ordered = attrs.get("ordered", False) if isinstance(attrs, dict) else False
            list_type = MarkupType.ORDERED_LIST if ordered else MarkupType.UNORDERED_LIST
            return MarkupNode(list_type, children=self._convert_sequence(children))
        if token_type == "codespan":
            return MarkupNode(
                MarkupType.CODE_SPAN,
                children=[
                    MarkupNode(MarkupType.BACKTICK, "`"),
                    MarkupNode(MarkupType.TEXT, token.get("raw", "")),
                    MarkupNode(MarkupType.BACKTICK, "`"),
                ],
            )
        if token_type == "block_code":
            return MarkupNode(MarkupType.CODE_BLOCK, children=[MarkupNode(MarkupType.TEXT, token.get("raw", ""))])
        if token_type == "link":
            return self._convert_link(token, children)
        if token_type in _LINE_BREAK_TOKENS:
            return MarkupNode(MarkupType.EOL, "\n")

        container_type = _CONTAINER_TOKENS.get(token_type)
        if container_type is not None:
            return MarkupNode(container_type, children=self._convert_sequence(children))

        logger.debug("Unrecognized markdown token '%s', keeping its children", token_type)
        return MarkupNode(MarkupType.UNKNOWN, children=self._convert_sequence(children))

    def _convert_paragraph(self, children: list[dict[str, Any]]) -> MarkupNode:
        if self.options.recognize_sections:
            leading: list[str] = []
            for token in children:
                if not isinstance(token, dict) or token.get("type") != "text":
                    break
                leading.append(token.get("raw", ""))
            prefix = "".join(leading)
            match = _SECTION_LABEL_RE.match(prefix)
            if match is not None:
                return self._convert_section(match, prefix, children[len(leading) :])
        return MarkupNode(MarkupType.PARAGRAPH, children=self._convert_sequence(children))

    def _convert_section(self, match: re.Match[str], prefix: str, rest: list[dict[str, Any]]) -> MarkupNode:
        remainder = prefix[match.end() :].lstrip()
        if not remainder:
            # Body starts on the line after the label
            while rest and isinstance(rest[0], dict) and rest[0].get("type") in _LINE_BREAK_TOKENS:
                rest = rest[1:]
        body_tokens = ([{"type": "text", "raw": remainder}] if remainder else []) + rest

        section = MarkupNode(
            MarkupType.SECTION,
            children=[
                MarkupNode(MarkupType.SECTION_ID, f"${match.group(1)}"),
                MarkupNode(MarkupType.COLON, match.group(2)),
            ],
        )
        body = self._convert_sequence(body_tokens)
        if body:
            section.append(MarkupNode(MarkupType.PARAGRAPH, children=body))
        return section

    def _convert_link(self, token: dict[str, Any], children: list[dict[str, Any]]) -> MarkupNode:
        attrs = token.get("attrs", {})
        url = attrs.get("url", "") if isinstance(attrs, dict) else ""

        label = _plain_text(children)
        link_text = MarkupNode(MarkupType.LINK_TEXT)
        if label:
            link_text.append(MarkupNode(MarkupType.TEXT, label))

        link = MarkupNode(MarkupType.INLINE_LINK, children=[link_text])
        if url:
            link.append(MarkupNode(MarkupType.LINK_DESTINATION, url))
        return link


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    parts: list[str] = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if "raw" in token:
            parts.append(str(token["raw"]))
        elif isinstance(token.get("children"), list):
            parts.append(_plain_text(token["children"]))
    return "".join(parts)


def parse_markdown(text: str, options: MarkdownParserOptions | None = None) -> MarkupNode:
    """Parse markdown text into a markup tree.

    Parameters
    ----------
    text : str
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Recognition options

    Returns
    -------
    MarkupNode
        Root ``MARKDOWN_FILE`` node

    """
    return MarkdownToMarkupConverter(options).parse(text)
