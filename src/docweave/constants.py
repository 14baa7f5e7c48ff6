#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/constants.py
"""Constants and default values for the docweave library.

This module centralizes the literal values used by the content builder and
the signature renderer so that they are discoverable in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Content Builder - Markup traversal settings
3. Signature Rendering - Keywords, separators and elided modifiers
4. Markdown Adapter - Section and link recognition patterns
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DetailRole = Literal["detail", "member", "link"]

# =============================================================================
# Content Builder
# =============================================================================

DEFAULT_MAX_MARKUP_DEPTH = 256
"""Maximum nesting of markup containers before the builder gives up."""

SECTION_SIGIL = "$"
SECTION_OPEN_BRACE = "{"
SECTION_CLOSE_BRACE = "}"

CODE_DIRECTIVE_NAME = "code"

UNRESOLVED_PREFIX = "Unresolved: "
SOURCE_NOT_FOUND_PREFIX = "Source not found: "

# =============================================================================
# Signature Rendering
# =============================================================================

DEFAULT_MAX_SIGNATURE_DEPTH = 64
"""Maximum nesting of type arguments rendered in one signature."""

DEFAULT_LIST_SEPARATOR = ", "

DEFAULT_ELIDED_MODIFIERS: frozenset[str] = frozenset({"final", "internal"})

INTERFACE_IMPLICIT_MODIFIER = "abstract"

FUNCTION_TYPE_PREFIX = "Function"
EXTENSION_FUNCTION_TYPE_PREFIX = "ExtensionFunction"

# =============================================================================
# Markdown Adapter
# =============================================================================

SECTION_LABEL_PATTERN = r"^\$(\{[A-Za-z_][\w-]*\}|[A-Za-z_][\w-]*)(:)"
SHORT_REFERENCE_PATTERN = r"\[([^\[\]\s][^\[\]]*)\]"
INLINE_TOKEN_PATTERN = r'[ \t]+|\n|:|"|<|>|[^ \t\n:"<>]+'
