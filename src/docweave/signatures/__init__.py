#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/signatures/__init__.py
"""Declaration signature rendering.

- tokens: signature token types and the token stream
- function_types: recognition of synthetic ``FunctionN`` types
- base: language service base class
- kotlin: Kotlin signature renderer
"""

from __future__ import annotations

from docweave.signatures.base import LanguageService
from docweave.signatures.function_types import (
    FunctionTypeForm,
    is_extension_function_type,
    is_function_type,
    recognize_function_type,
)
from docweave.signatures.kotlin import KotlinLanguageService
from docweave.signatures.tokens import (
    Identifier,
    Keyword,
    Link,
    PlainText,
    Symbol,
    Token,
    TokenStream,
    tokens_to_dict,
    tokens_to_text,
)

__all__ = [
    "FunctionTypeForm",
    "Identifier",
    "Keyword",
    "KotlinLanguageService",
    "LanguageService",
    "Link",
    "PlainText",
    "Symbol",
    "Token",
    "TokenStream",
    "is_extension_function_type",
    "is_function_type",
    "recognize_function_type",
    "tokens_to_dict",
    "tokens_to_text",
]
