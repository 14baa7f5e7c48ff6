#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/signatures/base.py
"""Base class for language-specific signature renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from docweave.exceptions import ModelError
from docweave.model import DocumentationNode, NodeKind
from docweave.options import SignatureOptions
from docweave.signatures.tokens import Token


class LanguageService(ABC):
    """Render declarations the way a particular language writes them.

    Parameters
    ----------
    options : SignatureOptions or None, default = None
        Rendering configuration

    """

    def __init__(self, options: SignatureOptions | None = None):
        """Initialize the service with optional configuration."""
        self.options = options or SignatureOptions()

    @abstractmethod
    def render(self, node: DocumentationNode) -> list[Token]:
        """Render the signature of ``node`` as a token stream."""
        pass

    def render_name(self, node: DocumentationNode) -> str:
        """Return the name under which ``node`` is displayed.

        Constructors are displayed under the name of the class that owns them.

        Raises
        ------
        ModelError
            If a constructor has no owner

        """
        if node.kind is NodeKind.Constructor:
            if node.owner is None:
                raise ModelError(
                    f"Constructor '{node.name}' has no owning class", kind=node.kind, name=node.name
                )
            return node.owner.name
        return node.name
