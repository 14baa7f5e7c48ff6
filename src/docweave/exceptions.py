#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docweave library.

This module defines specialized exception classes for the error conditions
that can occur while building content trees and rendering signatures.

Exception Hierarchy
-------------------
- DocweaveError (base exception)

  - ValidationError (parameter/option validation)

  - ModelError (declaration model violates the renderer's input contract)
    - UnexpectedKindError (renderer dispatched on the wrong node kind)
    - DetailLookupError (single-detail query found zero or many matches)

  - ContentBuildError (markup tree builder internal consistency)
    - StackBalanceError (node stack underflow or unbalanced at the end)
    - MarkupDepthError (markup nested deeper than the configured limit)

  - SignatureDepthError (type arguments nested deeper than the configured limit)

Unresolved code references are not errors; they are rendered as placeholder
text in the content tree.

"""

from typing import Any


class DocweaveError(Exception):
    """Base exception class for all docweave-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DocweaveError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ModelError(DocweaveError):
    """Exception raised when a declaration node breaks the renderer's contract.

    These errors mean the upstream model builder produced an inconsistent
    tree. They abort rendering of the declaration and are never recovered.

    Parameters
    ----------
    message : str
        Description of the inconsistency
    kind : Any, optional
        Kind of the offending declaration node
    name : str, optional
        Name of the offending declaration node

    """

    def __init__(
        self,
        message: str,
        kind: Any = None,
        name: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the model error with the offending node's identity."""
        super().__init__(message, original_error=original_error)
        self.kind = kind
        self.name = name


class UnexpectedKindError(ModelError):
    """Exception raised when a renderer is invoked on a node of the wrong kind.

    Parameters
    ----------
    kind : Any
        Kind of the offending node
    name : str
        Name of the offending node
    expected : str
        Description of what the renderer accepts (e.g., "class-like")

    """

    def __init__(self, kind: Any, name: str, expected: str):
        """Initialize with a message naming the node and the expected category."""
        kind_name = getattr(kind, "name", kind)
        message = f"Node {kind_name} '{name}' is not a {expected} declaration"
        super().__init__(message, kind=kind, name=name)
        self.expected = expected


class DetailLookupError(ModelError):
    """Exception raised when a single-detail query does not match exactly one node.

    Parameters
    ----------
    kind : Any
        Kind of the node being queried
    name : str
        Name of the node being queried
    expected_kind : Any
        The detail kind that was requested
    count : int
        Number of matching details found

    """

    def __init__(self, kind: Any, name: str, expected_kind: Any, count: int):
        """Initialize with a message describing the failed query."""
        kind_name = getattr(kind, "name", kind)
        expected_name = getattr(expected_kind, "name", expected_kind)
        message = f"Node {kind_name} '{name}' has {count} details of kind {expected_name}, expected exactly one"
        super().__init__(message, kind=kind, name=name)
        self.expected_kind = expected_kind
        self.count = count


class ContentBuildError(DocweaveError):
    """Exception raised when the content builder loses internal consistency."""

    pass


class StackBalanceError(ContentBuildError):
    """Exception raised when the builder's node stack is unbalanced.

    Parameters
    ----------
    message : str
        Description of the imbalance
    depth : int, optional
        Stack depth observed when the imbalance was detected

    """

    def __init__(self, message: str, depth: int | None = None):
        """Initialize with the observed stack depth."""
        super().__init__(message)
        self.depth = depth


class MarkupDepthError(ContentBuildError):
    """Exception raised when markup nesting exceeds the configured limit.

    Parameters
    ----------
    max_depth : int
        The configured limit that was exceeded

    """

    def __init__(self, max_depth: int):
        """Initialize with the configured limit."""
        super().__init__(f"Markup nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth


class SignatureDepthError(DocweaveError):
    """Exception raised when type nesting in a signature exceeds the configured limit.

    Parameters
    ----------
    max_depth : int
        The configured limit that was exceeded
    name : str, optional
        Name of the type being rendered when the limit was hit

    """

    def __init__(self, max_depth: int, name: str | None = None):
        """Initialize with the configured limit and the offending type name."""
        suffix = f" while rendering '{name}'" if name else ""
        super().__init__(f"Type nesting exceeds maximum depth of {max_depth}{suffix}")
        self.max_depth = max_depth
        self.name = name
