#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/signatures/tokens.py
"""Signature tokens and the append-only stream that collects them.

A rendered signature is a flat sequence of typed tokens. Writers decide how
each kind looks: keywords in bold, identifiers in code font, links as
anchors. Only :class:`Link` nests, wrapping the tokens of a hyperlinked
identifier.

Examples
--------
    >>> stream = TokenStream()
    >>> stream.keyword("val ")
    >>> stream.identifier("size")
    >>> stream.symbol(": ")
    >>> with stream.link(int_node):
    ...     stream.identifier("Int")
    >>> tokens_to_text(stream.tokens)
    'val size: Int'

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Union


@dataclass(frozen=True)
class Keyword:
    """Language keyword, including any trailing space (``"fun "``)."""

    text: str


@dataclass(frozen=True)
class Identifier:
    """Declared or referenced name."""

    text: str


@dataclass(frozen=True)
class Symbol:
    """Punctuation such as ``(``, ``": "`` or ``->``."""

    text: str


@dataclass(frozen=True)
class PlainText:
    """Unstyled text, usually a single space."""

    text: str


@dataclass(frozen=True)
class Link:
    """Tokens hyperlinked to a declaration.

    Parameters
    ----------
    target : Any
        Declaration node the link points at. Compared by identity.
    children : tuple of Token
        Tokens forming the link body

    """

    target: Any = field(compare=False)
    children: tuple[Token, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return self.target is other.target and self.children == other.children

    def __hash__(self) -> int:
        return hash((id(self.target), self.children))

    @property
    def text(self) -> str:
        """Plain text of the link body."""
        return tokens_to_text(self.children)


Token = Union[Keyword, Identifier, Symbol, PlainText, Link]


class TokenStream:
    """Append-only builder for a sequence of signature tokens."""

    def __init__(self) -> None:
        """Initialize an empty stream."""
        self._frames: list[list[Token]] = [[]]

    @property
    def tokens(self) -> list[Token]:
        """Tokens emitted so far at the top level."""
        return list(self._frames[0])

    def append(self, token: Token) -> None:
        self._frames[-1].append(token)

    def keyword(self, text: str) -> None:
        self.append(Keyword(text))

    def identifier(self, text: str) -> None:
        self.append(Identifier(text))

    def symbol(self, text: str) -> None:
        self.append(Symbol(text))

    def text(self, text: str) -> None:
        self.append(PlainText(text))

    @contextmanager
    def link(self, target: Any) -> Iterator[None]:
        """Collect the tokens emitted inside the block into a Link to ``target``."""
        self._frames.append([])
        try:
            yield
        finally:
            children = self._frames.pop()
        self.append(Link(target, tuple(children)))


def tokens_to_text(tokens: Iterable[Token]) -> str:
    """Flatten tokens into the plain-text form of the signature.

    Examples
    --------
        >>> tokens_to_text([Keyword("fun "), Identifier("f"), Symbol("()")])
        'fun f()'

    """
    return "".join(token.text for token in tokens)


def _default_target_name(target: Any) -> str:
    return str(getattr(target, "name", target))


def tokens_to_dict(
    tokens: Iterable[Token],
    target_name: Callable[[Any], str] = _default_target_name,
) -> list[dict[str, Any]]:
    """Serialize tokens to JSON-compatible dictionaries.

    Parameters
    ----------
    tokens : iterable of Token
        Tokens to serialize
    target_name : callable, optional
        Turns a link target into a string. Defaults to the target's ``name``.

    Returns
    -------
    list of dict
        One dict per token with a ``kind`` key; links carry ``target`` and
        nested ``children``

    """
    result: list[dict[str, Any]] = []
    for token in tokens:
        if isinstance(token, Link):
            result.append(
                {
                    "kind": "link",
                    "target": target_name(token.target),
                    "children": tokens_to_dict(token.children, target_name),
                }
            )
        else:
            result.append({"kind": _TOKEN_KINDS[type(token)], "text": token.text})
    return result


_TOKEN_KINDS: dict[type, str] = {
    Keyword: "keyword",
    Identifier: "identifier",
    Symbol: "symbol",
    PlainText: "text",
}
