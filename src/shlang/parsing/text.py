"""Text and comment parsing for Shlang."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shlang.location import Spanned
from shlang.nodes import Comment, Text
from shlang.tokens import TokenType

if TYPE_CHECKING:
    from shlang.lexer import Lexer
    from shlang.location import Span
    from shlang.nodes import Node
    from shlang.tokens import Token

# Tokens that end a run of normal text
TEXT_DELIMITERS = (
    TokenType.LESSER,
    TokenType.END,
    TokenType.LCLOSER,
    TokenType.COMMENT,
    TokenType.EOF,
)


class TextParsingMixin:
    """Mixin for text runs, raw-tag content and comments.

    Required Host Attributes:
        - _lexer: Lexer
        - _last_span: Span

    """

    _lexer: Lexer
    _last_span: Span

    def _peek(self) -> Token:
        raise NotImplementedError

    def _next(self) -> Token:
        raise NotImplementedError

    def _text(self, span: Span) -> str:
        raise NotImplementedError

    def _parse_text(self) -> Spanned[Node]:
        """Concatenate the source of consecutive non-delimiter tokens.

        The result is stripped of surrounding whitespace; its span covers
        every consumed token, whitespace included. Must be entered on a
        token that is not a delimiter.
        """
        first = self._peek()
        last = first
        parts: list[str] = []
        while not self._peek().is_any(*TEXT_DELIMITERS):
            last = self._next()
            parts.append(self._text(last.span))
        return Spanned(Text("".join(parts).strip()), first.span + last.span)

    def _parse_raw_content(self) -> list[Spanned[Node]]:
        """Read raw-tag content verbatim, up to the next ``</``.

        Returns:
            A single Text child, or no children for empty content
        """
        raw = self._lexer.read_raw_text()
        if not raw.item:
            return []
        self._last_span = raw.span
        return [raw.with_item(Text(raw.item))]

    def _parse_comment(self) -> Spanned[Node]:
        token = self._next()
        return Spanned(Comment(self._text(token.span)), token.span)
