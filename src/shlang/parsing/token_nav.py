"""Token navigation utilities for the Shlang parser.

Provides mixin for token stream navigation and the expect/consume helpers
that turn a mismatched token into a ParseError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shlang.errors import ParseError, ParseErrorKind
from shlang.tokens import Token, TokenType
from shlang.utils.text import slice_bytes

if TYPE_CHECKING:
    from shlang.lexer import Lexer
    from shlang.location import Span


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer
        - _data: bytes (UTF-8 source, for slicing spans)
        - _last_span: Span (span of the last consumed token)

    """

    _lexer: Lexer
    _data: bytes
    _last_span: Span

    def _peek(self) -> Token:
        """Next token, not consumed."""
        return self._lexer.peek()

    def _peek_next(self) -> Token:
        """Token after the next one, not consumed."""
        return self._lexer.peek_next()

    def _next(self) -> Token:
        """Consume the next token, remembering its span."""
        token = self._lexer.next()
        if token.exists:
            self._last_span = token.span
        return token

    def _peek_some(self) -> Token:
        """Peek a token that must exist.

        Raises:
            ParseError: UNEXPECTED_STREAM_END at end of input
        """
        token = self._peek()
        if not token.exists:
            raise ParseError(ParseErrorKind.UNEXPECTED_STREAM_END, token.span)
        return token

    def _skip_insignificant(self) -> None:
        """Consume whitespace, newline and comment tokens."""
        while not self._peek().is_significant:
            self._next()

    def _expect(self, expected: TokenType) -> Token:
        """Peek a token that must be of the expected kind.

        Raises:
            ParseError: UNEXPECTED_STREAM_END at end of input, INVALID_TOKEN
                when the kind differs
        """
        token = self._peek_some()
        if token.isnt(expected):
            raise ParseError(
                ParseErrorKind.INVALID_TOKEN,
                token.span,
                expected=expected,
                got=token.kind,
            )
        return token

    def _consume(self, expected: TokenType) -> Token:
        """Consume a token that must be of the expected kind."""
        token = self._expect(expected)
        self._next()
        return token

    def _text(self, span: Span) -> str:
        """Source text covered by span."""
        return slice_bytes(self._data, span.start, span.end)
