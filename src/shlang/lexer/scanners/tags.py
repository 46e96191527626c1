"""Tag punctuation scanner mixin: ``<``, ``</``, ``</>``, ``/>`` and comments."""

from __future__ import annotations

from shlang.errors import LexError, LexErrorKind
from shlang.location import Span
from shlang.tokens import Token, TokenType


class TagScannerMixin:
    """Mixin providing scanning for multi-character tag delimiters.

    Block comments ``<* ... *>`` nest: every ``<*`` inside a comment must be
    balanced by its own ``*>`` before the comment ends.

    """

    # These will be set by the Lexer class
    _file_id: int
    _pos: int
    _offset: int
    _source_len: int

    def _peek_char(self, ahead: int = 0) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _make_token(
        self, kind: TokenType, start: int, value: str | int | float | None = None
    ) -> Token:
        raise NotImplementedError

    def _error(
        self,
        kind: LexErrorKind,
        start: int,
        end: int | None = None,
        *,
        char: str | None = None,
    ) -> LexError:
        raise NotImplementedError

    def _scan_lesser(self, start: int) -> Token:
        """Scan after a consumed ``<``."""
        following = self._peek_char()
        if following == "*":
            return self._scan_comment(start)
        if following == "/":
            self._advance()
            if self._peek_char() == ">":
                self._advance()
                return self._make_token(TokenType.END, start)
            return self._make_token(TokenType.LCLOSER, start)
        return self._make_token(TokenType.LESSER, start)

    def _scan_slash(self, start: int) -> Token:
        """Scan after a consumed ``/``."""
        if self._peek_char() == ">":
            self._advance()
            return self._make_token(TokenType.RCLOSER, start)
        return self._make_token(TokenType.SLASH, start)

    def _scan_comment(self, start: int) -> Token:
        """Scan a nested block comment whose ``<`` is already consumed.

        The token span covers only the content between the outermost
        delimiters.

        Raises:
            LexError: UNTERMINATED_COMMENT on the opening ``<*`` when the
                nesting never returns to zero before end of input.
        """
        self._advance()
        inner_start = self._offset
        depth = 1
        while self._pos < self._source_len:
            char = self._peek_char()
            if char == "<" and self._peek_char(1) == "*":
                depth += 1
            elif char == "*" and self._peek_char(1) == ">":
                depth -= 1
                if depth == 0:
                    inner_end = self._offset
                    self._advance()
                    self._advance()
                    return Token(TokenType.COMMENT, Span(self._file_id, inner_start, inner_end))
            else:
                self._advance()
                continue
            self._advance()
            self._advance()

        raise self._error(LexErrorKind.UNTERMINATED_COMMENT, start, start + 2)
