"""Literal scanner mixin: strings, numbers and identifiers."""

from __future__ import annotations

from shlang.errors import LexError, LexErrorKind
from shlang.lexer.charsets import DIGITS, ESCAPES, INT_MAX, INT_MIN, is_ident_char
from shlang.tokens import Token, TokenType, map_keyword


class LiteralScannerMixin:
    """Mixin providing literal scanning.

    Each scanner is entered with the first character already consumed and
    ``start`` holding its byte offset.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _offset: int

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

    def _scan_string(self, quote: str, start: int) -> Token:
        """Scan a quoted string, decoding escapes into the token value.

        The token span covers both quotes.
        """
        buffer: list[str] = []
        while True:
            char = self._advance()
            if not char:
                raise self._error(LexErrorKind.UNTERMINATED_STR, start, start + 1, char=quote)
            if char == quote:
                break
            if char != "\\":
                buffer.append(char)
                continue

            escape_start = self._offset - 1
            escaped = self._advance()
            if not escaped:
                raise self._error(LexErrorKind.UNEXPECTED_STREAM_END, self._offset, self._offset)
            decoded = ESCAPES.get(escaped)
            if decoded is None:
                raise self._error(LexErrorKind.INVALID_ESCAPE, escape_start)
            buffer.append(decoded)

        return self._make_token(TokenType.STR, start, "".join(buffer))

    def _scan_number(self, first: str, start: int) -> Token:
        """Scan an INT or FLOAT literal.

        ``first`` is a digit or a leading minus. Underscores are separators
        and are dropped before conversion. A dot must be followed by a digit
        and may appear once.
        """
        chars = [first]
        is_float = False
        while True:
            char = self._peek_char()
            if char in DIGITS or char == "_":
                chars.append(self._advance())
            elif char == ".":
                if is_float or self._peek_char(1) not in DIGITS:
                    self._advance()
                    raise self._error(LexErrorKind.INVALID_NUMBER, start)
                is_float = True
                chars.append(self._advance())
            else:
                break

        text = "".join(chars).replace("_", "")
        if is_float:
            return self._make_token(TokenType.FLOAT, start, float(text))

        value = int(text)
        if not INT_MIN <= value <= INT_MAX:
            raise self._error(LexErrorKind.INVALID_NUMBER, start)
        return self._make_token(TokenType.INT, start, value)

    def _scan_identifier(self, start: int) -> Token:
        """Scan a WORD or keyword literal."""
        begin = self._pos - 1
        while is_ident_char(self._peek_char()):
            self._advance()

        text = self._source[begin : self._pos]
        if not text or not is_ident_char(text[0]):
            raise self._error(LexErrorKind.INVALID_IDENT, start)
        return self._make_token(map_keyword(text) or TokenType.WORD, start)
