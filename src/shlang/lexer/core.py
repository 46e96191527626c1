"""Pull tokenizer with two-token lookahead.

The lexer never materializes the token list itself: callers pull tokens one
at a time with next(), and peek()/peek_next() fill a small lookahead buffer
that next() drains first. Spans are UTF-8 byte offsets; the cursor walks
characters and tracks the byte offset alongside.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from shlang.errors import LexError, LexErrorKind
from shlang.lexer.charsets import DIGITS, PUNCTUATION, QUOTES, SPACES
from shlang.lexer.scanners import LiteralScannerMixin, TagScannerMixin
from shlang.location import FileID, Span, Spanned
from shlang.tokens import Token, TokenType
from shlang.utils.text import utf8_len

# Lookahead buffer capacity (peek + peek_next)
LOOKAHEAD = 2


class Lexer(
    LiteralScannerMixin,
    TagScannerMixin,
):
    """Pull tokenizer for Shlang markup.

    Usage:
            >>> lexer = Lexer('<a href="x">hi</a>')
            >>> lexer.next()
            Token(LESSER, 0:1)
            >>> lexer.peek()
            Token(WORD, 1:2)
            >>> [t.kind.name for t in Lexer("<b/>").tokenize()]
            ['LESSER', 'WORD', 'RCLOSER', 'EOF']

    Lookahead:
        peek() and peek_next() scan ahead into a buffer of at most two
        tokens together with the cursor state each was scanned from. A scan
        that raises restores the cursor, so a failed peek leaves no partial
        state behind.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_byte_len",  # Length of source in UTF-8 bytes
        "_file_id",
        "_pos",  # Character index
        "_offset",  # Byte offset of _pos
        "_lookahead",  # (token, pos, offset) scanned ahead of the cursor
    )

    def __init__(self, source: str, file_id: FileID = 0) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            file_id: Handle of the source in a FileStore, stamped on every span
        """
        self._source = source
        self._source_len = len(source)
        self._byte_len = len(source.encode("utf-8"))
        self._file_id = file_id
        self._pos = 0
        self._offset = 0
        self._lookahead: deque[tuple[Token, int, int]] = deque()

    @property
    def file_id(self) -> FileID:
        return self._file_id

    # =========================================================================
    # Public token stream
    # =========================================================================

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        return self._fill(1)

    def peek_next(self) -> Token:
        """Return the token after the next one without consuming either."""
        return self._fill(2)

    def next(self) -> Token:
        """Consume and return the next token.

        After the end of input this keeps returning an EOF token with a
        degenerate span at the end of the buffer.

        Raises:
            LexError: If the next token is malformed
        """
        if self._lookahead:
            return self._lookahead.popleft()[0]
        return self._scan_token()

    def tokenize(self) -> Iterator[Token]:
        """Yield every token up to and including EOF.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next()
            yield token
            if token.kind is TokenType.EOF:
                return

    def read_raw_text(self) -> Spanned[str]:
        """Read verbatim text from the character cursor up to ``</``.

        Used for raw-tag content, which is never tokenized. Any buffered
        lookahead is dropped and the cursor rewound to where it started.

        Returns:
            The text, possibly empty, and the byte span it covers
        """
        if self._lookahead:
            _, self._pos, self._offset = self._lookahead[0]
            self._lookahead.clear()

        begin = self._pos
        start = self._offset
        while self._pos < self._source_len and not self._source.startswith("</", self._pos):
            self._advance()
        return Spanned(self._source[begin : self._pos], Span(self._file_id, start, self._offset))

    # =========================================================================
    # Lookahead buffer
    # =========================================================================

    def _fill(self, count: int) -> Token:
        """Scan ahead until the buffer holds count tokens; return the last."""
        while len(self._lookahead) < count:
            pos, offset = self._pos, self._offset
            try:
                token = self._scan_token()
            except LexError:
                self._pos, self._offset = pos, offset
                raise
            self._lookahead.append((token, pos, offset))
        return self._lookahead[count - 1][0]

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek_char(self, ahead: int = 0) -> str:
        """Character ahead of the cursor, or empty string past the end."""
        pos = self._pos + ahead
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Consume one character and return it (empty string at the end)."""
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._pos += 1
        self._offset += utf8_len(char)
        return char

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(
        self, kind: TokenType, start: int, value: str | int | float | None = None
    ) -> Token:
        """Token spanning from start to the current byte offset."""
        return Token(kind, Span(self._file_id, start, self._offset), value)

    def _error(
        self,
        kind: LexErrorKind,
        start: int,
        end: int | None = None,
        *,
        char: str | None = None,
    ) -> LexError:
        """LexError spanning start..end (default: current byte offset)."""
        span = Span(self._file_id, start, self._offset if end is None else end)
        return LexError(kind, span, char=char)

    def _scan_token(self) -> Token:
        """Scan one token from the cursor."""
        start = self._offset
        char = self._advance()
        if not char:
            return Token(TokenType.EOF, Span(self._file_id, self._byte_len, self._byte_len))

        kind = PUNCTUATION.get(char)
        if kind is not None:
            return self._make_token(kind, start)
        if char in QUOTES:
            return self._scan_string(char, start)
        if char == "<":
            return self._scan_lesser(start)
        if char == "/":
            return self._scan_slash(start)
        if char == "-":
            if self._peek_char() in DIGITS:
                return self._scan_number(char, start)
            return self._make_token(TokenType.MINUS, start)
        if char == "\n":
            return self._make_token(TokenType.NEWLINE, start)
        if char == "\r":
            if self._peek_char() == "\n":
                self._advance()
                return self._make_token(TokenType.NEWLINE, start)
            return self._make_token(TokenType.SPACE, start)
        if char in SPACES:
            return self._make_token(TokenType.SPACE, start)
        if char in DIGITS:
            return self._scan_number(char, start)
        if char.isalnum() or char == "_":
            return self._scan_identifier(start)
        raise self._error(LexErrorKind.UNEXPECTED_CHAR, start, char=char)


def tokenize(source: str, file_id: FileID = 0) -> list[Token]:
    """Collect the raw token stream of source, EOF excluded.

    Whitespace, newline and comment tokens are kept so that tooling can
    inspect the lexical structure independently of parsing.

    Raises:
        LexError: On the first malformed token
    """
    return [token for token in Lexer(source, file_id).tokenize() if token.exists]
