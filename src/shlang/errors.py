"""Exception classes for Shlang.

Provides the error taxonomy shared by the lexer and the parser. Both raise
subclasses of CompileError, a single closed family: every error has a kind
from a fixed enum, a primary span, and the payload its kind needs. Any of
them can be turned into a structured Report (see shlang.diagnostics).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from shlang.location import Span, Spanned

if TYPE_CHECKING:
    from shlang.diagnostics import Report
    from shlang.tokens import TokenType


class ShlangError(Exception):
    """Base exception for all Shlang errors.

    Subclass this for specific error categories.
    """

    pass


class FileStoreError(ShlangError):
    """Raised when a file id has no source registered in a FileStore."""

    def __init__(self, file_id: int) -> None:
        self.file_id = file_id
        super().__init__(f"Invalid file id {file_id}")


class LexErrorKind(Enum):
    """Lexical error kinds."""

    UNEXPECTED_CHAR = "unexpected-char"
    INVALID_IDENT = "invalid-ident"
    UNTERMINATED_STR = "unterminated-str"
    UNTERMINATED_COMMENT = "unterminated-comment"
    INVALID_NUMBER = "invalid-number"
    INVALID_ESCAPE = "invalid-escape"
    UNEXPECTED_STREAM_END = "unexpected-stream-end"


class ParseErrorKind(Enum):
    """Syntactic error kinds."""

    INVALID_TOKEN = "invalid-token"
    UNEXPECTED_TOKEN = "unexpected-token"
    UNMATCHED_TAG = "unmatched-tag"
    UNEXPECTED_STREAM_END = "unexpected-stream-end"
    UNSPECIFIED = "unspecified"


class CompileError(ShlangError):
    """Error raised while lexing or parsing a source file.

    Attributes:
        kind: LexErrorKind or ParseErrorKind
        span: Primary span of the error, anchored in the offending bytes
    """

    kind: LexErrorKind | ParseErrorKind

    def __init__(self, kind: LexErrorKind | ParseErrorKind, span: Span) -> None:
        self.kind = kind
        self.span = span
        super().__init__(f"{span.file_id}:{span.start}..{span.end}: {self.summary}")

    @property
    def summary(self) -> str:
        """One-line description of the error, without location."""
        raise NotImplementedError

    @property
    def spanned(self) -> Spanned[LexErrorKind | ParseErrorKind]:
        """The error kind wrapped in its primary span."""
        return Spanned(self.kind, self.span)

    def report(self) -> Report:
        """Build the structured diagnostic for this error."""
        from shlang.diagnostics import build_report

        return build_report(self)


class LexError(CompileError):
    """Error during tokenization.

    Attributes:
        char: Offending character for UNEXPECTED_CHAR, the quote character
            for UNTERMINATED_STR, otherwise None
    """

    kind: LexErrorKind

    def __init__(self, kind: LexErrorKind, span: Span, *, char: str | None = None) -> None:
        self.char = char
        super().__init__(kind, span)

    @property
    def summary(self) -> str:
        match self.kind:
            case LexErrorKind.UNEXPECTED_CHAR:
                return f"Unexpected char {self.char!r}"
            case LexErrorKind.INVALID_IDENT:
                return "Invalid identifier"
            case LexErrorKind.UNTERMINATED_STR:
                return "Unterminated string"
            case LexErrorKind.UNTERMINATED_COMMENT:
                return "Unterminated comment"
            case LexErrorKind.INVALID_NUMBER:
                return "Invalid number"
            case LexErrorKind.INVALID_ESCAPE:
                return "Invalid escape sequence"
            case LexErrorKind.UNEXPECTED_STREAM_END:
                return "Unexpected end of character stream"


class ParseError(CompileError):
    """Error during parsing.

    Attributes:
        expected: Required token kind (INVALID_TOKEN)
        got: Token kind actually found (INVALID_TOKEN, UNEXPECTED_TOKEN)
        start_tag: Opening tag name and the span of that name (UNMATCHED_TAG)
        end_tag: Closing tag name and the span of that name (UNMATCHED_TAG)
        message: Free-form description (UNSPECIFIED)
    """

    kind: ParseErrorKind

    def __init__(
        self,
        kind: ParseErrorKind,
        span: Span,
        *,
        expected: TokenType | None = None,
        got: TokenType | None = None,
        start_tag: Spanned[str] | None = None,
        end_tag: Spanned[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.expected = expected
        self.got = got
        self.start_tag = start_tag
        self.end_tag = end_tag
        self.message = message
        super().__init__(kind, span)

    @property
    def summary(self) -> str:
        match self.kind:
            case ParseErrorKind.INVALID_TOKEN:
                return f"Invalid token {_kind_name(self.got)}"
            case ParseErrorKind.UNEXPECTED_TOKEN:
                return f"Unexpected token {_kind_name(self.got)}"
            case ParseErrorKind.UNMATCHED_TAG:
                start = self.start_tag.item if self.start_tag else "?"
                end = self.end_tag.item if self.end_tag else "?"
                return f"Unmatched tag: <{start}> is closed by </{end}>"
            case ParseErrorKind.UNEXPECTED_STREAM_END:
                return "Unexpected end of token stream"
            case ParseErrorKind.UNSPECIFIED:
                return self.message or "Parse error"


def _kind_name(kind: TokenType | None) -> str:
    return kind.name if kind is not None else "?"


__all__ = [
    "CompileError",
    "FileStoreError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    "ShlangError",
]
