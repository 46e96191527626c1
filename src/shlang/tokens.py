"""Token and TokenType definitions for the Shlang lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a kind, a source span, and for literals the decoded value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from shlang.location import Span


class TokenType(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Literals (STR, INT, FLOAT, WORD and keyword literals)
    - Tag punctuation (<, >, </, />, </>)
    - Single-character punctuation
    - Formatting (SPACE, NEWLINE, COMMENT)
    - Stream end (EOF)

    """

    # Literals
    STR = auto()  # "..." or '...'
    INT = auto()  # 1_000, -5
    FLOAT = auto()  # 3.14
    WORD = auto()  # tag names, property names, plain words

    # Keyword literals
    TRUE = auto()
    FALSE = auto()
    NULL = auto()

    # Tag punctuation
    LESSER = auto()  # <
    GREATER = auto()  # >
    LCLOSER = auto()  # </
    RCLOSER = auto()  # />
    END = auto()  # </>

    # Single-character punctuation
    EQUAL = auto()  # =
    DOT = auto()  # .
    COMMA = auto()  # ,
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    PERCENT = auto()  # %
    COLON = auto()  # :
    DOLLAR = auto()  # $
    AT = auto()  # @
    PIPE = auto()  # |
    AMPERSAND = auto()  # &
    QUESTION = auto()  # ?
    BANG = auto()  # !
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Formatting
    SPACE = auto()  # space, tab, lone \r
    NEWLINE = auto()  # \n or \r\n
    COMMENT = auto()  # <* ... *>

    # Stream end
    EOF = auto()


# Formatting tokens the parser skips when looking for structure
INSIGNIFICANT = frozenset({TokenType.COMMENT, TokenType.SPACE, TokenType.NEWLINE})

KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
}


def map_keyword(text: str) -> TokenType | None:
    """Return the keyword kind for text, or None for ordinary words."""
    return KEYWORDS.get(text)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token type
        span: Byte range of the token in its source file
        value: Decoded payload for literals: ``str`` for STR, ``int`` for
            INT, ``float`` for FLOAT; None for every other kind

    """

    kind: TokenType
    span: Span
    value: str | int | float | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.kind.name}, {self.span.start}:{self.span.end})"
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.span.start}:{self.span.end})"

    def is_kind(self, kind: TokenType) -> bool:
        return self.kind is kind

    def isnt(self, kind: TokenType) -> bool:
        return self.kind is not kind

    def is_any(self, *kinds: TokenType) -> bool:
        return self.kind in kinds

    @property
    def is_significant(self) -> bool:
        """False for whitespace, newlines and comments."""
        return self.kind not in INSIGNIFICANT

    @property
    def exists(self) -> bool:
        """False only for the EOF token."""
        return self.kind is not TokenType.EOF
