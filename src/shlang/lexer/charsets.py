"""Character sets and tables for O(1) classification in the lexer.

All sets are frozensets so that membership tests on the empty string (the
lexer's end-of-input sentinel) are always False.
"""

from shlang.tokens import TokenType

# Characters that always form a token on their own
PUNCTUATION: dict[str, TokenType] = {
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "%": TokenType.PERCENT,
    ":": TokenType.COLON,
    "$": TokenType.DOLLAR,
    "@": TokenType.AT,
    "|": TokenType.PIPE,
    "&": TokenType.AMPERSAND,
    "?": TokenType.QUESTION,
    "!": TokenType.BANG,
    "*": TokenType.STAR,
    "=": TokenType.EQUAL,
    ">": TokenType.GREATER,
}

QUOTES: frozenset[str] = frozenset("\"'")

DIGITS: frozenset[str] = frozenset("0123456789")

SPACES: frozenset[str] = frozenset(" \t")

# Backslash escapes accepted inside string literals
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    '"': '"',
    "'": "'",
}

# Integer literals are signed 64-bit
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def is_ident_char(char: str) -> bool:
    """True for characters that may appear in an identifier."""
    return char.isalnum() or char == "_"
