"""Pull tokenizer for Shlang markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, lookahead buffer, dispatch)
├── charsets.py          # Punctuation table, digit/quote sets, escapes
└── scanners/            # Multi-character token scanners
    ├── literals.py      # Strings, numbers, identifiers
    └── tags.py          # <, </, </>, />, nested <* *> comments

Usage:
    >>> from shlang.lexer import Lexer
    >>> lexer = Lexer("<img/>")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(LESSER, 0:1)
Token(WORD, 1:4)
Token(RCLOSER, 4:6)
Token(EOF, 6:6)

"""

from shlang.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
