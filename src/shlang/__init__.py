"""
Shlang: markup front end with byte-exact source spans

Turns Shlang markup (elements, properties, text and nested comments) into a
typed AST. Every token and node carries the UTF-8 byte span it came from, so
errors can point at the exact offending characters. Zero runtime
dependencies.

Quick Start:
    >>> from shlang import parse
    >>> nodes = parse('<a href="x" disabled>hi</a>')
    >>> element = nodes[0].item
    >>> element.name, element.props["href"].item
    ('a', String(value='x'))

    >>> # Lex without parsing
    >>> from shlang import tokenize
    >>> [t.kind.name for t in tokenize("<img/>")]
    ['LESSER', 'WORD', 'RCLOSER']

    >>> # Register sources so errors can be rendered against them
    >>> from shlang import Compiler
    >>> compiler = Compiler(silent=True)
    >>> nodes = compiler.parse("<p>hi</p>", name="page.shl")

Errors:
    >>> from shlang import ParseError
    >>> try:
    ...     parse("<a></b>")
    ... except ParseError as err:
    ...     print(err.summary)
    Unmatched tag: <a> is closed by </b>
"""

from shlang.compiler import Compiler
from shlang.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from shlang.diagnostics import Label, Report, build_report, format_report
from shlang.errors import (
    CompileError,
    FileStoreError,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
    ShlangError,
)
from shlang.filestore import FileStore
from shlang.lexer import Lexer, tokenize
from shlang.location import FileID, Span, Spanned
from shlang.nodes import (
    Bool,
    Comment,
    Element,
    ElementValue,
    Float,
    Int,
    Node,
    Null,
    String,
    Text,
    Value,
)
from shlang.parser import Parser, parse
from shlang.serialization import from_json, to_dict, to_json
from shlang.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "tokenize",
    "Compiler",
    "FileStore",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    # Spans
    "FileID",
    "Span",
    "Spanned",
    # Nodes
    "Node",
    "Comment",
    "Element",
    "Text",
    # Property values
    "Value",
    "Bool",
    "ElementValue",
    "Float",
    "Int",
    "Null",
    "String",
    # Errors
    "ShlangError",
    "CompileError",
    "FileStoreError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    # Diagnostics
    "Label",
    "Report",
    "build_report",
    "format_report",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Serialization
    "from_json",
    "to_dict",
    "to_json",
]
