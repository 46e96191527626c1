"""Recursive descent parser producing a spanned AST.

Pulls tokens from a Lexer on demand and builds frozen AST nodes, each
wrapped in a Spanned carrying its source range.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: token stream traversal, expect/consume
- `TextParsingMixin`: text runs, raw-tag content, comments
- `ElementParsingMixin`: elements, close tags, properties

Errors are fail-fast: the first LexError or ParseError aborts the parse and
propagates to the caller. There is no partial AST.

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local)
- Independent parsers may run concurrently on different sources

"""

from __future__ import annotations

from collections.abc import Iterable

from shlang.config import get_parse_config
from shlang.errors import ParseError, ParseErrorKind
from shlang.lexer import Lexer
from shlang.location import FileID, Span, Spanned
from shlang.nodes import Node, Text
from shlang.parsing import (
    ElementParsingMixin,
    TextParsingMixin,
    TokenNavigationMixin,
)
from shlang.tokens import TokenType
from shlang.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    TextParsingMixin,
    ElementParsingMixin,
):
    """Recursive descent parser for Shlang markup.

    Grammar:
        content := expr*       (until '</', '</>' or end of input)
        expr    := element | comment | text

    Usage:
            >>> nodes = Parser('<a href="x">hi</a>').parse()
            >>> nodes[0].item.name
            'a'
            >>> nodes[0].item.children[0].item
            Text(content='hi')

    Raw tags:
        Content of elements named in ``raw_tags`` is kept as verbatim text
        up to the next ``</``. Defaults come from the active ParseConfig.

    """

    __slots__ = (
        "_source",
        "_data",  # UTF-8 encoded source for span slicing
        "_file_id",
        "_lexer",
        "_raw_tags",
        "_max_depth",
        "_depth",
        "_last_span",
    )

    def __init__(
        self,
        source: str,
        file_id: FileID = 0,
        raw_tags: Iterable[str] | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            file_id: Handle of the source in a FileStore
            raw_tags: Element names parsed as raw text; defaults to the
                active ParseConfig's raw_tags
        """
        config = get_parse_config()
        self._source = source
        self._data = source.encode("utf-8")
        self._file_id = file_id
        self._lexer = Lexer(source, file_id)
        self._raw_tags = config.raw_tags if raw_tags is None else frozenset(raw_tags)
        self._max_depth = config.max_depth
        self._depth = 0
        self._last_span = Span(file_id, 0, 0)

    @property
    def raw_tags(self) -> frozenset[str]:
        return self._raw_tags

    def parse(self) -> list[Spanned[Node]]:
        """Parse the whole source into top-level nodes.

        Returns:
            Top-level nodes in source order

        Raises:
            LexError: On the first malformed token
            ParseError: On the first syntax error, including a stray ``</``
                or ``</>`` at the top level
        """
        logger.debug("Parsing file %d (%d bytes)", self._file_id, len(self._data))
        nodes = self._parse_content()
        stray = self._peek()
        if stray.exists:
            raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, stray.span, got=stray.kind)
        logger.debug("Parsed %d top-level nodes from file %d", len(nodes), self._file_id)
        return nodes

    def _parse_content(self) -> list[Spanned[Node]]:
        """Parse expressions until a closing token or end of input.

        Empty text nodes are dropped.
        """
        children: list[Spanned[Node]] = []
        while not self._peek().is_any(TokenType.END, TokenType.LCLOSER, TokenType.EOF):
            node = self._parse_expr()
            if isinstance(node.item, Text) and not node.item.content:
                continue
            children.append(node)
        return children

    def _parse_expr(self) -> Spanned[Node]:
        token = self._peek()
        if token.is_kind(TokenType.LESSER):
            return self._parse_element()
        if token.is_kind(TokenType.COMMENT):
            return self._parse_comment()
        return self._parse_text()


def parse(
    source: str,
    file_id: FileID = 0,
    *,
    raw_tags: Iterable[str] | None = None,
) -> list[Spanned[Node]]:
    """Parse source into top-level nodes.

    Args:
        source: Markup source text
        file_id: Handle of the source in a FileStore
        raw_tags: Element names parsed as raw text (defaults from config)

    Returns:
        Top-level nodes in source order

    Example:
        >>> [n.item.name for n in parse("<a/><b></b>")]
        ['a', 'b']
    """
    return Parser(source, file_id, raw_tags).parse()

