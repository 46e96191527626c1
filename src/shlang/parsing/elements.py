"""Element, property and value parsing for Shlang.

Grammar handled here:

    element   := '<' WORD props ( '/>' | '>' content close_tag? )
    close_tag := '</' WORD '>' | '</>'
    props     := ( WORD ('=' value)? )*
    value     := INT | FLOAT | STRING | 'true' | 'false' | 'null'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shlang.errors import ParseError, ParseErrorKind
from shlang.location import Spanned
from shlang.nodes import Bool, Element, Float, Int, Null, String, Text
from shlang.tokens import TokenType

if TYPE_CHECKING:
    from shlang.location import Span
    from shlang.nodes import Node, Value
    from shlang.tokens import Token


class ElementParsingMixin:
    """Mixin for elements and their properties.

    Required Host Attributes:
        - _raw_tags: frozenset[str]
        - _max_depth: int
        - _depth: int
        - _last_span: Span

    """

    _raw_tags: frozenset[str]
    _max_depth: int
    _depth: int
    _last_span: Span

    # Navigation and content methods (provided by the host and other mixins)
    def _peek(self) -> Token:
        raise NotImplementedError

    def _peek_next(self) -> Token:
        raise NotImplementedError

    def _peek_some(self) -> Token:
        raise NotImplementedError

    def _next(self) -> Token:
        raise NotImplementedError

    def _skip_insignificant(self) -> None:
        raise NotImplementedError

    def _consume(self, expected: TokenType) -> Token:
        raise NotImplementedError

    def _text(self, span: Span) -> str:
        raise NotImplementedError

    def _parse_content(self) -> list[Spanned[Node]]:
        raise NotImplementedError

    def _parse_raw_content(self) -> list[Spanned[Node]]:
        raise NotImplementedError

    def _parse_element(self) -> Spanned[Node]:
        """Parse an element, entered on a ``<`` token.

        A ``<`` followed by ``>`` or end of input is literal text instead.
        An element left open at end of input ends there with no end tag.
        """
        following = self._peek_next()
        if following.is_any(TokenType.GREATER, TokenType.EOF):
            lesser = self._next()
            return Spanned(Text(self._text(lesser.span)), lesser.span)

        start = self._next()
        name_token = self._consume(TokenType.WORD)
        tag_name = self._text(name_token.span)
        props = self._parse_props()

        if self._peek().is_kind(TokenType.RCLOSER):
            end = self._next()
            span = start.span + end.span
            return Spanned(Element(tag_name, props, (), span, None), span)

        start_tag_span = start.span + self._consume(TokenType.GREATER).span

        if self._depth >= self._max_depth:
            raise ParseError(
                ParseErrorKind.UNSPECIFIED,
                start_tag_span,
                message=f"Elements are nested deeper than {self._max_depth} levels",
            )
        self._depth += 1
        try:
            if tag_name in self._raw_tags:
                children = self._parse_raw_content()
            else:
                children = self._parse_content()
        finally:
            self._depth -= 1

        closing = self._peek()
        if closing.is_kind(TokenType.LCLOSER):
            end_tag_span = self._parse_close_tag(
                Spanned(tag_name, name_token.span), start.span
            )
        elif closing.is_kind(TokenType.END):
            end_tag_span = self._next().span
        else:
            end_tag_span = None

        element = Element(tag_name, props, tuple(children), start_tag_span, end_tag_span)
        return Spanned(element, start.span + self._last_span)

    def _parse_close_tag(self, start_tag: Spanned[str], element_start: Span) -> Span:
        """Parse ``</name>`` and check it against the opening tag name.

        Returns:
            Span of the closing tag

        Raises:
            ParseError: UNMATCHED_TAG when the names differ byte-for-byte
        """
        lcloser = self._next()
        self._skip_insignificant()
        name_token = self._consume(TokenType.WORD)
        end_name = self._text(name_token.span)
        self._skip_insignificant()
        end = self._consume(TokenType.GREATER)

        if end_name != start_tag.item:
            raise ParseError(
                ParseErrorKind.UNMATCHED_TAG,
                element_start + end.span,
                start_tag=start_tag,
                end_tag=Spanned(end_name, name_token.span),
            )
        return lcloser.span + end.span

    def _parse_props(self) -> dict[str, Spanned[Value]]:
        """Parse properties up to ``>`` or ``/>``.

        A bare name is Bool(True), spanned on the token that follows it.
        A repeated name overwrites the earlier value.
        """
        props: dict[str, Spanned[Value]] = {}
        while True:
            self._skip_insignificant()
            token = self._peek_some()
            if token.is_any(TokenType.RCLOSER, TokenType.GREATER):
                return props

            name = self._text(self._consume(TokenType.WORD).span)
            self._skip_insignificant()
            sign = self._peek()
            if sign.isnt(TokenType.EQUAL):
                props[name] = Spanned(Bool(True), sign.span)
                continue

            self._next()
            self._skip_insignificant()
            props[name] = self._parse_value(self._peek_some())
            self._next()

    def _parse_value(self, token: Token) -> Spanned[Value]:
        """Convert a literal token into a property value."""
        value: Value
        match token.kind:
            case TokenType.TRUE:
                value = Bool(True)
            case TokenType.FALSE:
                value = Bool(False)
            case TokenType.NULL:
                value = Null()
            case TokenType.INT:
                value = Int(token.value)
            case TokenType.FLOAT:
                value = Float(token.value)
            case TokenType.STR:
                value = String(token.value)
            case _:
                raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, token.span, got=token.kind)
        return Spanned(value, token.span)
