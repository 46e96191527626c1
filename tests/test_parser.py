"""Tests for element, text and comment parsing."""

import pytest

from shlang import parse
from shlang.errors import LexError, LexErrorKind, ParseError, ParseErrorKind
from shlang.location import Span, Spanned
from shlang.nodes import Bool, Comment, Element, Float, Int, Null, String, Text
from shlang.parser import Parser
from shlang.tokens import TokenType


def parse_one(source: str) -> Spanned:
    nodes = parse(source)
    assert len(nodes) == 1
    return nodes[0]


def parse_error(source: str) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        parse(source)
    return exc_info.value


class TestElements:
    """Test element structure and spans."""

    def test_empty_element(self) -> None:
        node = parse_one("<a></a>")
        assert node == Spanned(
            Element("a", {}, (), Span(0, 0, 3), Span(0, 3, 7)),
            Span(0, 0, 7),
        )

    def test_self_closing(self) -> None:
        node = parse_one("<img/>")
        assert node.item.name == "img"
        assert node.item.is_self_closing
        assert node.item.start_tag_span == Span(0, 0, 6)
        assert node.item.end_tag_span is None
        assert node.span == Span(0, 0, 6)

    def test_self_closing_with_space(self) -> None:
        assert parse_one("<br />").item.is_self_closing

    def test_nested(self) -> None:
        outer = parse_one("<a><b>x</b><c/></a>").item
        assert [child.item.name for child in outer.children] == ["b", "c"]
        inner = outer.children[0].item
        assert inner.children[0].item == Text("x")

    def test_siblings(self) -> None:
        nodes = parse("<a/><b></b>")
        assert [n.item.name for n in nodes] == ["a", "b"]
        assert nodes[1].span == Span(0, 4, 11)

    def test_end_token_closes(self) -> None:
        node = parse_one("<a>x</>")
        assert node.item.end_tag_span == Span(0, 4, 7)
        assert node.span == Span(0, 0, 7)

    def test_close_tag_with_spaces(self) -> None:
        node = parse_one("<a></ a >")
        assert node.item.end_tag_span == Span(0, 3, 9)

    def test_open_at_end_of_input(self) -> None:
        node = parse_one("<a>hi")
        assert node.item.end_tag_span is None
        assert node.item.children[0].item == Text("hi")
        assert node.span == Span(0, 0, 5)

    def test_multibyte_spans(self) -> None:
        node = parse_one("<é>ü</é>")
        assert node.item.name == "é"
        assert node.item.children[0].span == Span(0, 4, 6)
        assert node.item.end_tag_span == Span(0, 6, 11)
        assert node.span == Span(0, 0, 11)

    def test_props_are_read_only(self) -> None:
        element = parse_one("<a x=1/>").item
        with pytest.raises(TypeError):
            element.props["x"] = Spanned(Int(2), Span(0, 0, 1))  # type: ignore[index]
        assert element.props["x"].item == Int(1)

    def test_props_copied_from_caller(self) -> None:
        props = {"x": Spanned(Int(1), Span(0, 3, 4))}
        element = Element("a", props, (), Span(0, 0, 6))
        props["y"] = Spanned(Int(2), Span(0, 0, 1))
        assert list(element.props) == ["x"]

    def test_start_tag_span_required(self) -> None:
        with pytest.raises(TypeError):
            Element("a", {}, ())  # type: ignore[call-arg]


class TestProperties:
    """Test property parsing."""

    def test_string_and_bare(self) -> None:
        props = parse_one('<a href="x" disabled>').item.props
        assert props == {
            "href": Spanned(String("x"), Span(0, 8, 11)),
            "disabled": Spanned(Bool(True), Span(0, 20, 21)),
        }

    def test_insertion_order(self) -> None:
        props = parse_one("<a z=1 y=2 x=3/>").item.props
        assert list(props) == ["z", "y", "x"]

    def test_value_kinds(self) -> None:
        props = parse_one("<v i=1 f=2.5 s='q' t=true n=null off=false neg=-3/>").item.props
        assert {name: value.item for name, value in props.items()} == {
            "i": Int(1),
            "f": Float(2.5),
            "s": String("q"),
            "t": Bool(True),
            "n": Null(),
            "off": Bool(False),
            "neg": Int(-3),
        }

    def test_repeated_name_last_wins(self) -> None:
        props = parse_one("<a x=1 x=2/>").item.props
        assert len(props) == 1
        assert props["x"].item == Int(2)

    def test_whitespace_around_equal(self) -> None:
        props = parse_one("<a x = 1\n y=2/>").item.props
        assert props["x"].item == Int(1)
        assert props["y"].item == Int(2)

    def test_comment_between_props(self) -> None:
        props = parse_one("<a x=1 <* note *> y=2/>").item.props
        assert list(props) == ["x", "y"]

    def test_bare_before_self_close(self) -> None:
        props = parse_one("<input checked/>").item.props
        assert props["checked"] == Spanned(Bool(True), Span(0, 14, 16))

    def test_missing_value(self) -> None:
        err = parse_error("<a x=>")
        assert err.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert err.got is TokenType.GREATER

    def test_word_value_rejected(self) -> None:
        err = parse_error("<a x=y/>")
        assert err.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert err.span == Span(0, 5, 6)

    def test_non_word_name(self) -> None:
        err = parse_error("<a 1/>")
        assert err.kind is ParseErrorKind.INVALID_TOKEN
        assert err.expected is TokenType.WORD
        assert err.got is TokenType.INT


class TestText:
    """Test text runs."""

    def test_trimmed(self) -> None:
        node = parse_one("<p>  hello world  </p>").item.children[0]
        assert node == Spanned(Text("hello world"), Span(0, 3, 18))

    def test_punctuation_kept(self) -> None:
        child = parse_one("<p>a, b! x = 1.5 > y</p>").item.children[0]
        assert child.item == Text("a, b! x = 1.5 > y")

    def test_strings_kept_as_written(self) -> None:
        child = parse_one('<p>say "hi\\n"</p>').item.children[0]
        assert child.item == Text('say "hi\\n"')

    def test_top_level_text(self) -> None:
        assert parse("hello") == [Spanned(Text("hello"), Span(0, 0, 5))]

    def test_whitespace_only_dropped(self) -> None:
        nodes = parse("  <a/>\n  ")
        assert len(nodes) == 1
        assert parse_one("<a> </a>").item.children == ()

    def test_empty_source(self) -> None:
        assert parse("") == []

    def test_lone_lesser_is_text(self) -> None:
        assert parse("<") == [Spanned(Text("<"), Span(0, 0, 1))]

    def test_empty_angle_brackets(self) -> None:
        assert [n.item for n in parse("<>")] == [Text("<"), Text(">")]

    def test_lesser_before_space(self) -> None:
        err = parse_error("a < b")
        assert err.kind is ParseErrorKind.INVALID_TOKEN
        assert err.got is TokenType.SPACE
        assert err.span == Span(0, 3, 4)


class TestComments:
    """Test comment nodes."""

    def test_comment_child(self) -> None:
        children = parse_one("<a><* note *>x</a>").item.children
        assert children[0] == Spanned(Comment(" note "), Span(0, 5, 11))
        assert children[1].item == Text("x")

    def test_comment_breaks_text(self) -> None:
        assert [n.item for n in parse("a <*c*> b")] == [Text("a"), Comment("c"), Text("b")]

    def test_nested_comment_content(self) -> None:
        assert parse("<*a<*b*>c*>")[0].item == Comment("a<*b*>c")


class TestTagErrors:
    """Test tag matching and structural errors."""

    def test_unmatched_tag(self) -> None:
        err = parse_error("<a></b>")
        assert err.kind is ParseErrorKind.UNMATCHED_TAG
        assert err.start_tag == Spanned("a", Span(0, 1, 2))
        assert err.end_tag == Spanned("b", Span(0, 5, 6))
        assert err.span == Span(0, 0, 7)

    def test_unmatched_is_case_sensitive(self) -> None:
        assert parse_error("<a></A>").kind is ParseErrorKind.UNMATCHED_TAG

    def test_unmatched_nested(self) -> None:
        err = parse_error("<a><b></a>")
        assert err.start_tag.item == "b"
        assert err.end_tag.item == "a"

    def test_stray_close_tag(self) -> None:
        err = parse_error("</a>")
        assert err.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert err.got is TokenType.LCLOSER
        assert err.span == Span(0, 0, 2)

    def test_stray_end(self) -> None:
        err = parse_error("<a/></>")
        assert err.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert err.got is TokenType.END

    def test_open_tag_at_end(self) -> None:
        err = parse_error("<a")
        assert err.kind is ParseErrorKind.UNEXPECTED_STREAM_END
        assert err.span == Span(0, 2, 2)

    def test_close_tag_at_end(self) -> None:
        assert parse_error("<a></a").kind is ParseErrorKind.UNEXPECTED_STREAM_END

    def test_close_tag_without_name(self) -> None:
        err = parse_error("<a></1>")
        assert err.kind is ParseErrorKind.INVALID_TOKEN
        assert err.expected is TokenType.WORD

    def test_lex_errors_propagate(self) -> None:
        with pytest.raises(LexError) as exc_info:
            parse('<a x="oops>')
        assert exc_info.value.kind is LexErrorKind.UNTERMINATED_STR

    def test_lex_error_in_text(self) -> None:
        with pytest.raises(LexError):
            parse("<p>#</p>")


class TestParserInstance:
    """Test the Parser class directly."""

    def test_file_id_on_spans(self) -> None:
        nodes = Parser("<a>x</a>", file_id=5).parse()
        assert nodes[0].span.file_id == 5
        assert nodes[0].item.children[0].span.file_id == 5

    def test_file_id_on_errors(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("<a></b>", file_id=2)
        assert exc_info.value.span.file_id == 2
        assert exc_info.value.end_tag.span.file_id == 2

    def test_raw_tags_property(self) -> None:
        assert Parser("", raw_tags=["x"]).raw_tags == frozenset({"x"})
