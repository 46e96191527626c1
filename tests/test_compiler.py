"""Tests for the Compiler facade."""

import logging

import pytest

from shlang.compiler import Compiler
from shlang.config import ParseConfig, get_parse_config
from shlang.errors import LexError, ParseError, ParseErrorKind
from shlang.filestore import FileStore
from shlang.nodes import Text
from shlang.tokens import TokenType


class TestCompilerLex:
    """Test Compiler.lex."""

    def test_tokens_without_eof(self) -> None:
        tokens = Compiler(silent=True).lex("<a/>")
        assert [t.kind for t in tokens] == [TokenType.LESSER, TokenType.WORD, TokenType.RCLOSER]

    def test_registers_source(self) -> None:
        compiler = Compiler(silent=True)
        compiler.lex("a", name="one.shl")
        tokens = compiler.lex("b")
        assert tokens[0].span.file_id == 1
        assert compiler.file_store.get(0) == "a"
        assert compiler.file_store.name(0) == "one.shl"

    def test_error_reraised(self) -> None:
        with pytest.raises(LexError):
            Compiler(silent=True).lex("#")


class TestCompilerParse:
    """Test Compiler.parse."""

    def test_parse(self) -> None:
        nodes = Compiler(silent=True).parse("<p>hi</p>")
        assert nodes[0].item.name == "p"

    def test_shared_store(self) -> None:
        store = FileStore()
        store.add("existing")
        compiler = Compiler(store, silent=True)
        nodes = compiler.parse("<a/>")
        assert nodes[0].span.file_id == 1
        assert compiler.file_store is store

    def test_config_applied(self) -> None:
        compiler = Compiler(silent=True, config=ParseConfig(raw_tags=frozenset({"code"})))
        nodes = compiler.parse("<code>1 < 2</code>")
        assert nodes[0].item.children[0].item == Text("1 < 2")

    def test_config_restored(self) -> None:
        before = get_parse_config()
        Compiler(silent=True, config=ParseConfig(max_depth=3)).parse("<a/>")
        assert get_parse_config() is before

    def test_config_restored_on_error(self) -> None:
        before = get_parse_config()
        with pytest.raises(ParseError):
            Compiler(silent=True, config=ParseConfig(max_depth=3)).parse("<a></b>")
        assert get_parse_config() is before

    def test_error_spans_use_registered_id(self) -> None:
        compiler = Compiler(silent=True)
        compiler.parse("<ok/>")
        with pytest.raises(ParseError) as exc_info:
            compiler.parse("<a></b>")
        assert exc_info.value.kind is ParseErrorKind.UNMATCHED_TAG
        assert exc_info.value.span.file_id == 1

    def test_defaults(self) -> None:
        compiler = Compiler()
        assert compiler.silent is False
        assert compiler.config == ParseConfig()
        assert len(compiler.file_store) == 0


class TestCompilerReporting:
    """Test error logging and formatting."""

    def test_logs_report_when_not_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        compiler = Compiler()
        with caplog.at_level(logging.ERROR, logger="shlang"), pytest.raises(ParseError):
            compiler.parse("<a></b>", name="page.shl")

        records = [r for r in caplog.records if r.name == "shlang.compiler"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert "error[unmatched-tag]" in records[0].getMessage()
        assert "page.shl:1:1" in records[0].getMessage()

    def test_silent_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        compiler = Compiler(silent=True)
        with caplog.at_level(logging.ERROR, logger="shlang"), pytest.raises(LexError):
            compiler.lex('"open')
        assert not [r for r in caplog.records if r.name == "shlang.compiler"]

    def test_format_error(self) -> None:
        compiler = Compiler(silent=True)
        with pytest.raises(ParseError) as exc_info:
            compiler.parse("<a x=>", name="form.shl")
        text = compiler.format_error(exc_info.value)
        assert text.startswith("error[unexpected-token]: Unexpected token GREATER")
        assert "  --> form.shl:1:6" in text
