"""Tests for the public package surface."""

import shlang


class TestPublicApi:
    """Test top-level exports."""

    def test_all_names_importable(self) -> None:
        for name in shlang.__all__:
            assert hasattr(shlang, name), name

    def test_version(self) -> None:
        assert isinstance(shlang.__version__, str)

    def test_parse_and_tokenize(self) -> None:
        assert shlang.parse("<a/>")[0].item.name == "a"
        assert [t.kind for t in shlang.tokenize("<a/>")][-1] is shlang.TokenType.RCLOSER

    def test_parse_with_file_id(self) -> None:
        assert shlang.parse("x", 4)[0].span == shlang.Span(4, 0, 1)
