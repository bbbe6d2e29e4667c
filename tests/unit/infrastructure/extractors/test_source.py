"""Tests for comment blanking."""

from naechste.infrastructure.extractors.source import blank_comments, line_of


class TestBlankComments:
    """Tests for blank_comments."""

    def test_line_comment(self) -> None:
        """// comment replaced by spaces."""
        assert blank_comments("a // b\nc") == "a     \nc"

    def test_block_comment_keeps_newlines(self) -> None:
        """Block comment blanked, newlines kept."""
        result = blank_comments("a /* b\nc */ d")

        assert result == "a     \n     d"
        assert len(result) == len("a /* b\nc */ d")

    def test_strings_untouched(self) -> None:
        """Comment markers inside strings survive."""
        source = "const url = 'https://example.com' // link"

        assert blank_comments(source) == "const url = 'https://example.com'        "

    def test_escaped_quote(self) -> None:
        """Escaped quote does not end the string."""
        source = "'it\\'s // not a comment'"

        assert blank_comments(source) == source


class TestLineOf:
    """Tests for line_of."""

    def test_first_line(self) -> None:
        """Offset 0 is line 1."""
        assert line_of("abc", 0) == 1

    def test_later_line(self) -> None:
        """Lines counted by preceding newlines."""
        assert line_of("a\nb\nc", 4) == 3
