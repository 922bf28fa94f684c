"""
Tests for the plain text lexer.
"""
from syntax.lexer import TokenType
from syntax.text.text_lexer import TextLexer


class TestTextLexer:
    """Test plain text tokenization."""

    def test_line_is_single_token(self, helpers):
        """Test a whole line becomes one text token."""
        tokens, _ = helpers.lex_line(TextLexer, '  any  thing // at all ')

        assert [(t.type, t.value) for t in tokens] == [(TokenType.TEXT, '  any  thing // at all ')]

    def test_empty_line(self, helpers):
        """Test an empty line has no tokens."""
        tokens, _ = helpers.lex_line(TextLexer, '')

        assert tokens == []
