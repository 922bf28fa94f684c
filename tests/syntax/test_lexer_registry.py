"""
Tests for the lexer registry.
"""
import pytest

from syntax import LexerRegistry, ProgrammingLanguage
from syntax.javascript.javascript_lexer import JavaScriptLexer
from syntax.json.json_lexer import JSONLexer
from syntax.lexer import Lexer
from syntax.python.python_lexer import PythonLexer
from syntax.text.text_lexer import TextLexer


class TestLexerRegistry:
    """Test lexer registration and creation."""

    @pytest.mark.parametrize('language, lexer_class', [
        (ProgrammingLanguage.JAVASCRIPT, JavaScriptLexer),
        (ProgrammingLanguage.JSX, JavaScriptLexer),
        (ProgrammingLanguage.TYPESCRIPT, JavaScriptLexer),
        (ProgrammingLanguage.PYTHON, PythonLexer),
        (ProgrammingLanguage.JSON, JSONLexer),
        (ProgrammingLanguage.TEXT, TextLexer),
    ])
    def test_bundled_lexers_registered(self, language, lexer_class):
        """Test every bundled language has its lexer registered."""
        assert LexerRegistry.is_supported(language)
        assert isinstance(LexerRegistry.create_lexer(language), lexer_class)

    def test_unknown_language_not_supported(self):
        """Test UNKNOWN has no lexer."""
        assert not LexerRegistry.is_supported(ProgrammingLanguage.UNKNOWN)
        assert LexerRegistry.create_lexer(ProgrammingLanguage.UNKNOWN) is None

    def test_create_returns_fresh_instances(self):
        """Test each call creates a new lexer."""
        first = LexerRegistry.create_lexer(ProgrammingLanguage.PYTHON)
        second = LexerRegistry.create_lexer(ProgrammingLanguage.PYTHON)

        assert first is not second

    def test_register_decorator(self, monkeypatch):
        """Test registering a lexer with the decorator."""
        monkeypatch.setattr(LexerRegistry, '_lexer_classes', dict(LexerRegistry._lexer_classes))

        @LexerRegistry.register_lexer(ProgrammingLanguage.UNKNOWN)
        class UnknownLexer(TextLexer):
            """Lexer for tests."""

        assert issubclass(UnknownLexer, Lexer)
        assert isinstance(LexerRegistry.create_lexer(ProgrammingLanguage.UNKNOWN), UnknownLexer)
