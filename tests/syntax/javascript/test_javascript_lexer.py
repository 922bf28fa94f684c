"""
Tests for the JavaScript lexer.
"""
import pytest

from syntax.javascript.javascript_lexer import JavaScriptLexer, JavaScriptLexerState
from syntax.lexer import TokenType


class TestJavaScriptBasics:
    """Test tokenization of simple statements."""

    def test_simple_declaration(self, helpers):
        """Test a simple const declaration."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'const a = 1;')

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.KEYWORD, 'const'),
            (TokenType.WHITESPACE, ' '),
            (TokenType.IDENTIFIER, 'a'),
            (TokenType.WHITESPACE, ' '),
            (TokenType.OPERATOR, '='),
            (TokenType.WHITESPACE, ' '),
            (TokenType.NUMBER, '1'),
            (TokenType.PUNCTUATION, ';'),
        ]

    def test_whitespace_runs_are_single_tokens(self, helpers):
        """Test that runs of whitespace become one token each."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, '  \tlet   x')

        assert tokens[0].type == TokenType.WHITESPACE
        assert tokens[0].value == '  \t'
        assert tokens[2].value == '   '

    def test_token_start_positions(self, helpers):
        """Test that token start offsets point into the line."""
        line = 'let answer = 42;'
        tokens, _ = helpers.lex_line(JavaScriptLexer, line)

        for token in tokens:
            assert line[token.start:token.start + len(token.value)] == token.value

    def test_booleans(self, helpers):
        """Test that true and false are booleans rather than keywords."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'x = true || false')
        booleans = [t.value for t in tokens if t.type == TokenType.BOOLEAN]

        assert booleans == ['true', 'false']

    def test_typescript_keywords(self, helpers):
        """Test TypeScript keywords are recognized."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'type Id = keyof T;')
        keywords = [t.value for t in tokens if t.type == TokenType.KEYWORD]

        assert keywords == ['type', 'keyof']

    def test_unknown_characters_are_errors(self, helpers):
        """Test characters outside the grammar become single-character error tokens."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'a # b')
        errors = [t for t in tokens if t.type == TokenType.ERROR]

        assert len(errors) == 1
        assert errors[0].value == '#'

    def test_empty_line(self, helpers):
        """Test an empty line produces no tokens."""
        tokens, state = helpers.lex_line(JavaScriptLexer, '')

        assert tokens == []
        assert state.in_block_comment is False
        assert state.in_template_literal is False


class TestJavaScriptNames:
    """Test how names are classified."""

    def test_function_call(self, helpers):
        """Test a name followed by a call is a function."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'console.log (x);')
        significant = helpers.significant(tokens)

        assert [(t.type, t.value) for t in significant[:3]] == [
            (TokenType.IDENTIFIER, 'console'),
            (TokenType.PUNCTUATION, '.'),
            (TokenType.FUNCTION, 'log'),
        ]

    def test_optional_chaining_property(self, helpers):
        """Test a name after `?.` is a property."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'y?.z')

        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.IDENTIFIER, 'y'),
            (TokenType.OPERATOR, '?.'),
            (TokenType.PROPERTY, 'z'),
        ]

    def test_keyword_as_property(self, helpers):
        """Test a keyword used as a property name is a property."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'promise.catch')

        assert tokens[-1].type == TokenType.PROPERTY

    def test_private_members(self, helpers):
        """Test private fields and methods."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'this.#count = this.#next();')
        significant = helpers.significant(tokens)

        assert (TokenType.PROPERTY, '#count') in [(t.type, t.value) for t in significant]
        assert (TokenType.FUNCTION, '#next') in [(t.type, t.value) for t in significant]

    def test_decorator(self, helpers):
        """Test a TypeScript decorator."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, '@Component({})')

        assert tokens[0].type == TokenType.DECORATOR
        assert tokens[0].value == '@Component'

    def test_dollar_identifiers(self, helpers):
        """Test `$` is allowed in names."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, '$el')

        assert [(t.type, t.value) for t in tokens] == [(TokenType.IDENTIFIER, '$el')]


class TestJavaScriptCommentsAndRegex:
    """Test comments, regular expressions and division."""

    def test_line_comment(self, helpers):
        """Test a trailing line comment."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'x++; // bump')

        assert tokens[-1].type == TokenType.COMMENT
        assert tokens[-1].value == '// bump'

    def test_regexp_literal(self, helpers):
        """Test a regular expression literal with flags."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'const re = /ab+c/gi;')
        regexps = [t for t in tokens if t.type == TokenType.REGEXP]

        assert len(regexps) == 1
        assert regexps[0].value == '/ab+c/gi'

    def test_division(self, helpers):
        """Test a lone slash is a division operator."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'a / b')
        significant = helpers.significant(tokens)

        assert [(t.type, t.value) for t in significant] == [
            (TokenType.IDENTIFIER, 'a'),
            (TokenType.OPERATOR, '/'),
            (TokenType.IDENTIFIER, 'b'),
        ]

    def test_repeated_division(self, helpers):
        """Test two divisions on one line are not read as a regular expression."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'x = a / b / c;')

        assert TokenType.REGEXP not in [t.type for t in tokens]
        assert [t.value for t in tokens if t.type == TokenType.OPERATOR] == ['=', '/', '/']

    def test_regexp_after_keyword(self, helpers):
        """Test a regular expression after `return`."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, 'return /[/]x/.test(s);')
        regexps = [t.value for t in tokens if t.type == TokenType.REGEXP]

        assert regexps == ['/[/]x/']

    def test_division_after_parenthesis(self, helpers):
        """Test a slash after a closing parenthesis is division."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, '(a + b) / 2 / n')

        assert TokenType.REGEXP not in [t.type for t in tokens]

    def test_hashbang(self, helpers):
        """Test a hashbang at the start of a line."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, '#!/usr/bin/env node')

        assert len(tokens) == 1
        assert tokens[0].type == TokenType.PREPROCESSOR


class TestJavaScriptMultiline:
    """Test state carried between lines."""

    def test_block_comment_across_lines(self, helpers):
        """Test a block comment spanning three lines."""
        lines = ['/* start', 'middle', 'end */ let x = 5;']
        result = helpers.lex_lines(JavaScriptLexer, lines)

        assert [t.type for t in result[0]] == [TokenType.COMMENT]
        assert [t.type for t in result[1]] == [TokenType.COMMENT]
        assert result[2][0].type == TokenType.COMMENT
        assert result[2][0].value == 'end */'
        assert TokenType.KEYWORD in [t.type for t in result[2]]

    def test_block_comment_state(self):
        """Test the lexer state reports an open block comment."""
        lexer = JavaScriptLexer()
        state = lexer.lex(None, '/* open')

        assert isinstance(state, JavaScriptLexerState)
        assert state.in_block_comment is True

    def test_template_literal_across_lines(self, helpers):
        """Test a template literal spanning two lines."""
        lines = ['const s = `hello', 'world` + x;']
        result = helpers.lex_lines(JavaScriptLexer, lines)

        assert result[0][-1].type == TokenType.STRING
        assert result[0][-1].value == '`hello'
        assert result[1][0].type == TokenType.STRING
        assert result[1][0].value == 'world`'
        assert [t.value for t in helpers.significant(result[1])[1:]] == ['+', 'x', ';']

    def test_wrong_state_type_rejected(self):
        """Test that a foreign lexer state is rejected."""
        from syntax.python.python_lexer import PythonLexerState

        lexer = JavaScriptLexer()
        with pytest.raises(AssertionError):
            lexer.lex(PythonLexerState(), 'x')


class TestJavaScriptLossless:
    """Test that every character ends up in a token."""

    @pytest.mark.parametrize('line', [
        'const a = 1;',
        '    return x ?? y?.z;',
        'let s = "unterminated',
        "const t = 'it\\'s';",
        '/* c */ a /= 2; // done',
        'x = 0x1F + 0b101 + 0o17 + 1.5e-3 + 10n;',
        'élan = 1',
        '\t\t}',
        '`a${b}c`',
    ])
    def test_tokens_reassemble_line(self, helpers, line):
        """Test token values concatenate back to the input line."""
        tokens, _ = helpers.lex_line(JavaScriptLexer, line)

        assert helpers.joined(tokens) == line
