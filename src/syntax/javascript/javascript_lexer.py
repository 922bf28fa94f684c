from dataclasses import dataclass
from typing import Callable, ClassVar, FrozenSet

from syntax.lexer import Lexer, LexerState, TokenType
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass
class JavaScriptLexerState(LexerState):
    """
    State information for the JavaScript lexer.

    Attributes:
        in_block_comment: A block comment is still open at the end of the line
        in_template_literal: A template literal is still open at the end of the line
    """
    in_block_comment: bool = False
    in_template_literal: bool = False


@LexerRegistry.register_lexer(
    ProgrammingLanguage.JAVASCRIPT,
    ProgrammingLanguage.JSX,
    ProgrammingLanguage.TYPESCRIPT
)
class JavaScriptLexer(Lexer):
    """
    Lexer for JavaScript, also used for TypeScript and JSX.

    Identifiers are split into keywords, booleans, functions (a name followed by a call
    or parameter list), properties (a name after `.` or `?.`, or a `#private` field) and
    plain identifiers.  A `/` starts a regular expression only where a value is expected,
    so `a / b / c` stays a pair of divisions.
    """

    _OPERATORS = [
        '>>>=', '>>=', '<<=', '&&=', '||=', '??=', '**=',
        '!==', '===', '>>>', '...', '!=', '==', '+=', '-=',
        '*=', '/=', '%=', '&=', '|=', '^=', '<=', '>=', '&&',
        '||', '??', '?.', '=>', '<<', '>>', '**', '++', '--', '+',
        '-', '*', '/', '%', '&', '~', '!', '|', '^', '=', '<',
        '>', '(', ')', '{', '}', '[', ']', ';', ':', '?', '.',
        ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        'abstract', 'any', 'as', 'async', 'await', 'break', 'case', 'catch', 'class',
        'const', 'continue', 'debugger', 'declare', 'default', 'delete', 'do', 'else',
        'enum', 'export', 'extends', 'finally', 'for', 'from', 'function', 'if',
        'implements', 'import', 'in', 'instanceof', 'interface', 'keyof',
        'let', 'namespace', 'never', 'new', 'null', 'of', 'private', 'protected',
        'public', 'readonly', 'return', 'satisfies', 'static', 'super', 'switch',
        'this', 'throw', 'try', 'type', 'typeof', 'undefined', 'unknown', 'var', 'void',
        'while', 'with', 'yield'
    })

    _BOOLEANS: ClassVar[FrozenSet[str]] = frozenset({'true', 'false'})

    # Keywords after which a `/` starts a regular expression
    _REGEXP_AFTER_KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        'case', 'delete', 'do', 'else', 'in', 'instanceof', 'new', 'of', 'return',
        'throw', 'typeof', 'void', 'yield', 'await'
    })

    _REGEXP_FLAGS: ClassVar[FrozenSet[str]] = frozenset('dgimsuvy')

    def __init__(self) -> None:
        super().__init__()
        self._in_block_comment = False
        self._in_template_literal = False

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> JavaScriptLexerState:
        """
        Lex a line of JavaScript.

        Args:
            prev_lexer_state: Optional previous lexer state
            input_str: The line to lex

        Returns:
            The updated lexer state after processing
        """
        self._set_input(input_str)
        if prev_lexer_state is not None:
            assert isinstance(prev_lexer_state, JavaScriptLexerState), \
                f"Expected JavaScriptLexerState, got {type(prev_lexer_state).__name__}"
            self._in_block_comment = prev_lexer_state.in_block_comment
            self._in_template_literal = prev_lexer_state.in_template_literal

        if self._in_block_comment:
            self._read_block_comment(0)

        elif self._in_template_literal:
            self._read_template_literal(0)

        if not self._in_block_comment and not self._in_template_literal:
            self._inner_lex()

        return JavaScriptLexerState(
            in_block_comment=self._in_block_comment,
            in_template_literal=self._in_template_literal
        )

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if self._is_whitespace(ch):
            return self._read_whitespace

        if self._is_identifier_start(ch) or ch == '$':
            return self._read_identifier

        if self._is_digit(ch):
            return self._read_number

        if ch in ('"', "'"):
            return self._read_string

        if ch == '`':
            return self._read_template_start

        if ch == '.':
            return self._read_dot

        if ch == '/':
            return self._read_forward_slash

        if ch == '#':
            return self._read_hash

        if ch == '@':
            return self._read_at

        return self._read_operator

    def _read_identifier(self) -> None:
        """
        Read a name and classify it.
        """
        start = self._position
        self._position += 1
        self._skip_identifier_chars('$')
        value = self._input[start:self._position]

        if value in self._BOOLEANS:
            self._emit(TokenType.BOOLEAN, start)
            return

        previous = self._last_significant_token()
        after_dot = previous is not None and previous.value in ('.', '?.')
        if value in self._KEYWORDS and not after_dot:
            self._emit(TokenType.KEYWORD, start)
            return

        if self._peek_significant() == '(':
            self._emit(TokenType.FUNCTION, start)
            return

        self._emit(TokenType.PROPERTY if after_dot else TokenType.IDENTIFIER, start)

    def _read_number(self) -> None:
        """
        Read a numeric literal, including a BigInt `n` suffix.
        """
        start = self._position
        self._skip_number()
        if self._position < self._input_len and self._input[self._position] == 'n':
            self._position += 1

        self._emit(TokenType.NUMBER, start)

    def _read_dot(self) -> None:
        """
        Read a dot, a spread, or a number that starts with a decimal point.
        """
        if self._position + 1 < self._input_len and self._is_digit(self._input[self._position + 1]):
            self._read_number()
            return

        self._read_operator()

    def _read_hash(self) -> None:
        """
        Read a hashbang at the start of a line, or a private class member.
        """
        start = self._position
        if self._position == 0 and self._input.startswith('#!'):
            self._position = self._input_len
            self._emit(TokenType.PREPROCESSOR, start)
            return

        if self._position + 1 < self._input_len and self._is_identifier_start(self._input[self._position + 1]):
            self._position += 1
            self._skip_identifier_chars('$')
            self._emit(TokenType.FUNCTION if self._peek_significant() == '(' else TokenType.PROPERTY, start)
            return

        self._read_error()

    def _read_at(self) -> None:
        """
        Read a TypeScript decorator.
        """
        start = self._position
        if self._position + 1 >= self._input_len or not self._is_identifier_start(self._input[self._position + 1]):
            self._read_error()
            return

        self._position += 1
        self._skip_identifier_chars('$.')
        self._emit(TokenType.DECORATOR, start)

    def _read_forward_slash(self) -> None:
        """
        Read a comment, a regular expression, or a division operator.
        """
        if self._input.startswith('//', self._position):
            self._read_line_comment()
            return

        if self._input.startswith('/*', self._position):
            self._read_block_comment(2)
            return

        if self._regexp_allowed() and self._read_regexp():
            return

        self._read_operator()

    def _regexp_allowed(self) -> bool:
        """
        Check whether a `/` at the current position would start a regular expression.

        Returns:
            True if the previous token cannot end an expression
        """
        previous = self._last_significant_token()
        if previous is None:
            return True

        if previous.type == TokenType.KEYWORD:
            return previous.value in self._REGEXP_AFTER_KEYWORDS

        if previous.type == TokenType.PUNCTUATION:
            return previous.value not in (')', ']', '}')

        return previous.type == TokenType.OPERATOR and previous.value not in ('++', '--')

    def _read_regexp(self) -> bool:
        """
        Read a regular expression literal with its flags.

        Returns:
            True if a literal was read, False if the line has no closing `/`
        """
        index = self._position + 1
        in_class = False
        while index < self._input_len:
            ch = self._input[index]
            if ch == '\\':
                index += 2
                continue

            if ch == '[':
                in_class = True

            elif ch == ']':
                in_class = False

            elif ch == '/' and not in_class:
                break

            index += 1

        if index >= self._input_len:
            return False

        start = self._position
        self._position = index + 1
        self._skip_while(self._REGEXP_FLAGS)
        self._emit(TokenType.REGEXP, start)
        return True

    def _read_block_comment(self, skip_chars: int) -> None:
        """
        Read a block comment, or the part of one that is on this line.

        Args:
            skip_chars: Number of characters of comment opener to skip
        """
        start = self._position
        end = self._input.find('*/', self._position + skip_chars)
        if end == -1:
            self._in_block_comment = True
            self._position = self._input_len

        else:
            self._in_block_comment = False
            self._position = end + 2

        self._emit(TokenType.COMMENT, start)

    def _read_template_start(self) -> None:
        self._read_template_literal(1)

    def _read_template_literal(self, skip_chars: int) -> None:
        """
        Read a template literal, or the part of one that is on this line.

        Args:
            skip_chars: Number of characters of opening backtick to skip
        """
        start = self._position
        self._position += skip_chars
        self._in_template_literal = True
        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '\\':
                self._position = min(self._position + 2, self._input_len)
                continue

            self._position += 1
            if ch == '`':
                self._in_template_literal = False
                break

        self._emit(TokenType.STRING, start)
