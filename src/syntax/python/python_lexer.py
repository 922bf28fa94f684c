from dataclasses import dataclass
from typing import Callable, ClassVar, FrozenSet

from syntax.lexer import Lexer, LexerState, TokenType
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass
class PythonLexerState(LexerState):
    """
    State information for the Python lexer.

    Attributes:
        in_docstring: A triple-quoted string is still open at the end of the line
        docstring_quote: The quote character that opened it
    """
    in_docstring: bool = False
    docstring_quote: str = ""


@LexerRegistry.register_lexer(ProgrammingLanguage.PYTHON)
class PythonLexer(Lexer):
    """
    Lexer for Python.

    Triple-quoted strings carry over to the following lines.  String prefixes (`f`, `r`,
    `b`, `u` and their combinations) are part of the string token.  A name is a
    function when it is being defined with `def` or is followed by a call, and a
    property when it follows a `.`.
    """

    _OPERATORS = [
        '...', '>>=', '<<=', '**=', '//=', '@=', ':=', '!=', '==',
        '+=', '-=', '*=', '/=', '%=', '&=', '|=', '^=',
        '<=', '>=', '<<', '>>', '**', '//',
        '->', '@', '+', '-', '*', '/', '%', '&', '~', '|',
        '^', '=', '<', '>', '(', ')', '{', '}', '[', ']',
        ':', ';', '.', ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        'and', 'as', 'assert', 'async', 'await', 'break', 'case', 'class',
        'continue', 'def', 'del', 'elif', 'else', 'except',
        'finally', 'for', 'from', 'global', 'if', 'import', 'in',
        'is', 'lambda', 'match', 'None', 'nonlocal', 'not', 'or', 'pass',
        'raise', 'return', 'try', 'while', 'with', 'yield'
    })

    _BOOLEANS: ClassVar[FrozenSet[str]] = frozenset({'True', 'False'})

    _STRING_PREFIXES: ClassVar[FrozenSet[str]] = frozenset({
        'r', 'u', 'b', 'f', 'br', 'rb', 'fr', 'rf'
    })

    def __init__(self) -> None:
        super().__init__()
        self._in_docstring = False
        self._docstring_quote = ""

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> PythonLexerState:
        """
        Lex a line of Python.

        Args:
            prev_lexer_state: Optional previous lexer state
            input_str: The line to lex

        Returns:
            The updated lexer state after processing
        """
        self._set_input(input_str)
        if prev_lexer_state is not None:
            assert isinstance(prev_lexer_state, PythonLexerState), \
                f"Expected PythonLexerState, got {type(prev_lexer_state).__name__}"
            self._in_docstring = prev_lexer_state.in_docstring
            self._docstring_quote = prev_lexer_state.docstring_quote

        if self._in_docstring:
            self._read_docstring(0, 0)

        if not self._in_docstring:
            self._inner_lex()

        return PythonLexerState(
            in_docstring=self._in_docstring,
            docstring_quote=self._docstring_quote
        )

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if self._is_identifier_start(ch):
            return self._read_name

        if self._is_whitespace(ch):
            return self._read_whitespace

        if self._is_digit(ch):
            return self._read_number

        if ch == '.':
            return self._read_dot

        if ch in ('"', "'"):
            return self._read_quote

        if ch == '#':
            return self._read_line_comment

        if ch == '@':
            return self._read_at

        return self._read_operator

    def _read_name(self) -> None:
        """
        Read a name, or a prefixed string such as `f"..."`.
        """
        start = self._position
        self._position += 1
        self._skip_identifier_chars()
        value = self._input[start:self._position]

        if (value.lower() in self._STRING_PREFIXES and
                self._position < self._input_len and
                self._input[self._position] in ('"', "'")):
            self._read_prefixed_string(start)
            return

        if value in self._BOOLEANS:
            self._emit(TokenType.BOOLEAN, start)
            return

        previous = self._last_significant_token()
        after_dot = previous is not None and previous.value == '.'
        if value in self._KEYWORDS and not after_dot:
            self._emit(TokenType.KEYWORD, start)
            return

        if ((previous is not None and previous.type == TokenType.KEYWORD and previous.value == 'def') or
                self._peek_significant() == '('):
            self._emit(TokenType.FUNCTION, start)
            return

        self._emit(TokenType.PROPERTY if after_dot else TokenType.IDENTIFIER, start)

    def _read_quote(self) -> None:
        self._read_prefixed_string(self._position)

    def _read_prefixed_string(self, start: int) -> None:
        """
        Read a string or the opening line of a triple-quoted string.

        Args:
            start: Offset of the string prefix, or of the opening quote if there is no prefix
        """
        quote = self._input[self._position]
        if self._input.startswith(quote * 3, self._position):
            self._docstring_quote = quote
            self._read_docstring(start, self._position - start + 3)
            return

        self._read_quoted(start)

    def _read_docstring(self, start: int, skip_chars: int) -> None:
        """
        Read a triple-quoted string, or the part of one that is on this line.

        Args:
            start: Offset of the first character of the token
            skip_chars: Number of characters of prefix and opening quotes to skip
        """
        self._position = start
        end = self._input.find(self._docstring_quote * 3, start + skip_chars)
        if end == -1:
            self._in_docstring = True
            self._position = self._input_len

        else:
            self._in_docstring = False
            self._position = end + 3

        self._emit(TokenType.STRING, start)

    def _read_at(self) -> None:
        """
        Read a decorator, or the matrix multiplication operator.

        A decorator is an `@` that starts the line (after indentation) and is followed by
        a dotted name.
        """
        if (self._input[:self._position].strip() or
                self._position + 1 >= self._input_len or
                not self._is_identifier_start(self._input[self._position + 1])):
            self._read_operator()
            return

        start = self._position
        self._position += 1
        self._skip_identifier_chars('.')
        self._emit(TokenType.DECORATOR, start)

    def _read_dot(self) -> None:
        """
        Read a dot, an ellipsis, or a number that starts with a decimal point.
        """
        if self._position + 1 < self._input_len and self._is_digit(self._input[self._position + 1]):
            self._read_number()
            return

        self._read_operator()

    def _read_number(self) -> None:
        """
        Read a numeric literal, including an imaginary `j` suffix.
        """
        start = self._position
        self._skip_number()
        if self._position < self._input_len and self._input[self._position] in 'jJ':
            self._position += 1

        self._emit(TokenType.NUMBER, start)
