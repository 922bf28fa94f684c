from dataclasses import dataclass
from typing import Callable, ClassVar, FrozenSet

from syntax.lexer import Lexer, LexerState, TokenType
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass
class JSONLexerState(LexerState):
    """
    State information for the JSON lexer.  JSON has no multi-line constructs.
    """


@LexerRegistry.register_lexer(ProgrammingLanguage.JSON)
class JSONLexer(Lexer):
    """
    Lexer for JSON.

    Object keys (a string followed by `:`) are properties, other strings are strings.
    Anything JSON does not allow, such as leading zeros, bare words or bad escapes,
    becomes an ERROR token so the line still reassembles.
    """

    _OPERATORS = ['{', '}', '[', ']', ',', ':']

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _ESCAPE_CHARS: ClassVar[FrozenSet[str]] = frozenset('"\\/bfnrt')

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> JSONLexerState:
        """
        Lex a line of JSON.

        Args:
            prev_lexer_state: Optional previous lexer state, unused
            input_str: The line to lex

        Returns:
            The lexer state after the line
        """
        self._set_input(input_str)
        self._inner_lex()
        return JSONLexerState()

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

        if ch == '"':
            return self._read_string

        if ch == '-' or self._is_digit(ch):
            return self._read_number

        if ch.isalpha():
            return self._read_word

        if ch in self._OPERATORS_MAP:
            return self._read_operator

        return self._read_error

    def _read_string(self) -> None:
        """
        Read a string or an object key.  JSON strings cannot span lines, so an
        unterminated string is an error.
        """
        start = self._position
        self._position += 1

        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '"':
                self._position += 1
                self._emit(TokenType.PROPERTY if self._peek_significant() == ':' else TokenType.STRING, start)
                return

            if ch == '\\' and self._position + 1 < self._input_len:
                escaped = self._input[self._position + 1]
                if escaped in self._ESCAPE_CHARS:
                    self._position += 2
                    continue

                if escaped == 'u':
                    hex_digits = self._input[self._position + 2:self._position + 6]
                    if len(hex_digits) == 4 and all(self._is_hex_digit(d) for d in hex_digits):
                        self._position += 6
                        continue

                    # The rest of the string is lexed again from after the `\u`
                    self._position += 2
                    self._emit(TokenType.ERROR, start)
                    return

            self._position += 1

        self._emit(TokenType.ERROR, start)

    def _read_number(self) -> None:
        """
        Read a number.  Malformed numbers (`01`, `-`, `2.`, `1e`) are errors.
        """
        start = self._position
        if self._input[self._position] == '-':
            self._position += 1

        if (self._input.startswith('0', self._position) and
                self._position + 1 < self._input_len and
                self._is_digit(self._input[self._position + 1])):
            self._position += 2
            self._emit(TokenType.ERROR, start)
            return

        if not self._read_digits():
            self._emit(TokenType.ERROR, start)
            return

        if self._input.startswith('.', self._position):
            self._position += 1
            if not self._read_digits():
                self._emit(TokenType.ERROR, start)
                return

        if self._position < self._input_len and self._input[self._position] in 'eE':
            self._position += 1
            if self._position < self._input_len and self._input[self._position] in '+-':
                self._position += 1

            if not self._read_digits():
                self._emit(TokenType.ERROR, start)
                return

        self._emit(TokenType.NUMBER, start)

    def _read_digits(self) -> bool:
        """
        Read a run of decimal digits.

        Returns:
            True if at least one digit was read
        """
        start = self._position
        self._skip_while(self._DIGIT_CHARS)
        return self._position > start

    def _read_word(self) -> None:
        """
        Read `true`, `false` or `null`.  Any other word is an error.
        """
        start = self._position
        while self._position < self._input_len and self._input[self._position].isalpha():
            self._position += 1

        value = self._input[start:self._position]
        if value in ('true', 'false'):
            self._emit(TokenType.BOOLEAN, start)
            return

        self._emit(TokenType.KEYWORD if value == 'null' else TokenType.ERROR, start)
