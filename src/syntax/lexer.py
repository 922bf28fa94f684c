from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, ClassVar, Dict, FrozenSet, List, Set


class TokenType(IntEnum):
    """Kind of lexical token, as used to pick a highlighting style."""
    BOOLEAN = auto()
    COMMENT = auto()
    DECORATOR = auto()
    ERROR = auto()
    FUNCTION = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    NUMBER = auto()
    OPERATOR = auto()
    PREPROCESSOR = auto()
    PROPERTY = auto()
    PUNCTUATION = auto()
    REGEXP = auto()
    STRING = auto()
    TEXT = auto()
    WHITESPACE = auto()


@dataclass
class Token:
    """
    Represents a token in the input line.

    Attributes:
        type: The type of the token
        value: The text of the token
        start: The offset of the token in the input line
    """
    type: TokenType
    value: str
    start: int


@dataclass
class LexerState:
    """
    State carried from the end of one line to the start of the next.
    """


class Lexer(ABC):
    """
    Base lexer class.

    Lexers work one line at a time.  Anything needed to continue a construct onto the
    next line (block comments, multi-line strings) is returned from `lex` and handed
    back in when lexing the following line.

    Every character of the line ends up in exactly one token, whitespace included, so
    token values always concatenate back to the line.  Characters a lexer does not
    understand become ERROR tokens rather than being skipped.
    """

    _WHITESPACE_CHARS: ClassVar[FrozenSet[str]] = frozenset(
        " \t\r\v\f"
        + "".join(chr(c) for c in (0x00A0, 0x1680, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF))
        + "".join(chr(c) for c in range(0x2000, 0x200B))
    )
    _DIGIT_CHARS: ClassVar[FrozenSet[str]] = frozenset("0123456789")
    _HEX_CHARS: ClassVar[FrozenSet[str]] = frozenset("0123456789abcdefABCDEF")

    # Digits allowed in numeric literals, underscores being separators
    _DECIMAL_LITERAL_CHARS: ClassVar[FrozenSet[str]] = frozenset("0123456789_")
    _RADIX_LITERAL_CHARS: ClassVar[Dict[str, FrozenSet[str]]] = {
        "x": frozenset("0123456789abcdefABCDEF_"),
        "o": frozenset("01234567_"),
        "b": frozenset("01_"),
    }

    # Subclasses list their operators; the map is built from the list
    _OPERATORS: ClassVar[List[str]] = []
    _OPERATORS_MAP: ClassVar[Dict[str, List[str]]] = {}

    # Operators that are styled as punctuation rather than as operators
    _PUNCTUATION: ClassVar[Set[str]] = {'(', ')', '{', '}', '[', ']', ';', ',', ':', '.'}

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []
        self._next_token: int = 0

    @abstractmethod
    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """

    @abstractmethod
    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> LexerState | None:
        """
        Lex a single line of input.

        Args:
            prev_lexer_state: The lexer state at the end of the previous line, if any
            input_str: The line to lex, without its line break

        Returns:
            The lexer state at the end of the line
        """

    def _set_input(self, input_str: str) -> None:
        self._input = input_str
        self._input_len = len(input_str)
        self._position = 0

    def _inner_lex(self) -> None:
        """
        Lex from the current position to the end of the line.
        """
        while self._position < self._input_len:
            ch = self._input[self._position]
            self._get_lexing_function(ch)()

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the line.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token

    def _emit(self, token_type: TokenType, start: int) -> None:
        """
        Add a token covering the input from `start` to the current position, unless that
        span is empty.

        Args:
            token_type: The type of the token
            start: Offset of the first character of the token
        """
        if self._position > start:
            self._tokens.append(Token(type=token_type, value=self._input[start:self._position], start=start))

    def _skip_while(self, chars: FrozenSet[str] | Set[str]) -> None:
        """
        Advance past any characters in `chars`.

        Args:
            chars: The characters to skip
        """
        while self._position < self._input_len and self._input[self._position] in chars:
            self._position += 1

    def _skip_identifier_chars(self, extra: str = "") -> None:
        """
        Advance past identifier characters (letters, digits, underscores, and `extra`).

        Args:
            extra: Further characters allowed in identifiers
        """
        while self._position < self._input_len:
            ch = self._input[self._position]
            if not (ch.isalnum() or ch == '_' or ch in extra):
                break

            self._position += 1

    def _peek_significant(self) -> str:
        """
        Get the next non-whitespace character after the current position.

        Returns:
            The character, or an empty string if the rest of the line is whitespace
        """
        index = self._position
        while index < self._input_len and self._input[index] in self._WHITESPACE_CHARS:
            index += 1

        return self._input[index] if index < self._input_len else ""

    def _last_significant_token(self) -> Token | None:
        """
        Get the most recent token on this line that is not whitespace.

        Returns:
            The token, or None if there is none
        """
        for token in reversed(self._tokens):
            if token.type != TokenType.WHITESPACE:
                return token

        return None

    def _read_string(self) -> None:
        """
        Reads a single-line string token.  An unterminated string runs to the end of the line.
        """
        self._read_quoted(self._position)

    def _read_quoted(self, start: int) -> None:
        """
        Reads a single-line string whose opening quote is at the current position.

        Args:
            start: Offset the token starts at, which is before the quote when the string
                has a prefix
        """
        quote = self._input[self._position]
        self._position += 1

        while self._position < self._input_len and self._input[self._position] != quote:
            if self._input[self._position] == '\\':
                self._position += 1

            self._position += 1

        # Skip the closing quote if found; an escape at the end of the line can overshoot
        self._position = min(self._position + 1, self._input_len)
        self._emit(TokenType.STRING, start)

    def _read_whitespace(self) -> None:
        """
        Reads a run of whitespace.
        """
        start = self._position
        self._position += 1
        self._skip_while(self._WHITESPACE_CHARS)
        self._emit(TokenType.WHITESPACE, start)

    def _read_line_comment(self) -> None:
        """
        Reads a comment that runs to the end of the line.
        """
        start = self._position
        self._position = self._input_len
        self._emit(TokenType.COMMENT, start)

    def _read_operator(self) -> None:
        """
        Reads the longest operator at the current position.

        Anything that is not a known operator becomes a single-character ERROR token.
        """
        start = self._position
        for op in self._OPERATORS_MAP.get(self._input[self._position], []):
            if self._input.startswith(op, self._position):
                self._position += len(op)
                self._emit(TokenType.PUNCTUATION if op in self._PUNCTUATION else TokenType.OPERATOR, start)
                return

        self._read_error()

    def _read_error(self) -> None:
        start = self._position
        self._position += 1
        self._emit(TokenType.ERROR, start)

    def _skip_number(self) -> None:
        """
        Advance past a numeric literal.

        Handles 0x, 0o and 0b integers, and decimals with an optional fraction and
        exponent.  A dot followed by an identifier or another dot is left alone, as is an
        `e` that is not followed by exponent digits.
        """
        if self._input[self._position] == '0' and self._position + 1 < self._input_len:
            radix_chars = self._RADIX_LITERAL_CHARS.get(self._input[self._position + 1].lower())
            if radix_chars is not None:
                self._position += 2
                self._skip_while(radix_chars)
                return

        self._skip_while(self._DECIMAL_LITERAL_CHARS)

        if self._position < self._input_len and self._input[self._position] == '.':
            following = self._input[self._position + 1:self._position + 2]
            if following != '.' and not self._is_identifier_start(following):
                self._position += 1
                self._skip_while(self._DECIMAL_LITERAL_CHARS)

        if self._position < self._input_len and self._input[self._position] in 'eE':
            exponent = self._position + 1
            if exponent < self._input_len and self._input[exponent] in '+-':
                exponent += 1

            if exponent < self._input_len and self._is_digit(self._input[exponent]):
                self._position = exponent
                self._skip_while(self._DECIMAL_LITERAL_CHARS)

    @staticmethod
    def build_operator_map(operators: List[str]) -> Dict[str, List[str]]:
        """
        Build an operator map from a list of operators.

        Args:
            operators: List of operator strings

        Returns:
            A dictionary mapping first characters to lists of operators
            starting with that character, sorted by length (longest first)
        """
        operator_map: Dict[str, List[str]] = {}
        for op in operators:
            if not op:
                continue

            operator_map.setdefault(op[0], []).append(op)

        for operators_list in operator_map.values():
            operators_list.sort(key=len, reverse=True)

        return operator_map

    def _is_identifier_start(self, ch: str) -> bool:
        """
        Determines if a character can start an identifier.
        """
        return ch.isalpha() or ch == '_'

    def _is_digit(self, ch: str) -> bool:
        """
        Determines if a character is a decimal digit.
        """
        return ch in self._DIGIT_CHARS

    def _is_hex_digit(self, ch: str) -> bool:
        """
        Determines if a character is a hexadecimal digit.
        """
        return ch in self._HEX_CHARS

    def _is_whitespace(self, ch: str) -> bool:
        """
        Determines if a character is whitespace other than a line break.
        """
        return ch in self._WHITESPACE_CHARS
