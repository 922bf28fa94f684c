from dataclasses import dataclass
from typing import Callable

from syntax.lexer import Lexer, LexerState, TokenType
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass
class TextLexerState(LexerState):
    """
    State information for the text lexer.
    """


@LexerRegistry.register_lexer(ProgrammingLanguage.TEXT)
class TextLexer(Lexer):
    """
    Lexer for plain text.  Each line is one TEXT token; an empty line has no tokens.
    """

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> TextLexerState:
        self._set_input(input_str)
        self._inner_lex()
        return TextLexerState()

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        return self._read_text

    def _read_text(self) -> None:
        start = self._position
        self._position = self._input_len
        self._emit(TokenType.TEXT, start)
