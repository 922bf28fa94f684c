"""Shared fixtures and utilities for lexer tests."""

import pytest
from typing import List, Tuple, Type

from syntax.lexer import Lexer, LexerState, Token, TokenType


class LexerTestHelpers:
    """Helper utilities for lexer testing."""

    @staticmethod
    def lex_line(lexer_class: Type[Lexer], line: str, state: LexerState | None = None) -> Tuple[List[Token], LexerState]:
        """Lex a single line with a fresh lexer."""
        lexer = lexer_class()
        new_state = lexer.lex(state, line)
        return list(lexer._tokens), new_state

    @staticmethod
    def lex_lines(lexer_class: Type[Lexer], lines: List[str]) -> List[List[Token]]:
        """Lex several lines, carrying state from one line to the next."""
        state = None
        result = []
        for line in lines:
            lexer = lexer_class()
            state = lexer.lex(state, line)
            result.append(list(lexer._tokens))

        return result

    @staticmethod
    def significant(tokens: List[Token]) -> List[Token]:
        """Drop whitespace tokens."""
        return [t for t in tokens if t.type != TokenType.WHITESPACE]

    @staticmethod
    def joined(tokens: List[Token]) -> str:
        """Concatenate token values."""
        return "".join(t.value for t in tokens)


@pytest.fixture
def helpers():
    """Provide lexer test helper utilities."""
    return LexerTestHelpers
