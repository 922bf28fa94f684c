"""
Plain text module.
"""

from syntax.text.text_lexer import TextLexer, TextLexerState

__all__ = [
    'TextLexer',
    'TextLexerState',
]
