"""
JSON syntax highlighting module.
"""

from syntax.json.json_lexer import JSONLexer, JSONLexerState

__all__ = [
    'JSONLexer',
    'JSONLexerState',
]
