"""
Python syntax highlighting module.
"""

from syntax.python.python_lexer import PythonLexer, PythonLexerState

__all__ = [
    'PythonLexer',
    'PythonLexerState',
]
