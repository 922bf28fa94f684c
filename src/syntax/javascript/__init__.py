"""
JavaScript syntax highlighting module.

The JavaScript lexer is also used for TypeScript and JSX sources.
"""

from syntax.javascript.javascript_lexer import JavaScriptLexer, JavaScriptLexerState

__all__ = [
    'JavaScriptLexer',
    'JavaScriptLexerState',
]
