"""Syntax framework: line-oriented lexers for the languages screencasts can show."""

from syntax.lexer import Token, TokenType, Lexer, LexerState
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils

# Importing the lexers registers them with the LexerRegistry.
# pylint: disable=unused-import
from syntax.javascript.javascript_lexer import JavaScriptLexer
from syntax.json.json_lexer import JSONLexer
from syntax.python.python_lexer import PythonLexer
from syntax.text.text_lexer import TextLexer
# pylint: enable=unused-import


__all__ = [
    "JSONLexer",
    "JavaScriptLexer",
    "Lexer",
    "LexerRegistry",
    "LexerState",
    "ProgrammingLanguage",
    "ProgrammingLanguageUtils",
    "PythonLexer",
    "TextLexer",
    "Token",
    "TokenType"
]
