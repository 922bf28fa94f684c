from typing import Dict, Type, Callable

from syntax.lexer import Lexer
from syntax.programming_language import ProgrammingLanguage


class LexerRegistry:
    """
    A registry for lexer classes.

    Lexer modules register themselves with a class decorator when they are imported, which
    keeps the registry free of imports of the individual lexers.  Importing `syntax` pulls
    in every bundled lexer, so the registry is fully populated once the package is loaded.
    """

    _lexer_classes: Dict[ProgrammingLanguage, Type[Lexer]] = {}

    @classmethod
    def register_lexer(cls, *languages: ProgrammingLanguage) -> Callable[[Type[Lexer]], Type[Lexer]]:
        """
        Register a lexer class for one or more programming languages.

        This is designed to be used as a decorator on lexer classes.

        Args:
            languages: The programming language enum values to register the lexer for

        Returns:
            A decorator function that registers the lexer class

        Example:
            @LexerRegistry.register_lexer(ProgrammingLanguage.PYTHON)
            class PythonLexer(Lexer):
                ...
        """
        def decorator(lexer_class: Type[Lexer]) -> Type[Lexer]:
            for language in languages:
                cls._lexer_classes[language] = lexer_class

            return lexer_class

        return decorator

    @classmethod
    def create_lexer(cls, language: ProgrammingLanguage) -> Lexer | None:
        """
        Create a new lexer instance for the specified programming language.

        Lexers hold the state of a single line, so callers need a fresh instance per line.

        Args:
            language: The programming language to create a lexer for

        Returns:
            A lexer instance, or None if no lexer is registered for the language
        """
        lexer_class = cls._lexer_classes.get(language)
        if lexer_class is None:
            return None

        return lexer_class()

    @classmethod
    def is_supported(cls, language: ProgrammingLanguage) -> bool:
        """
        Check whether a lexer is registered for a programming language.

        Args:
            language: The programming language to check

        Returns:
            True if a lexer is registered for the language
        """
        return language in cls._lexer_classes
