"""
Conversions between ProgrammingLanguage values and the names screencast documents use
for them ("javascript", "py", ...).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from syntax.programming_language import ProgrammingLanguage


@dataclass(frozen=True)
class LanguageInfo:
    """
    Naming details for one language.

    Attributes:
        language: The language
        name: Canonical lower-case name, as returned by `get_name`
        aliases: Other names accepted by `from_name`
    """
    language: ProgrammingLanguage
    name: str
    aliases: Tuple[str, ...] = ()


class ProgrammingLanguageUtils:
    """
    Look-ups between languages and their names.
    """

    _logger = logging.getLogger("ProgrammingLanguageUtils")

    _LANGUAGES: Tuple[LanguageInfo, ...] = (
        LanguageInfo(ProgrammingLanguage.JAVASCRIPT, "javascript", ("js",)),
        LanguageInfo(ProgrammingLanguage.JSON, "json"),
        LanguageInfo(ProgrammingLanguage.JSX, "jsx"),
        LanguageInfo(ProgrammingLanguage.PYTHON, "python", ("py",)),
        LanguageInfo(ProgrammingLanguage.TEXT, "plaintext", ("text", "txt")),
        LanguageInfo(ProgrammingLanguage.TYPESCRIPT, "typescript", ("ts", "tsx")),
    )

    _BY_NAME: Dict[str, ProgrammingLanguage] = {
        alias: info.language for info in _LANGUAGES for alias in (info.name, *info.aliases)
    }

    _NAMES: Dict[ProgrammingLanguage, str] = {info.language: info.name for info in _LANGUAGES}

    @classmethod
    def from_name(cls, name: str) -> ProgrammingLanguage:
        """
        Convert a language name to a ProgrammingLanguage.

        Names are matched case-insensitively, ignoring surrounding whitespace.  A missing
        or blank name means plain text.

        Args:
            name: The language name, e.g. "javascript" or "py"

        Returns:
            The matching language, or UNKNOWN if the name is not recognized
        """
        normalized = (name or "").strip().lower()
        if not normalized:
            return ProgrammingLanguage.TEXT

        language = cls._BY_NAME.get(normalized)
        if language is None:
            cls._logger.debug("Unrecognized language name: %s", name)
            return ProgrammingLanguage.UNKNOWN

        return language

    @classmethod
    def get_name(cls, language: ProgrammingLanguage) -> str:
        """
        Get the canonical name of a language; UNKNOWN has the empty name.
        """
        return cls._NAMES.get(language, "")
