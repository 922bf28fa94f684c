"""Lossless, memoized tokenization of snapshot code."""

import logging
from typing import Dict, FrozenSet, List, Tuple

from codemorph.codemorph_exceptions import TokenizationError
from codemorph.codemorph_types import LINE_BREAK, StyledToken, TokenizationPolicy
from codemorph.token_cache import TokenCache
from syntax.lexer import LexerState, TokenType
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils


class Tokenizer:
    """
    Turns code into styled tokens whose values concatenate back to the code.

    Code is lexed one line at a time, carrying lexer state across lines, and a `newline`
    token is emitted for each line break.  Results are memoized in a TokenCache keyed by
    the exact code, language and policy, fallback results included, so the same code is
    only ever lexed once per cache.
    """

    NEWLINE_TOKEN = StyledToken(value=LINE_BREAK, types=frozenset({"newline"}))
    PLAIN_TEXT_TYPES: FrozenSet[str] = frozenset({"text"})

    _TYPE_LABELS: Dict[TokenType, FrozenSet[str]] = {
        token_type: frozenset({token_type.name.lower()}) for token_type in TokenType
    }

    def __init__(
        self,
        cache: TokenCache | None = None,
        policy: TokenizationPolicy = TokenizationPolicy.FALLBACK
    ) -> None:
        """
        Initialize the tokenizer.

        Args:
            cache: Cache to memoize results in; defaults to the process-wide cache
            policy: How to handle code that cannot be tokenized
        """
        self._cache = cache if cache is not None else TokenCache.shared()
        self._policy = policy
        self._logger = logging.getLogger("Tokenizer")

    @property
    def policy(self) -> TokenizationPolicy:
        """Get the failure policy."""
        return self._policy

    def tokenize(self, code: str, language: ProgrammingLanguage) -> Tuple[StyledToken, ...]:
        """
        Tokenize code.

        Args:
            code: The code to tokenize
            language: The language of the code

        Returns:
            Tokens whose values concatenate to exactly `code`

        Raises:
            TokenizationError: If the code cannot be tokenized and the policy is STRICT
        """
        return self._cache.get_or_create(
            (code, language, self._policy),
            lambda: self._tokenize_uncached(code, language)
        )

    def _tokenize_uncached(self, code: str, language: ProgrammingLanguage) -> Tuple[StyledToken, ...]:
        try:
            return self._lex(code, language)

        except TokenizationError as e:
            if self._policy == TokenizationPolicy.STRICT:
                raise

            self._logger.warning("Falling back to plain text: %s", str(e))
            return self._plain_text(code)

    def _plain_text(self, code: str) -> Tuple[StyledToken, ...]:
        if not code:
            return ()

        return (StyledToken(value=code, types=self.PLAIN_TEXT_TYPES),)

    def _lex(self, code: str, language: ProgrammingLanguage) -> Tuple[StyledToken, ...]:
        """
        Lex code line by line.

        Args:
            code: The code to lex
            language: The language of the code

        Returns:
            The styled tokens

        Raises:
            TokenizationError: If there is no lexer for the language, the lexer fails, or
                the lexer output does not reproduce the code
        """
        language_name = ProgrammingLanguageUtils.get_name(language) or language.name.lower()
        if not LexerRegistry.is_supported(language):
            raise TokenizationError(
                f"No lexer available for language '{language_name}'",
                {"language": language_name, "reason": "unsupported_language"}
            )

        tokens: List[StyledToken] = []
        lexer_state: LexerState | None = None

        for line_number, line in enumerate(code.split(LINE_BREAK)):
            if line_number > 0:
                tokens.append(self.NEWLINE_TOKEN)

            lexer = LexerRegistry.create_lexer(language)
            assert lexer is not None, f"Lexer registered for {language_name} could not be created"

            try:
                lexer_state = lexer.lex(lexer_state, line)

            except Exception as e:
                raise TokenizationError(
                    f"Lexer for '{language_name}' failed on line {line_number + 1}: {str(e)}",
                    {"language": language_name, "reason": "lexer_error", "line": line_number + 1}
                ) from e

            token = lexer.get_next_token()
            while token is not None:
                if token.value:
                    tokens.append(StyledToken(value=token.value, types=self._TYPE_LABELS[token.type]))

                token = lexer.get_next_token()

        if "".join(token.value for token in tokens) != code:
            raise TokenizationError(
                f"Lexer for '{language_name}' did not reproduce its input",
                {"language": language_name, "reason": "lossy_output"}
            )

        self._logger.debug("Tokenized %d characters of %s into %d tokens", len(code), language_name, len(tokens))
        return tuple(tokens)
