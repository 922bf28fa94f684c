"""Thread-safe memoization cache for tokenized code."""

import threading
from typing import Callable, ClassVar, Dict, Tuple

from codemorph.codemorph_types import StyledToken, TokenizationPolicy
from syntax.programming_language import ProgrammingLanguage


TokenCacheKey = Tuple[str, ProgrammingLanguage, TokenizationPolicy]
TokenCacheValue = Tuple[StyledToken, ...]


class TokenCache:
    """
    Content-addressed cache of token sequences keyed by (code, language, policy).

    Entries are never evicted.  The cache can be shared between threads: lookups and
    inserts are serialized by a lock, but values are computed outside it, so two threads
    missing on the same key may both tokenize.  Only the first value inserted is kept and
    both callers get that value back.
    """

    _shared: ClassVar["TokenCache | None"] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._entries: Dict[TokenCacheKey, TokenCacheValue] = {}
        self._lock = threading.Lock()

    @classmethod
    def shared(cls) -> "TokenCache":
        """
        Get the process-wide cache.

        Returns:
            The shared TokenCache instance
        """
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()

            return cls._shared

    def get(self, key: TokenCacheKey) -> TokenCacheValue | None:
        """
        Look up a cached token sequence.

        Args:
            key: The (code, language, policy) key

        Returns:
            The cached tokens, or None if the key has not been cached
        """
        with self._lock:
            return self._entries.get(key)

    def get_or_create(self, key: TokenCacheKey, factory: Callable[[], TokenCacheValue]) -> TokenCacheValue:
        """
        Look up a cached token sequence, computing and caching it on a miss.

        Exceptions from `factory` propagate and nothing is cached.

        Args:
            key: The (code, language, policy) key
            factory: Computes the tokens for `key`

        Returns:
            The cached tokens
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = factory()
        with self._lock:
            return self._entries.setdefault(key, value)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
