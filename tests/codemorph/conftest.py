"""Shared fixtures and utilities for document building tests."""

import pytest
from typing import List, Sequence

from codemorph.codemorph_types import Line, Padding, RawDoc, RawSnapshot, StyledToken
from codemorph.token_cache import TokenCache
from codemorph.tokenizer import Tokenizer
from syntax.programming_language import ProgrammingLanguage


class CodeMorphTestHelpers:
    """Helper utilities for document building tests."""

    @staticmethod
    def make_lines(texts: Sequence[str]) -> List[Line]:
        """Create lines holding a single untyped token each (empty text gives an empty line)."""
        return [(StyledToken(value=text),) if text else () for text in texts]

    @staticmethod
    def make_raw_doc(
        codes: Sequence[str],
        language: ProgrammingLanguage = ProgrammingLanguage.JAVASCRIPT
    ) -> RawDoc:
        """Create a raw document with one snapshot per code string."""
        return RawDoc(
            language=language,
            font_size=16,
            line_height=20,
            width=800,
            height=600,
            theme='default',
            padding=Padding(top=10, left=10, bottom=10),
            snapshots=tuple(
                RawSnapshot(id=str(i + 1), code=code, duration=1000, transition_time=500)
                for i, code in enumerate(codes)
            )
        )

    @staticmethod
    def joined(tokens: Sequence[StyledToken]) -> str:
        """Concatenate token values."""
        return "".join(t.value for t in tokens)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return CodeMorphTestHelpers


@pytest.fixture
def token_cache():
    """Create an empty token cache."""
    return TokenCache()


@pytest.fixture
def tokenizer(token_cache):
    """Create a tokenizer backed by an empty cache."""
    return Tokenizer(cache=token_cache)


@pytest.fixture
def mock_raw_doc(helpers):
    """Three snapshots that grow one line at a time."""
    return helpers.make_raw_doc([
        'const a = 1;',
        'const a = 2;\nconst b = 3;',
        'const a = 2;\nconst b = 3;\nconst c = 4;',
    ])
