"""
Screencast document building.

This package turns a sequence of code snapshots into a document a renderer can animate:
each snapshot is tokenized for highlighting, and each pair of adjacent snapshots is
aligned line by line so the renderer knows which lines move, fade out, and fade in.
"""

from codemorph.codemorph_exceptions import (
    CodeMorphError,
    DocValidationError,
    TokenizationError,
)
from codemorph.codemorph_types import (
    DiffPair,
    Doc,
    LINE_BREAK,
    Line,
    Padding,
    RawDoc,
    RawSnapshot,
    Snapshot,
    StyledToken,
    TokenizationPolicy,
    Transition,
    line_text,
)
from codemorph.doc_builder import DocBuilder, create_doc
from codemorph.line_aligner import LineAligner
from codemorph.line_partitioner import LinePartitioner
from codemorph.raw_doc_timeline import (
    get_snapshot_at_time,
    get_sum_duration,
    is_offset_time_in_transition,
)
from codemorph.token_cache import TokenCache
from codemorph.tokenizer import Tokenizer
from codemorph.transition_builder import TransitionBuilder

__all__ = [
    # Exceptions
    'CodeMorphError',
    'DocValidationError',
    'TokenizationError',
    # Types
    'DiffPair',
    'Doc',
    'Line',
    'LINE_BREAK',
    'Padding',
    'RawDoc',
    'RawSnapshot',
    'Snapshot',
    'StyledToken',
    'Transition',
    'line_text',
    # Core classes
    'DocBuilder',
    'LineAligner',
    'LinePartitioner',
    'TokenCache',
    'TokenizationPolicy',
    'Tokenizer',
    'TransitionBuilder',
    # Functions
    'create_doc',
    'get_snapshot_at_time',
    'get_sum_duration',
    'is_offset_time_in_transition',
]
