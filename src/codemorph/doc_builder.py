"""Builds screencast documents from raw documents."""

import logging
from typing import List

from codemorph.codemorph_exceptions import DocValidationError
from codemorph.codemorph_types import LINE_BREAK, Doc, Line, RawDoc, Snapshot, TokenizationPolicy, Transition
from codemorph.line_aligner import LineAligner
from codemorph.line_partitioner import LinePartitioner
from codemorph.token_cache import TokenCache
from codemorph.tokenizer import Tokenizer
from codemorph.transition_builder import TransitionBuilder


class DocBuilder:
    """
    Turns a RawDoc into a Doc.

    Each snapshot is tokenized and line-counted, then every pair of adjacent snapshots is
    aligned line by line to give the transition between them.  The build is all or
    nothing: any error aborts it and no partial Doc is returned.
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        partitioner: LinePartitioner | None = None,
        aligner: LineAligner | None = None,
        transition_builder: TransitionBuilder | None = None
    ) -> None:
        """
        Initialize the builder.

        Args:
            tokenizer: Tokenizer to use; defaults to one backed by the process-wide cache
            partitioner: Line partitioner to use
            aligner: Line aligner to use
            transition_builder: Transition builder to use
        """
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._partitioner = partitioner if partitioner is not None else LinePartitioner()
        self._aligner = aligner if aligner is not None else LineAligner()
        self._transition_builder = transition_builder if transition_builder is not None else TransitionBuilder()
        self._logger = logging.getLogger("DocBuilder")

    def build(self, raw: RawDoc) -> Doc:
        """
        Build a document.

        Args:
            raw: The raw document.  It is not modified, and the returned Doc refers to it
                rather than to a copy.

        Returns:
            The built document

        Raises:
            DocValidationError: If the raw document has no snapshots
            TokenizationError: If a snapshot cannot be tokenized under a strict tokenizer
        """
        if not raw.snapshots:
            raise DocValidationError(
                "a document requires at least one snapshot",
                {"snapshot_count": 0}
            )

        snapshots: List[Snapshot] = []
        for raw_snapshot in raw.snapshots:
            tokens = self._tokenizer.tokenize(raw_snapshot.code, raw.language)
            snapshots.append(Snapshot(tokens=tokens, lines_count=raw_snapshot.code.count(LINE_BREAK)))

        transitions: List[Transition] = []
        if len(snapshots) > 1:
            lines: List[List[Line]] = [self._partitioner.partition(snapshot.tokens) for snapshot in snapshots]
            for i in range(1, len(snapshots)):
                diffs = self._aligner.align(lines[i - 1], lines[i])
                transitions.append(self._transition_builder.build(diffs, lines[i - 1], lines[i]))

        self._logger.debug(
            "Built document with %d snapshots and %d transitions",
            len(snapshots), len(transitions)
        )
        return Doc(raw=raw, snapshots=tuple(snapshots), transitions=tuple(transitions))


def create_doc(
    raw: RawDoc,
    token_cache: TokenCache | None = None,
    policy: TokenizationPolicy = TokenizationPolicy.FALLBACK
) -> Doc:
    """
    Build a document with default collaborators.

    Args:
        raw: The raw document
        token_cache: Cache for tokenized code; defaults to the process-wide cache
        policy: How to handle code that cannot be tokenized

    Returns:
        The built document
    """
    return DocBuilder(tokenizer=Tokenizer(cache=token_cache, policy=policy)).build(raw)
