"""Shared dataclasses for screencast documents."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Tuple

from syntax.programming_language import ProgrammingLanguage


@dataclass(frozen=True)
class RawSnapshot:
    """One state of the code, as supplied by the caller."""

    id: str
    code: str
    duration: float  # How long the snapshot is shown, transition included
    transition_time: float  # Length of the morph into the next snapshot, at the end of `duration`


@dataclass(frozen=True)
class Padding:
    """Padding around the rendered code."""

    top: float = 0
    left: float = 0
    bottom: float = 0


@dataclass(frozen=True)
class RawDoc:
    """A screencast document as supplied by the caller."""

    language: ProgrammingLanguage
    font_size: float
    line_height: float
    width: float
    height: float
    theme: str
    padding: Padding = field(default_factory=Padding)
    snapshots: Tuple[RawSnapshot, ...] = ()


class TokenizationPolicy(Enum):
    """What the tokenizer does with code it cannot tokenize."""
    FALLBACK = "fallback"  # Emit the whole code as a single plain-text token
    STRICT = "strict"  # Raise TokenizationError


@dataclass(frozen=True)
class StyledToken:
    """
    A piece of source text with its styling labels.

    `types` only drives highlighting.  Comparisons between lines never look at it.
    """

    value: str
    types: FrozenSet[str] = frozenset()


# The only line break.  A "\r" is ordinary line content.
LINE_BREAK = "\n"

# One visual row: tokens whose values contain no line break
Line = Tuple[StyledToken, ...]


def line_text(line: Line) -> str:
    """
    Get the rendered text of a line.

    Args:
        line: The line

    Returns:
        The concatenated token values
    """
    return "".join(token.value for token in line)


@dataclass(frozen=True)
class Snapshot:
    """A tokenized snapshot."""

    tokens: Tuple[StyledToken, ...]
    lines_count: int  # Number of line breaks in the code, not the number of lines


@dataclass(frozen=True)
class DiffPair:
    """A line that persists across a transition."""

    left_index: int  # Index into Transition.left
    right_index: int  # Index into Transition.right


@dataclass(frozen=True)
class Transition:
    """
    Alignment between two adjacent snapshots.

    Lines of `left` missing from `diffs` are removed by the transition, lines of `right`
    missing from `diffs` are added by it.
    """

    diffs: Tuple[DiffPair, ...]
    left: Tuple[Line, ...]
    right: Tuple[Line, ...]

    def removed_indices(self) -> List[int]:
        """
        Get the indices of left lines that have no counterpart on the right.

        Returns:
            Sorted list of indices into `left`
        """
        matched = {pair.left_index for pair in self.diffs}
        return [i for i in range(len(self.left)) if i not in matched]

    def added_indices(self) -> List[int]:
        """
        Get the indices of right lines that have no counterpart on the left.

        Returns:
            Sorted list of indices into `right`
        """
        matched = {pair.right_index for pair in self.diffs}
        return [i for i in range(len(self.right)) if i not in matched]


@dataclass(frozen=True)
class Doc:
    """A fully built screencast document."""

    raw: RawDoc
    snapshots: Tuple[Snapshot, ...]
    transitions: Tuple[Transition, ...]
