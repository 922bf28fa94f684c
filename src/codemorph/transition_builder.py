"""Packages an alignment into a Transition."""

from typing import Sequence

from codemorph.codemorph_types import DiffPair, Line, Transition


class TransitionBuilder:
    """Assembles Transition values from an alignment and the two line sequences."""

    def build(self, diffs: Sequence[DiffPair], left_lines: Sequence[Line], right_lines: Sequence[Line]) -> Transition:
        """
        Build a transition.

        Args:
            diffs: Matched line pairs from the LineAligner
            left_lines: Lines before the transition
            right_lines: Lines after the transition

        Returns:
            The transition
        """
        return Transition(diffs=tuple(diffs), left=tuple(left_lines), right=tuple(right_lines))
