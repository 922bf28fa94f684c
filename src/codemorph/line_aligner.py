"""Line alignment between two adjacent snapshots."""

from typing import Dict, List, Sequence, Tuple

from codemorph.codemorph_types import DiffPair, Line, line_text


# (number of matched lines, negated total displacement).  Larger is better.
_Score = Tuple[int, int]


class LineAligner:
    """
    Finds the lines that persist across a transition.

    The alignment is a longest common subsequence of the two line sequences, where two
    lines match when their rendered text is identical.  When several longest alignments
    exist, the one with the smallest total displacement (the sum of |left index - right
    index| over all matched pairs) is chosen, so persisting lines move as little as
    possible during the animation.  Any remaining tie is broken by preferring, from the
    top of the document down, to match a line rather than skip it, and to skip a left
    line rather than a right one.

    Runs in O(L * R) time and space over the lines that can match at all, after a shared
    prefix, and a shared suffix when both sides have the same number of lines, have been
    matched directly.  An edit that changes the line count leaves the suffix in the table,
    so inserting one line near the top of a file with a couple of thousand lines takes
    seconds.
    """

    def align(self, left_lines: Sequence[Line], right_lines: Sequence[Line]) -> List[DiffPair]:
        """
        Align two line sequences.

        Args:
            left_lines: Lines before the transition
            right_lines: Lines after the transition

        Returns:
            Matched line pairs, with both indices strictly increasing
        """
        left_keys, right_keys = self._line_keys(left_lines, right_lines)

        # Matching the common prefix pairs each line with itself at zero displacement, and
        # some optimal alignment always contains those pairs.
        prefix_len = 0
        max_prefix = min(len(left_keys), len(right_keys))
        while prefix_len < max_prefix and left_keys[prefix_len] == right_keys[prefix_len]:
            prefix_len += 1

        # A common suffix only pairs lines at zero displacement when both sides have the
        # same length, and then every optimal alignment contains those pairs.  With unequal
        # lengths the suffix pairs are displaced and have to go through the table.
        left_end = len(left_keys)
        right_end = len(right_keys)
        if left_end == right_end:
            while left_end > prefix_len and left_keys[left_end - 1] == right_keys[left_end - 1]:
                left_end -= 1

            right_end = left_end

        pairs = [DiffPair(left_index=i, right_index=i) for i in range(prefix_len)]

        # Lines whose text never appears on the other side can't be matched, so leave them
        # out of the table.  Candidates keep their original indices for the displacement.
        left_remaining = set(left_keys[prefix_len:left_end])
        right_remaining = set(right_keys[prefix_len:right_end])
        left_candidates = [i for i in range(prefix_len, left_end) if left_keys[i] in right_remaining]
        right_candidates = [j for j in range(prefix_len, right_end) if right_keys[j] in left_remaining]

        pairs.extend(self._align_candidates(left_keys, right_keys, left_candidates, right_candidates))
        pairs.extend(DiffPair(left_index=i, right_index=i) for i in range(left_end, len(left_keys)))

        self._check_alignment(pairs, left_lines, right_lines)
        return pairs

    def _line_keys(self, left_lines: Sequence[Line], right_lines: Sequence[Line]) -> Tuple[List[int], List[int]]:
        """
        Map each line to an integer that is equal for lines with equal text.

        Args:
            left_lines: Lines before the transition
            right_lines: Lines after the transition

        Returns:
            Keys for the left lines and keys for the right lines
        """
        text_ids: Dict[str, int] = {}
        left_keys = [text_ids.setdefault(line_text(line), len(text_ids)) for line in left_lines]
        right_keys = [text_ids.setdefault(line_text(line), len(text_ids)) for line in right_lines]
        return left_keys, right_keys

    def _align_candidates(
        self,
        left_keys: List[int],
        right_keys: List[int],
        left_candidates: List[int],
        right_candidates: List[int]
    ) -> List[DiffPair]:
        """
        Find the best alignment between candidate lines.

        Args:
            left_keys: Keys of all left lines
            right_keys: Keys of all right lines
            left_candidates: Indices of the left lines that may match
            right_candidates: Indices of the right lines that may match

        Returns:
            The matched pairs, in order
        """
        n = len(left_candidates)
        m = len(right_candidates)
        if n == 0 or m == 0:
            return []

        # best[a][b] is the best score for aligning left_candidates[a:] with right_candidates[b:]
        best: List[List[_Score]] = [[(0, 0)] * (m + 1) for _ in range(n + 1)]

        for a in range(n - 1, -1, -1):
            row = best[a]
            below = best[a + 1]
            left_index = left_candidates[a]
            left_key = left_keys[left_index]
            for b in range(m - 1, -1, -1):
                score = max(below[b], row[b + 1])
                right_index = right_candidates[b]
                if left_key == right_keys[right_index]:
                    diagonal = below[b + 1]
                    take = (diagonal[0] + 1, diagonal[1] - abs(left_index - right_index))
                    if take >= score:
                        score = take

                row[b] = score

        pairs: List[DiffPair] = []
        a = 0
        b = 0
        while a < n and b < m:
            left_index = left_candidates[a]
            right_index = right_candidates[b]
            if left_keys[left_index] == right_keys[right_index]:
                diagonal = best[a + 1][b + 1]
                if best[a][b] == (diagonal[0] + 1, diagonal[1] - abs(left_index - right_index)):
                    pairs.append(DiffPair(left_index=left_index, right_index=right_index))
                    a += 1
                    b += 1
                    continue

            if best[a][b] == best[a + 1][b]:
                a += 1
                continue

            b += 1

        return pairs

    def _check_alignment(
        self,
        pairs: List[DiffPair],
        left_lines: Sequence[Line],
        right_lines: Sequence[Line]
    ) -> None:
        previous: DiffPair | None = None
        for pair in pairs:
            assert 0 <= pair.left_index < len(left_lines), f"Left index out of range: {pair}"
            assert 0 <= pair.right_index < len(right_lines), f"Right index out of range: {pair}"
            assert line_text(left_lines[pair.left_index]) == line_text(right_lines[pair.right_index]), \
                f"Aligned lines differ: {pair}"
            if previous is not None:
                assert pair.left_index > previous.left_index and pair.right_index > previous.right_index, \
                    f"Alignment is not monotonic: {previous} then {pair}"

            previous = pair
