"""Splits a token sequence into visual lines."""

from typing import Iterable, List

from codemorph.codemorph_types import LINE_BREAK, Line, StyledToken


class LinePartitioner:
    """
    Groups tokens into lines.

    A token that spans line breaks is cut at each break; every fragment keeps the styling
    of the original token.  Code with N line breaks always yields N + 1 lines, so empty
    code yields a single empty line.
    """

    def partition(self, tokens: Iterable[StyledToken]) -> List[Line]:
        """
        Partition tokens into lines.

        Args:
            tokens: Tokens of a whole snapshot, in order

        Returns:
            One tuple of tokens per visual line
        """
        lines: List[Line] = []
        current: List[StyledToken] = []

        for token in tokens:
            if LINE_BREAK not in token.value:
                current.append(token)
                continue

            fragments = token.value.split(LINE_BREAK)
            for fragment_number, fragment in enumerate(fragments):
                if fragment_number > 0:
                    lines.append(tuple(current))
                    current = []

                if fragment:
                    current.append(StyledToken(value=fragment, types=token.types))

        lines.append(tuple(current))
        return lines
