"""
Timeline queries over raw documents.

A document plays its snapshots back to back.  Each snapshot is on screen for its
`duration`, and the last `transition_time` of that duration is spent morphing into the
next snapshot.
"""

from typing import Tuple

from codemorph.codemorph_types import RawDoc, RawSnapshot


def get_sum_duration(raw: RawDoc) -> float:
    """
    Get the total play time of a document.

    Args:
        raw: The document

    Returns:
        The sum of all snapshot durations
    """
    return sum((snapshot.duration for snapshot in raw.snapshots), 0)


def get_snapshot_at_time(raw: RawDoc, time: float) -> Tuple[int, float]:
    """
    Find the snapshot on screen at a point in time.

    Times before the start fall in the first snapshot (with a negative offset), and times
    past the end clamp to the end of the last snapshot.

    Args:
        raw: The document
        time: Time since the start of the document

    Returns:
        The snapshot index and the time elapsed since that snapshot started, or (-1, 0)
        if the document has no snapshots
    """
    if not raw.snapshots:
        return -1, 0

    start = 0.0
    for index, snapshot in enumerate(raw.snapshots):
        if time < start + snapshot.duration:
            return index, time - start

        start += snapshot.duration

    last_index = len(raw.snapshots) - 1
    return last_index, raw.snapshots[last_index].duration


def is_offset_time_in_transition(snapshot: RawSnapshot, offset_time: float) -> bool:
    """
    Check whether a snapshot is morphing into the next one.

    Args:
        snapshot: The snapshot on screen
        offset_time: Time elapsed since the snapshot started

    Returns:
        True if `offset_time` falls in the transition at the end of the snapshot
    """
    return offset_time > snapshot.duration - snapshot.transition_time
