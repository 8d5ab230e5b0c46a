"""
Splicing two timelines into one.
"""
from typing import TYPE_CHECKING, List, Optional

from animation_engine.easing.curves import EasingKind, Linear
from animation_engine.timeline.segment import Segment
from animation_engine.utils.logger import get_logger

if TYPE_CHECKING:
    from animation_engine.timeline.timeline import Timeline

logger = get_logger(__name__)


def combine_timelines(
    first: 'Timeline',
    second: 'Timeline',
    bridging_kind: Optional[EasingKind] = None
) -> 'Timeline':
    """
    Merge two timelines, bridging the gap or overlap between them.

    The operand that starts earlier (`first` on a tie) keeps its trajectory
    up to the later operand's start. A segment eased with `bridging_kind`
    then leads to the later operand's start value, and the later operand's
    segments follow.

    Args:
        first: One timeline
        second: The other timeline
        bridging_kind: Easing for the bridging segment (default Linear)

    Returns:
        A new merged Timeline. Neither operand is modified.
    """
    kind = bridging_kind if bridging_kind is not None else Linear()

    if second.start_time < first.start_time:
        earlier, later = second, first
    else:
        earlier, later = first, second

    merged = earlier.copy()
    incoming = [segment.copy() for segment in later.segments]

    if earlier.is_overlapping(later):
        logger.debug(
            f"combine: overlapping spans, splicing at {later.start_time} "
            f"with {len(incoming)} incoming segments"
        )
        _splice_overlapping(merged, later, kind, incoming)
    else:
        logger.debug(
            f"combine: disjoint spans, bridging {earlier.end_time()} -> {later.start_time}"
        )
        merged.insert_point(later.start_time, later.start_value, kind)
        merged.segments.extend(incoming)

    return merged


def _splice_overlapping(
    merged: 'Timeline',
    later: 'Timeline',
    kind: EasingKind,
    incoming: List[Segment]
) -> None:
    stages = merged.stages()
    bridge_index = None
    for i in range(1, len(stages)):
        if stages[i] > later.start_time:
            bridge_index = i - 1
            break

    if bridge_index is None and not incoming:
        # nothing to splice; the later start value owns the shared keyframe
        if merged.segments:
            merged.segments[-1].end_value = later.start_value
        else:
            merged.start_value = later.start_value
        return

    if bridge_index is None:
        # spans only touch at merged's end
        merged.segments.append(Segment(
            end_value=later.start_value,
            sustain_time=later.start_time - merged.end_time(),
            kind=kind,
        ))
        next_index = len(merged.segments)
    else:
        merged.segments[bridge_index] = Segment(
            end_value=later.start_value,
            sustain_time=later.start_time - stages[bridge_index],
            kind=kind,
        )
        next_index = bridge_index + 1

    for segment in incoming:
        if next_index < len(merged.segments):
            merged.segments[next_index] = segment
        else:
            merged.segments.append(segment)
        next_index += 1
