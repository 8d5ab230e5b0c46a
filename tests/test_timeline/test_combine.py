"""
Unit tests for merging two timelines.
"""
from animation_engine.easing import Linear, Mutation, Power
from animation_engine.timeline import Segment, Timeline, combine_timelines
from animation_engine.timing import Duration


def seconds(value):
    return Duration.seconds(value)


def rising() -> Timeline:
    """[0s, 1s], 0 -> 1."""
    return Timeline(start_time=seconds(0), start_value=0.0, segments=[Segment(1.0, seconds(1))])


def falling() -> Timeline:
    """[3s, 4s], 1 -> 0."""
    return Timeline(start_time=seconds(3), start_value=1.0, segments=[Segment(0.0, seconds(1))])


def test_disjoint_timelines_are_bridged():
    """Test that disjoint timelines are joined by a bridging segment."""
    a = rising()
    b = falling()
    merged = a.combine(b, Linear())

    assert merged.start_time == seconds(0)
    assert merged.end_time() == seconds(4)
    assert merged.stages() == [seconds(0), seconds(1), seconds(3), seconds(4)]
    assert merged.segment_count() == 3
    assert merged.segments[1] == Segment(1.0, seconds(2), Linear())
    assert merged.segments[1].end_value == b.start_value
    assert merged.value_at(seconds(2)) == 1.0
    assert merged.value_at(seconds(3.5)) == 0.5


def test_combine_leaves_operands_untouched():
    """Test that combining does not modify either operand."""
    a = rising()
    b = falling()
    a.combine(b, Linear())
    assert a == rising()
    assert b == falling()


def test_combine_is_symmetric_in_operand_order():
    """Test that operand order does not change the merged result."""
    assert falling().combine(rising(), Linear()) == rising().combine(falling(), Linear())


def test_bridging_kind_is_used_for_gap():
    """Test that the bridging kind eases the gap."""
    merged = combine_timelines(rising(), falling(), Mutation())
    assert merged.segments[1].kind == Mutation()
    assert merged.value_at(seconds(2.9)) == 1.0


def test_default_bridging_kind_is_linear():
    """Test that the bridge defaults to linear easing."""
    merged = rising().combine(falling())
    assert merged.segments[1].kind == Linear()


def test_gap_bridge_eases_to_later_start_value():
    """Test that the bridge ends on the later start value."""
    later = Timeline(start_time=seconds(3), start_value=5.0, segments=[Segment(0.0, seconds(1))])
    merged = rising().combine(later, Linear())
    assert merged.value_at(seconds(2)) == 3.0


def test_overlapping_later_operand_replaces_tail():
    """Test that an overlapping later timeline replaces the earlier tail."""
    earlier = Timeline(
        start_value=0.0,
        segments=[
            Segment(1.0, seconds(1)),
            Segment(2.0, seconds(1)),
            Segment(3.0, seconds(1)),
        ],
    )
    later = Timeline(
        start_time=seconds(1.5),
        start_value=10.0,
        segments=[Segment(20.0, seconds(1), Power(2.0))],
    )
    merged = earlier.combine(later, Linear())

    assert merged.segments == [
        Segment(1.0, seconds(1)),
        Segment(10.0, seconds(0.5), Linear()),
        Segment(20.0, seconds(1), Power(2.0)),
    ]
    assert merged.stages() == [seconds(0), seconds(1), seconds(1.5), seconds(2.5)]
    assert merged.value_at(seconds(1.5)) == 10.0


def test_overlap_keeps_remaining_old_segments_after_copied_ones():
    """Test that earlier segments past the copied ones are kept."""
    earlier = Timeline(
        start_value=0.0,
        segments=[Segment(float(i + 1), seconds(1)) for i in range(4)],
    )
    later = Timeline(
        start_time=seconds(0.5),
        start_value=-1.0,
        segments=[Segment(-2.0, seconds(1))],
    )
    merged = combine_timelines(later, earlier, Linear())

    assert merged.segments == [
        Segment(-1.0, seconds(0.5)),
        Segment(-2.0, seconds(1)),
        Segment(3.0, seconds(1)),
        Segment(4.0, seconds(1)),
    ]


def test_overlap_longer_later_operand_is_appended():
    """Test that a longer later timeline extends the merge."""
    earlier = rising()
    later = Timeline(
        start_time=seconds(0.5),
        start_value=0.5,
        segments=[Segment(2.0, seconds(1)), Segment(0.0, seconds(1))],
    )
    merged = earlier.combine(later, Linear())

    assert merged.stages() == [seconds(0), seconds(0.5), seconds(1.5), seconds(2.5)]
    assert merged.end_value() == 0.0


def test_touching_timelines_get_zero_length_bridge():
    """Test the zero-length bridge between touching timelines."""
    later = Timeline(start_time=seconds(1), start_value=4.0, segments=[Segment(0.0, seconds(1))])
    merged = rising().combine(later, Linear())

    assert merged.stages() == [seconds(0), seconds(1), seconds(1), seconds(2)]
    assert merged.segments[1] == Segment(4.0, Duration.ZERO, Linear())
    assert merged.value_at(seconds(1)) == 4.0


def test_same_start_time_keeps_later_trajectory():
    """Test that the later trajectory wins on equal start times."""
    a = Timeline(start_value=0.0, segments=[Segment(1.0, seconds(2))])
    b = Timeline(start_value=5.0, segments=[Segment(6.0, seconds(1))])
    merged = a.combine(b, Linear())

    assert merged.segments == [
        Segment(5.0, Duration.ZERO, Linear()),
        Segment(6.0, seconds(1)),
    ]
    assert merged.value_at(0) == 5.0


def test_combine_with_empty_timeline():
    """Test combining with a disjoint empty timeline."""
    empty = Timeline(start_time=seconds(3), start_value=2.0)
    merged = rising().combine(empty, Linear())

    assert merged.segments == [Segment(1.0, seconds(1)), Segment(2.0, seconds(2))]
    assert merged.end_value() == 2.0


def test_combining_empty_timelines_stays_empty():
    """Test that two empty timelines sharing a start merge without a bridge."""
    merged = Timeline(start_value=1.0).combine(Timeline(start_value=2.0))

    assert merged.is_empty()
    assert merged.segments == []
    assert merged.end_value() == 2.0
    assert merged.max_value() == 2.0


def test_empty_timeline_touching_end_sets_last_value():
    """Test that an empty timeline at the earlier end only moves the last keyframe value."""
    merged = rising().combine(Timeline(start_time=seconds(1), start_value=3.0))

    assert merged.segments == [Segment(3.0, seconds(1))]
    assert merged.stages() == [seconds(0), seconds(1)]
