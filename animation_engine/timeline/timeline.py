"""
Timeline: a scalar animated by a chain of easing segments.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from animation_engine.config import DEFAULT_INSERT_EPSILON, DEFAULT_REMOVE_EPSILON
from animation_engine.easing.curves import (
    DEFAULT_EVALUATOR,
    Bezier,
    EasingEvaluator,
    EasingKind,
    Linear,
)
from animation_engine.geometry import Point
from animation_engine.timeline.merge import combine_timelines
from animation_engine.timeline.segment import Segment
from animation_engine.timing import Duration, TimeLike
from animation_engine.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Timeline:
    """
    Scalar value over time, anchored at `start_time`.

    `start_value` holds at `start_time`; `segments[i].end_value` holds at the
    (i+1)-th stage boundary. With no segments the timeline is defined only at
    `start_time`.
    """
    start_time: Duration = field(default_factory=lambda: Duration.ZERO)
    start_value: float = 0.0
    segments: List[Segment] = field(default_factory=list)

    def __post_init__(self):
        self.start_time = Duration.coerce(self.start_time)

    @classmethod
    def new_standard(
        cls,
        sustain_time: TimeLike,
        control_point_one: Point,
        control_point_two: Point
    ) -> 'Timeline':
        """Single Bezier segment from 0.0 to 1.0, starting at time zero."""
        return cls(
            start_time=Duration.ZERO,
            start_value=0.0,
            segments=[
                Segment(
                    end_value=1.0,
                    sustain_time=Duration.coerce(sustain_time),
                    kind=Bezier(control_point_one, control_point_two),
                )
            ],
        )

    def copy(self) -> 'Timeline':
        return Timeline(
            start_time=self.start_time,
            start_value=self.start_value,
            segments=[segment.copy() for segment in self.segments],
        )

    # Queries

    def duration(self) -> Duration:
        total = Duration.ZERO
        for segment in self.segments:
            total = total + segment.sustain_time
        return total

    def end_time(self) -> Duration:
        return self.start_time + self.duration()

    def stages(self) -> List[Duration]:
        """Absolute time of every keyframe, start included."""
        stages = [self.start_time]
        current = self.start_time
        for segment in self.segments:
            current = current + segment.sustain_time
            stages.append(current)
        return stages

    def segment_count(self) -> int:
        return len(self.segments)

    def is_empty(self) -> bool:
        return not self.segments

    def is_overlapping(self, other: 'Timeline') -> bool:
        """Closed-span intersection; touching endpoints count."""
        return (
            (self.end_time() >= other.start_time and self.start_time <= other.start_time)
            or (other.end_time() >= self.start_time and other.start_time <= self.start_time)
        )

    def value_at(
        self,
        time: TimeLike,
        evaluator: Optional[EasingEvaluator] = None
    ) -> Optional[float]:
        """
        Value of the segment active at `time`.

        Returns:
            The interpolated value, or None before start_time, at or after
            end_time(), and for a timeline without segments
        """
        current_time = Duration.coerce(time)
        evaluator = evaluator or DEFAULT_EVALUATOR
        stages = self.stages()
        found = None
        for i in range(len(stages) - 1):
            if stages[i] <= current_time < stages[i + 1]:
                x = (current_time - stages[i]) / (stages[i + 1] - stages[i])
                if i == 0:
                    start_value = self.start_value
                else:
                    start_value = self.segments[i - 1].end_value
                segment = self.segments[i]
                found = evaluator.evaluate(segment.kind, x, start_value, segment.end_value)
        return found

    def end_value(self) -> float:
        if not self.segments:
            return self.start_value
        return self.segments[-1].end_value

    def min_value(self) -> float:
        return min([self.start_value] + [s.end_value for s in self.segments])

    def max_value(self) -> float:
        return max([self.start_value] + [s.end_value for s in self.segments])

    # Editing

    def insert_point(
        self,
        time: TimeLike,
        value: float,
        kind: Optional[EasingKind] = None,
        epsilon: Optional[TimeLike] = None
    ) -> None:
        """
        Place a keyframe at absolute `time`, reached with easing `kind`.

        A keyframe closer than `epsilon` (default 1ms) to an existing one
        replaces it instead of adding a new boundary.

        Splitting a segment keeps that segment's own easing on both halves;
        `kind` is ignored in that case and only applies when the keyframe is
        prepended, appended or replaces an existing one.
        """
        self.insert_point_with_epsilon(
            time,
            value,
            kind if kind is not None else Linear(),
            epsilon if epsilon is not None else DEFAULT_INSERT_EPSILON,
        )

    def insert_point_with_epsilon(
        self,
        time: TimeLike,
        value: float,
        kind: EasingKind,
        epsilon: TimeLike
    ) -> None:
        time = Duration.coerce(time)
        epsilon = Duration.coerce(epsilon)

        if abs(time - self.start_time) <= epsilon:
            logger.debug(f"insert_point: moving start keyframe to {time}")
            self.start_value = value
            if self.segments:
                first = self.segments[0]
                first.sustain_time = self.start_time + first.sustain_time - time
            self.start_time = time
            return

        if time < self.start_time:
            logger.debug(f"insert_point: prepending keyframe at {time}")
            self.segments.insert(0, Segment(
                end_value=self.start_value,
                sustain_time=self.start_time - time,
                kind=kind,
            ))
            self.start_time = time
            self.start_value = value
            return

        end_time = self.end_time()
        if time - end_time > epsilon:
            logger.debug(f"insert_point: appending keyframe at {time}")
            self.segments.append(Segment(
                end_value=value,
                sustain_time=time - end_time,
                kind=kind,
            ))
            return

        last_time = self.start_time
        for i, segment in enumerate(self.segments):
            boundary = last_time + segment.sustain_time
            if abs(time - boundary) <= epsilon:
                logger.debug(f"insert_point: replacing keyframe {i + 1} at {time}")
                segment.kind = kind
                if i + 1 < len(self.segments):
                    following = self.segments[i + 1]
                    following.sustain_time = boundary + following.sustain_time - time
                segment.sustain_time = abs(time - last_time)
                segment.end_value = value
                return
            if time - last_time < segment.sustain_time:
                logger.debug(f"insert_point: splitting segment {i} at {time}")
                remainder = Segment(
                    end_value=segment.end_value,
                    sustain_time=segment.sustain_time - (time - last_time),
                    kind=segment.kind,
                )
                segment.end_value = value
                segment.sustain_time = time - last_time
                self.segments.insert(i + 1, remainder)
                return
            last_time = boundary

    def remove_point(self, time: TimeLike, epsilon: Optional[TimeLike] = None) -> None:
        """
        Delete the keyframe nearest to `time`, if one lies within `epsilon`
        (default 150ms). Does nothing otherwise.
        """
        self.remove_point_with_epsilon(
            time,
            epsilon if epsilon is not None else DEFAULT_REMOVE_EPSILON,
        )

    def remove_point_with_epsilon(self, time: TimeLike, epsilon: TimeLike) -> None:
        time = Duration.coerce(time)
        epsilon = Duration.coerce(epsilon)

        nearest = None
        nearest_delta = None
        for i, stage in enumerate(self.stages()):
            delta = abs(time - stage)
            if delta <= epsilon and (nearest_delta is None or delta < nearest_delta):
                nearest = i
                nearest_delta = delta

        if nearest is None:
            logger.debug(f"remove_point: no keyframe within {epsilon} of {time}")
            return

        if nearest == 0:
            if not self.segments:
                logger.debug("remove_point: removed the only keyframe, resetting")
                self.start_time = Duration.ZERO
                self.start_value = 0.0
                return
            first = self.segments.pop(0)
            self.start_value = first.end_value
            self.start_time = self.start_time + first.sustain_time
            logger.debug(f"remove_point: removed start keyframe, now starting at {self.start_time}")
        elif nearest < len(self.segments):
            merged = self.segments[nearest]
            merged.sustain_time = self.segments[nearest - 1].sustain_time + merged.sustain_time
            del self.segments[nearest - 1]
            logger.debug(f"remove_point: merged segments {nearest - 1} and {nearest}")
        else:
            self.segments.pop()
            logger.debug("remove_point: removed last keyframe")

    def combine(self, other: 'Timeline', bridging_kind: Optional[EasingKind] = None) -> 'Timeline':
        """
        Merge with `other` into a new timeline; neither operand is modified.

        See combine_timelines.
        """
        return combine_timelines(self, other, bridging_kind)
