"""
Segment: one piece of a timeline between two consecutive keyframes.
"""
from dataclasses import dataclass, field

from animation_engine.easing.curves import EasingKind, Linear
from animation_engine.timing import Duration


@dataclass
class Segment:
    """
    Interpolates from the previous keyframe's value to `end_value` over `sustain_time`.

    sustain_time must not be negative; nothing checks it.
    """
    end_value: float
    sustain_time: Duration
    kind: EasingKind = field(default_factory=Linear)

    def __post_init__(self):
        self.sustain_time = Duration.coerce(self.sustain_time)

    def copy(self) -> 'Segment':
        # kinds are frozen and shared between copies
        return Segment(self.end_value, self.sustain_time, self.kind)
