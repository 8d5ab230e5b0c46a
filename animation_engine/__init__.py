"""
animation_engine: keyframe timelines for animating scalar attributes.

A Timeline chains easing segments from a start keyframe; it can be queried
at any instant and edited by inserting, removing or merging keyframes.
"""

__version__ = "0.1.0"

from .config import EngineConfig
from .easing import (
    Bezier,
    EasingEvaluator,
    EasingKind,
    Linear,
    Mutation,
    Power,
    evaluate,
    generate_easing_curve,
)
from .exceptions import AnimationEngineError, EasingError, TimingError, ValidationError
from .geometry import Point
from .timeline import Segment, Timeline, combine_timelines, frame_times, sample_timeline
from .timing import Duration

__all__ = [
    "AnimationEngineError",
    "Bezier",
    "Duration",
    "EasingError",
    "EasingEvaluator",
    "EasingKind",
    "EngineConfig",
    "Linear",
    "Mutation",
    "Point",
    "Power",
    "Segment",
    "Timeline",
    "TimingError",
    "ValidationError",
    "combine_timelines",
    "evaluate",
    "frame_times",
    "generate_easing_curve",
    "sample_timeline",
]
