"""
Timeline package: segments, keyframe editing, merging and sampling.
"""
from .merge import combine_timelines
from .sampler import frame_times, sample_timeline
from .segment import Segment
from .timeline import Timeline

__all__ = [
    "Segment",
    "Timeline",
    "combine_timelines",
    "frame_times",
    "sample_timeline",
]
