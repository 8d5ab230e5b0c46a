"""
Frame-grid sampling of timelines for renderers.
"""
import math
from typing import Optional, Tuple

import numpy as np

from animation_engine.config import DEFAULT_CONFIG, EngineConfig
from animation_engine.timeline.timeline import Timeline
from animation_engine.timing import NANOS_PER_SECOND, Duration, TimeLike
from animation_engine.utils.logger import get_logger, log_performance
from animation_engine.validation import ValidationError

logger = get_logger(__name__)


def frame_times(start: TimeLike, end: TimeLike, frame_rate: float) -> np.ndarray:
    """
    Frame timestamps on [start, end).

    Args:
        start: First frame time
        end: Exclusive end of the window
        frame_rate: Frames per second

    Returns:
        int64 array of nanosecond timestamps

    Raises:
        ValidationError: If frame_rate is not positive
    """
    if frame_rate <= 0:
        raise ValidationError(f"frame_rate must be positive, got {frame_rate}")

    start_ns = Duration.coerce(start).nanos
    end_ns = Duration.coerce(end).nanos
    if end_ns <= start_ns:
        return np.array([], dtype=np.int64)

    frame_ns = NANOS_PER_SECOND / frame_rate
    count = math.ceil((end_ns - start_ns) / frame_ns)
    times = start_ns + np.round(np.arange(count) * frame_ns).astype(np.int64)
    return times[times < end_ns]


@log_performance
def sample_timeline(
    timeline: Timeline,
    frame_rate: Optional[float] = None,
    config: Optional[EngineConfig] = None,
    hold: bool = True,
    start: Optional[TimeLike] = None,
    end: Optional[TimeLike] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate a timeline once per frame.

    Args:
        timeline: Timeline to sample
        frame_rate: Frames per second (default: config.frame_rate)
        config: Engine configuration supplying the Bezier tolerance
        hold: If True, frames without an active segment keep the nearest
            known value (start_value before the span, end_value after it,
            the previous frame inside it); if False they are NaN
        start: Window start (default: timeline.start_time)
        end: Exclusive window end (default: timeline.end_time())

    Returns:
        Tuple of (nanosecond timestamps, values)
    """
    config = config or DEFAULT_CONFIG
    rate = frame_rate if frame_rate is not None else config.frame_rate
    window_start = Duration.coerce(start) if start is not None else timeline.start_time
    window_end = Duration.coerce(end) if end is not None else timeline.end_time()

    if start is None and end is None and timeline.duration() <= Duration.ZERO:
        if rate <= 0:
            raise ValidationError(f"frame_rate must be positive, got {rate}")
        return (
            np.array([timeline.start_time.nanos], dtype=np.int64),
            np.array([timeline.start_value], dtype=np.float64),
        )

    times = frame_times(window_start, window_end, rate)
    values = np.empty(len(times), dtype=np.float64)
    evaluator = config.evaluator()
    start_ns = timeline.start_time.nanos
    end_ns = timeline.end_time().nanos
    last = timeline.start_value

    for i, t in enumerate(times):
        value = timeline.value_at(Duration(int(t)), evaluator)
        if value is not None:
            last = value
        elif not hold:
            value = math.nan
        elif t < start_ns:
            value = timeline.start_value
        elif t >= end_ns:
            value = timeline.end_value()
        else:
            value = last
        values[i] = value

    logger.debug(f"Sampled {len(times)} frames at {rate} fps")
    return times, values
