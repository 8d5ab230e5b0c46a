"""
Easing kinds and their evaluation inside a single timeline segment.
"""
import sys
from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np

from animation_engine.exceptions import EasingError
from animation_engine.geometry import Point
from animation_engine.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BEZIER_TOLERANCE = 0.01

# Bisection stops long before this; it only guards degenerate tolerances
MAX_BISECTION_STEPS = 64

# CSS timing-function presets, as (x1, y1, x2, y2)
BEZIER_PRESETS = {
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
}


def _as_point(value) -> Point:
    if isinstance(value, Point):
        return value
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point(float(value.x), float(value.y))
    x, y = value
    return Point(float(x), float(y))


class EasingKind:
    """Marker base for the closed set of easing kinds."""

    @classmethod
    def from_string(cls, kind_str: Union[str, None]) -> 'EasingKind':
        """
        Parse an easing kind, defaulting to Linear if None or invalid.

        Accepted forms: "linear", "mutation" / "step", "power:<exp>",
        "bezier:<x1>,<y1>,<x2>,<y2>" and the CSS presets in BEZIER_PRESETS.

        Args:
            kind_str: String representation of the easing kind

        Returns:
            EasingKind instance, defaults to Linear()
        """
        if kind_str is None:
            return Linear()

        text = kind_str.lower().strip()
        if text == "linear":
            return Linear()
        if text in ("mutation", "step"):
            return Mutation()
        if text in BEZIER_PRESETS:
            x1, y1, x2, y2 = BEZIER_PRESETS[text]
            return Bezier(Point(x1, y1), Point(x2, y2))

        name, _, args = text.partition(":")
        try:
            if name.strip() == "power":
                return Power(float(args))
            if name.strip() == "bezier":
                x1, y1, x2, y2 = (float(part) for part in args.split(","))
                return Bezier(Point(x1, y1), Point(x2, y2))
        except ValueError:
            pass

        logger.warning(f"Unknown easing '{kind_str}', falling back to linear")
        return Linear()


@dataclass(frozen=True)
class Bezier(EasingKind):
    """Cubic Bezier easing with endpoints fixed at (0, 0) and (1, 1)."""
    c1: Point = field(default_factory=Point)
    c2: Point = field(default_factory=lambda: Point(1.0, 1.0))

    def __post_init__(self):
        object.__setattr__(self, "c1", _as_point(self.c1))
        object.__setattr__(self, "c2", _as_point(self.c2))


@dataclass(frozen=True)
class Power(EasingKind):
    """Progress raised to `exponent`."""
    exponent: float = 2.0


@dataclass(frozen=True)
class Linear(EasingKind):
    pass


@dataclass(frozen=True)
class Mutation(EasingKind):
    """Step: holds the start value for the whole segment."""
    pass


def _bezier_axis(t: float, p1: float, p2: float) -> float:
    u = 1.0 - t
    return 3.0 * t * u * u * p1 + 3.0 * t * t * u * p2 + t * t * t


class EasingEvaluator:
    """
    Evaluates easing kinds.

    The Bezier inversion is a bisection on the curve parameter that stops once
    the bracket is narrower than `tolerance`. The default 0.01 takes about
    seven steps; export-quality renders can pass a finer tolerance.
    """

    def __init__(self, tolerance: float = DEFAULT_BEZIER_TOLERANCE):
        if tolerance <= 0:
            tolerance = sys.float_info.epsilon
        self.tolerance = tolerance

    def solve_bezier_t(self, c1: Point, c2: Point, x: float) -> float:
        """Find the curve parameter t whose X(t) is x."""
        left = 0.0
        right = 1.0
        middle = 0.5
        for _ in range(MAX_BISECTION_STEPS):
            middle = (left + right) / 2.0
            result = _bezier_axis(middle, c1.x, c2.x)
            if result == x:
                break
            elif result < x:
                left = middle
            else:
                right = middle
            if right - left < self.tolerance:
                break
        return middle

    def evaluate(
        self,
        kind: EasingKind,
        x: float,
        start_value: float,
        end_value: float
    ) -> float:
        """
        Interpolate between start_value and end_value at progress x.

        Args:
            kind: Easing kind of the segment
            x: Normalized progress in [0, 1]
            start_value: Value at the segment start
            end_value: Value at the segment end

        Returns:
            Interpolated value

        Raises:
            EasingError: If kind is not an EasingKind
        """
        if isinstance(kind, Linear):
            return start_value + x * (end_value - start_value)
        elif isinstance(kind, Power):
            with np.errstate(divide="ignore", invalid="ignore"):
                progress = float(np.power(x, kind.exponent))
            return start_value + progress * (end_value - start_value)
        elif isinstance(kind, Mutation):
            return start_value
        elif isinstance(kind, Bezier):
            t = self.solve_bezier_t(kind.c1, kind.c2, x)
            y = _bezier_axis(t, kind.c1.y, kind.c2.y)
            return start_value + (end_value - start_value) * y
        raise EasingError(f"Unsupported easing kind: {kind!r}")

    def __repr__(self) -> str:
        return f"EasingEvaluator(tolerance={self.tolerance})"


DEFAULT_EVALUATOR = EasingEvaluator()


def evaluate(
    kind: EasingKind,
    x: float,
    start_value: float,
    end_value: float,
    evaluator: Optional[EasingEvaluator] = None
) -> float:
    """Evaluate an easing kind with the default (or given) evaluator."""
    return (evaluator or DEFAULT_EVALUATOR).evaluate(kind, x, start_value, end_value)


def generate_easing_curve(
    kind: EasingKind,
    num_samples: int,
    start_value: float = 0.0,
    end_value: float = 1.0,
    tolerance: Optional[float] = None
) -> np.ndarray:
    """
    Sample an easing kind over evenly spaced progress values.

    Args:
        kind: Easing kind to sample
        num_samples: Number of samples, including both endpoints
        start_value: Value at progress 0
        end_value: Value at progress 1
        tolerance: Bezier tolerance override

    Returns:
        Array of interpolated values
    """
    if num_samples <= 0:
        return np.array([])

    evaluator = DEFAULT_EVALUATOR if tolerance is None else EasingEvaluator(tolerance)
    progress = np.linspace(0.0, 1.0, num_samples)

    if isinstance(kind, Linear):
        return start_value + progress * (end_value - start_value)
    if isinstance(kind, Power):
        with np.errstate(divide="ignore", invalid="ignore"):
            eased = np.power(progress, kind.exponent)
        return start_value + eased * (end_value - start_value)

    return np.array([
        evaluator.evaluate(kind, float(x), start_value, end_value)
        for x in progress
    ])
