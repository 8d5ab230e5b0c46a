"""
Easing kinds and the per-segment evaluator.
"""
from .curves import (
    BEZIER_PRESETS,
    DEFAULT_BEZIER_TOLERANCE,
    Bezier,
    EasingEvaluator,
    EasingKind,
    Linear,
    Mutation,
    Power,
    evaluate,
    generate_easing_curve,
)

__all__ = [
    "BEZIER_PRESETS",
    "DEFAULT_BEZIER_TOLERANCE",
    "Bezier",
    "EasingEvaluator",
    "EasingKind",
    "Linear",
    "Mutation",
    "Power",
    "evaluate",
    "generate_easing_curve",
]
