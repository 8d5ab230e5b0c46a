"""
Custom exception classes for the animation engine.

Timeline operations never raise for out-of-domain times or missing keyframes;
these cover programmer and configuration errors only.
"""
from animation_engine.validation import ValidationError


class AnimationEngineError(Exception):
    """Base exception for all animation engine errors."""
    pass


class EasingError(AnimationEngineError):
    """Raised when an object that is not an easing kind reaches the evaluator."""
    pass


class TimingError(AnimationEngineError, TypeError):
    """Raised when a value cannot be interpreted as a duration."""
    pass


# Re-export ValidationError for consistency
__all__ = ['AnimationEngineError', 'EasingError', 'TimingError', 'ValidationError']
