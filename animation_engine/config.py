"""
Configuration dataclass for easing, editing and sampling settings.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from animation_engine.easing.curves import DEFAULT_BEZIER_TOLERANCE, EasingEvaluator
from animation_engine.timing import Duration
from animation_engine.utils.logger import get_logger
from animation_engine.validation import validate_settings

logger = get_logger(__name__)

DEFAULT_INSERT_EPSILON = Duration.milliseconds(1)
DEFAULT_REMOVE_EPSILON = Duration.milliseconds(150)
DEFAULT_FRAME_RATE = 60.0


@dataclass
class EngineConfig:
    """Configuration for timeline evaluation and editing."""
    bezier_tolerance: float = DEFAULT_BEZIER_TOLERANCE
    insert_epsilon: Duration = field(default_factory=lambda: DEFAULT_INSERT_EPSILON)
    remove_epsilon: Duration = field(default_factory=lambda: DEFAULT_REMOVE_EPSILON)
    frame_rate: float = DEFAULT_FRAME_RATE
    warnings: List[str] = field(default_factory=list, compare=False)

    def evaluator(self) -> EasingEvaluator:
        """Build an evaluator using the configured Bezier tolerance."""
        return EasingEvaluator(self.bezier_tolerance)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'EngineConfig':
        """
        Create EngineConfig from a settings dictionary.

        Raises:
            ValidationError: If the settings are malformed
        """
        warnings = validate_settings(settings)
        for warning in warnings:
            logger.warning(warning)

        easing_cfg = settings.get("easing") or {}
        editing_cfg = settings.get("editing") or {}
        sampling_cfg = settings.get("sampling") or {}

        return cls(
            bezier_tolerance=float(easing_cfg.get("bezier_tolerance", DEFAULT_BEZIER_TOLERANCE)),
            insert_epsilon=Duration.milliseconds(editing_cfg.get("insert_epsilon_ms", 1)),
            remove_epsilon=Duration.milliseconds(editing_cfg.get("remove_epsilon_ms", 150)),
            frame_rate=float(sampling_cfg.get("frame_rate", DEFAULT_FRAME_RATE)),
            warnings=warnings,
        )


DEFAULT_CONFIG = EngineConfig()
