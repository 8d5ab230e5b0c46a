"""
Tests for EngineConfig and settings validation.
"""
import logging

import pytest

from animation_engine.config import DEFAULT_CONFIG, EngineConfig
from animation_engine.easing import Bezier, Linear
from animation_engine.timeline import Segment, Timeline
from animation_engine.timing import Duration
from animation_engine.validation import ValidationError, validate_settings


def test_defaults():
    """Test default engine configuration values."""
    config = EngineConfig()
    assert config.bezier_tolerance == 0.01
    assert config.insert_epsilon == Duration.milliseconds(1)
    assert config.remove_epsilon == Duration.milliseconds(150)
    assert config.frame_rate == 60.0
    assert config == DEFAULT_CONFIG


def test_from_settings():
    """Test building the configuration from a settings dict."""
    settings = {
        "easing": {"bezier_tolerance": 0.001},
        "editing": {"insert_epsilon_ms": 2, "remove_epsilon_ms": 50},
        "sampling": {"frame_rate": 24},
    }
    config = EngineConfig.from_settings(settings)
    assert config.bezier_tolerance == 0.001
    assert config.insert_epsilon == Duration.milliseconds(2)
    assert config.remove_epsilon == Duration.milliseconds(50)
    assert config.frame_rate == 24.0
    assert config.warnings == []


def test_from_empty_settings_uses_defaults():
    """Test that empty settings give the default configuration."""
    assert EngineConfig.from_settings({}) == EngineConfig()


def test_evaluator_uses_configured_tolerance():
    """Test that the evaluator picks up the configured tolerance."""
    config = EngineConfig(bezier_tolerance=1e-6)
    evaluator = config.evaluator()
    assert evaluator.tolerance == 1e-6

    timeline = Timeline(segments=[Segment(1.0, Duration.seconds(1), Bezier((0.0, 0.0), (1.0, 1.0)))])
    assert timeline.value_at(0.3, evaluator) == pytest.approx(0.3, abs=1e-5)


def test_invalid_settings_raise():
    """Test that invalid settings raise ValidationError."""
    with pytest.raises(ValidationError):
        EngineConfig.from_settings({"easing": {"bezier_tolerance": 0}})
    with pytest.raises(ValidationError):
        EngineConfig.from_settings({"editing": {"remove_epsilon_ms": -5}})
    with pytest.raises(ValidationError):
        EngineConfig.from_settings({"sampling": {"frame_rate": "fast"}})
    with pytest.raises(ValidationError):
        EngineConfig.from_settings({"sampling": 30})
    with pytest.raises(ValidationError):
        validate_settings(["not", "a", "dict"])


def test_warnings_are_collected_and_logged(caplog):
    """Test that settings warnings are kept on the config and logged."""
    settings = {
        "easing": {"bezier_tolerance": 0.5},
        "editing": {"insert_epsilon_ms": 10, "remove_epsilon_ms": 5},
        "render": {},
    }
    with caplog.at_level(logging.WARNING, logger="animation_engine"):
        config = EngineConfig.from_settings(settings)

    assert len(config.warnings) == 3
    assert "Unknown settings section 'render'" in caplog.text
    assert "coarse" in caplog.text


def test_validate_settings_accepts_valid_settings():
    """Test that valid settings produce no warnings."""
    assert validate_settings({"easing": {"bezier_tolerance": 0.01}}) == []


def test_config_epsilons_drive_timeline_editing():
    """Test that configured epsilons change insert and remove behaviour."""
    config = EngineConfig.from_settings({"editing": {"insert_epsilon_ms": 20, "remove_epsilon_ms": 20}})
    timeline = Timeline(segments=[Segment(1.0, Duration.seconds(1), Linear())])

    timeline.insert_point(Duration.milliseconds(1010), 2.0, epsilon=config.insert_epsilon)
    assert timeline.segment_count() == 1
    assert timeline.end_value() == 2.0

    timeline.remove_point(Duration.milliseconds(1040), epsilon=config.remove_epsilon)
    assert timeline.segment_count() == 1
