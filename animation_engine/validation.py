from typing import Dict, List


# Sections understood by EngineConfig.from_settings
VALID_SECTIONS = {"easing", "editing", "sampling"}

# Above this the Bezier inversion visibly snaps between a handful of values
COARSE_TOLERANCE = 0.1


class ValidationError(Exception):
    """Raised when engine settings validation fails."""
    pass


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_settings(settings: Dict) -> List[str]:
    """
    Validate an engine settings dictionary.

    Args:
        settings: Dictionary with optional "easing", "editing" and "sampling" sections

    Returns:
        List of warnings for settings that are legal but suspicious

    Raises:
        ValidationError: If any setting has the wrong type or an impossible value
    """
    errors = []
    warnings = []

    if not isinstance(settings, dict):
        raise ValidationError("Validation failed: \nsettings must be a dictionary")

    for key in settings:
        if key not in VALID_SECTIONS:
            warnings.append(
                f"Unknown settings section '{key}'. "
                f"Valid sections: {', '.join(sorted(VALID_SECTIONS))}"
            )

    for section in VALID_SECTIONS:
        value = settings.get(section)
        if value is not None and not isinstance(value, dict):
            errors.append(f"'{section}' must be a dictionary")

    # Easing

    easing = settings.get("easing")
    if isinstance(easing, dict) and "bezier_tolerance" in easing:
        tolerance = easing["bezier_tolerance"]
        if not _is_number(tolerance) or tolerance <= 0:
            errors.append("easing bezier_tolerance must be a positive number")
        elif tolerance > COARSE_TOLERANCE:
            warnings.append(
                f"easing bezier_tolerance {tolerance} is coarse; "
                f"Bezier curves will be evaluated in visible steps"
            )

    # Editing epsilons

    editing = settings.get("editing")
    if isinstance(editing, dict):
        for key in ("insert_epsilon_ms", "remove_epsilon_ms"):
            if key in editing:
                value = editing[key]
                if not _is_number(value) or value < 0:
                    errors.append(f"editing {key} must be a non-negative number")

        insert_ms = editing.get("insert_epsilon_ms")
        remove_ms = editing.get("remove_epsilon_ms")
        if _is_number(insert_ms) and _is_number(remove_ms) and 0 <= remove_ms < insert_ms:
            warnings.append(
                "editing remove_epsilon_ms is smaller than insert_epsilon_ms; "
                "a freshly inserted keyframe may not be removable at the same time"
            )

    # Sampling

    sampling = settings.get("sampling")
    if isinstance(sampling, dict) and "frame_rate" in sampling:
        frame_rate = sampling["frame_rate"]
        if not _is_number(frame_rate) or frame_rate <= 0:
            errors.append("sampling frame_rate must be a positive number")

    if errors:
        raise ValidationError(
            "Validation failed: \n" + "\n".join(errors)
        )

    return warnings
