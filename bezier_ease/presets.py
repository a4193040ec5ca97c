"""
Named control point presets.

CSS cubic curves are stored as 4-point polygons (0,0), (x1,y1), (x2,y2), (1,1).
Because time is used directly as the Bezier parameter, these presets follow
the polygon's Y column and are not identical to browser CSS timing.
"""

from typing import Dict, List

from .core import (
    ControlPoint,
    ControlPointSequence,
    DEFAULT_CONTROL_POINTS,
    InvalidConfigurationError,
)


def _css(x1: float, y1: float, x2: float, y2: float) -> ControlPointSequence:
    return (
        ControlPoint(0.0, 0.0),
        ControlPoint(x1, y1),
        ControlPoint(x2, y2),
        ControlPoint(1.0, 1.0),
    )


CONTROL_POINT_PRESETS: Dict[str, ControlPointSequence] = {
    "default": DEFAULT_CONTROL_POINTS,
    "linear": (ControlPoint(0.0, 0.0), ControlPoint(1.0, 1.0)),

    # Standard CSS easings
    "ease": _css(0.25, 0.1, 0.25, 1.0),
    "easeIn": _css(0.42, 0.0, 1.0, 1.0),
    "easeOut": _css(0.0, 0.0, 0.58, 1.0),
    "easeInOut": _css(0.42, 0.0, 0.58, 1.0),

    # Overshoot
    "easeOutBack": _css(0.34, 1.56, 0.64, 1.0),
    "anticipate": _css(0.38, -0.4, 0.88, 1.0),
}


def list_presets() -> List[str]:
    """Get list of available preset names."""
    return sorted(CONTROL_POINT_PRESETS.keys())


def get_preset(name: str) -> ControlPointSequence:
    """
    Get control points for a named preset.

    Raises:
        InvalidConfigurationError: If the preset is unknown
    """
    try:
        return CONTROL_POINT_PRESETS[name]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown preset: {name}", option="preset", available=list_presets()
        ) from None


__all__ = [
    "CONTROL_POINT_PRESETS",
    "list_presets",
    "get_preset",
]
