"""
Bezier easing for animation progress.

Evaluates N-point Bezier curves by De Casteljau reduction and exposes them
as easing functions.

Usage:
    from bezier_ease import BezierEase, CurveEvaluator

    # Default 7-point ease-in-out-like curve
    ease = BezierEase()
    progress = ease(0.5)

    # Custom curve from JSON-style options
    ease = BezierEase.from_config({
        "controlPoints": [[0, 0], [0.42, 0], [0.58, 1], [1, 1]],
        "easingMode": "easeInOut",
    })

    # Raw curve evaluation
    curve = CurveEvaluator([(0, 0), (1, 1)])
    ts, ys = curve.sample(20)
"""

from .core import (
    # Exceptions
    BezierEaseException,
    InvalidConfigurationError,
    # Logging
    get_logger,
    setup_logging,
    log_performance,
    LogContext,
    # Points
    ControlPoint,
    ControlPointSequence,
    DEFAULT_CONTROL_POINTS,
    as_control_points,
    points_from_json,
    points_to_json,
    # Evaluation
    CurveEvaluator,
    evaluate,
    evaluate_point,
    reduction_levels,
)

from .constants import EasingMode

from .config import (
    EaseConfig,
    load_config,
)

from .presets import (
    CONTROL_POINT_PRESETS,
    list_presets,
    get_preset,
)

from .easing import BezierEase

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core - Exceptions
    "BezierEaseException",
    "InvalidConfigurationError",
    # Core - Logging
    "get_logger",
    "setup_logging",
    "log_performance",
    "LogContext",
    # Core - Points
    "ControlPoint",
    "ControlPointSequence",
    "DEFAULT_CONTROL_POINTS",
    "as_control_points",
    "points_from_json",
    "points_to_json",
    # Core - Evaluation
    "CurveEvaluator",
    "evaluate",
    "evaluate_point",
    "reduction_levels",
    # Config
    "EasingMode",
    "EaseConfig",
    "load_config",
    # Presets
    "CONTROL_POINT_PRESETS",
    "list_presets",
    "get_preset",
    # Easing
    "BezierEase",
]
