"""
Core curve components - control points, De Casteljau evaluation,
exceptions and logging.
"""

from .exceptions import (
    BezierEaseException,
    InvalidConfigurationError,
)

from .logging_config import (
    get_logger,
    setup_logging,
    log_performance,
    LogContext,
)

from .points import (
    ControlPoint,
    ControlPointSequence,
    DEFAULT_CONTROL_POINTS,
    to_control_point,
    as_control_points,
    points_from_json,
    points_to_json,
)

from .evaluator import (
    CurveEvaluator,
    evaluate,
    evaluate_point,
    reduction_levels,
)

__all__ = [
    # Exceptions
    "BezierEaseException",
    "InvalidConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
    "log_performance",
    "LogContext",
    # Points
    "ControlPoint",
    "ControlPointSequence",
    "DEFAULT_CONTROL_POINTS",
    "to_control_point",
    "as_control_points",
    "points_from_json",
    "points_to_json",
    # Evaluation
    "CurveEvaluator",
    "evaluate",
    "evaluate_point",
    "reduction_levels",
]
