"""
Generalized Bezier curve evaluation by De Casteljau reduction.

The curve is reduced by repeated linear interpolation between adjacent
control points until a single point remains:

    P'[i] = P[i] + (P[i+1] - P[i]) * t

The same t is used at every level and for both coordinates. X is never
inverted to find the curve parameter for a given time, so the input time
is the Bezier parameter itself.

The reduction runs in place on a float64 working buffer that shrinks by one
row per pass. Arithmetic order matches the pairwise form above, so results
are bit-identical to building a new list at every level.
"""

from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .logging_config import get_logger, log_performance
from .points import (
    ControlPoint,
    ControlPointSequence,
    DEFAULT_CONTROL_POINTS,
    PointLike,
    as_control_points,
)

logger = get_logger(__name__)


def _to_buffer(points: ControlPointSequence) -> np.ndarray:
    """Pack points into an (n, 2) float64 array."""
    return np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)


def _reduce(buffer: np.ndarray, t: float) -> np.ndarray:
    """
    Reduce buffer in place down to its first row.

    Each pass overwrites rows [0, count - 1) with the interpolation of
    adjacent rows, so the live region shrinks by one per pass and the
    number of passes is len(buffer) - 1.
    """
    for count in range(buffer.shape[0], 1, -1):
        head = buffer[:count - 1]
        head += (buffer[1:count] - head) * t
    return buffer[0]


def _require_points(points) -> ControlPointSequence:
    if isinstance(points, tuple) and points and all(isinstance(p, ControlPoint) for p in points):
        return points
    return as_control_points(points)


def evaluate_point(points: Iterable[PointLike], t: float) -> ControlPoint:
    """
    Reduce the control polygon at parameter t and return the final point.

    Args:
        points: Non-empty ordered control points
        t: Interpolation parameter, not clamped

    Raises:
        InvalidConfigurationError: If points is empty
    """
    seq = _require_points(points)
    x, y = _reduce(_to_buffer(seq), float(t))
    return ControlPoint(float(x), float(y))


def evaluate(points: Iterable[PointLike], t: float) -> float:
    """
    Evaluate the curve's Y coordinate at normalized time t.

    A single point returns its Y for any t. Values of t outside [0, 1]
    extrapolate along the control polygon.

    Args:
        points: Non-empty ordered control points
        t: Normalized time (conventionally 0-1)

    Returns:
        Eased value

    Raises:
        InvalidConfigurationError: If points is empty
    """
    return evaluate_point(points, t).y


def reduction_levels(
    points: Iterable[PointLike], t: float
) -> Iterator[ControlPointSequence]:
    """
    Yield every level of the De Casteljau construction at t.

    The first level is the input polygon, each following level has one
    point fewer and the last level holds the evaluated point.
    """
    seq = _require_points(points)
    t = float(t)
    buffer = _to_buffer(seq)

    yield seq
    for count in range(buffer.shape[0], 1, -1):
        head = buffer[:count - 1]
        head += (buffer[1:count] - head) * t
        yield tuple(ControlPoint(float(x), float(y)) for x, y in head)


class CurveEvaluator:
    """
    Easing curve over a fixed control polygon.

    The control points are validated once at construction and never
    mutated afterwards, so one evaluator can be shared between threads.

    Usage:
        curve = CurveEvaluator([(0, 0), (0.42, 0), (0.58, 1), (1, 1)])
        progress = curve.evaluate(0.25)
        ts, ys = curve.sample(50)
    """

    def __init__(self, points: Optional[Iterable[PointLike]] = None):
        """
        Initialize evaluator.

        Args:
            points: Ordered control points. Defaults to DEFAULT_CONTROL_POINTS.

        Raises:
            InvalidConfigurationError: If points is empty or malformed
        """
        self._points = DEFAULT_CONTROL_POINTS if points is None else as_control_points(points)

        template = _to_buffer(self._points)
        template.flags.writeable = False
        self._template = template

        logger.debug(f"CurveEvaluator created with {len(self._points)} control points")

    @property
    def points(self) -> ControlPointSequence:
        """Control points in curve order."""
        return self._points

    @property
    def degree(self) -> int:
        """Curve degree, equal to the number of reduction passes."""
        return len(self._points) - 1

    def evaluate_point(self, t: float) -> ControlPoint:
        """Return the fully reduced point at t."""
        x, y = _reduce(self._template.copy(), float(t))
        return ControlPoint(float(x), float(y))

    def evaluate(self, t: float) -> float:
        """Return the eased value at normalized time t."""
        return float(_reduce(self._template.copy(), float(t))[1])

    __call__ = evaluate

    def levels(self, t: float) -> Iterator[ControlPointSequence]:
        """Yield the De Casteljau construction at t."""
        return reduction_levels(self._points, t)

    def evaluate_array(self, ts) -> np.ndarray:
        """
        Evaluate the curve at many times at once.

        Only the Y column is reduced; every element follows the same
        arithmetic as evaluate(), so results match it exactly.

        Args:
            ts: Array-like of normalized times

        Returns:
            float64 array with the shape of ts
        """
        ts = np.asarray(ts, dtype=np.float64)
        flat = ts.reshape(-1)

        buffer = np.repeat(self._template[:, 1:2], flat.size, axis=1)
        for count in range(buffer.shape[0], 1, -1):
            head = buffer[:count - 1]
            head += (buffer[1:count] - head) * flat

        return buffer[0].reshape(ts.shape)

    @log_performance
    def sample(self, num_samples: int = 20) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the curve at evenly spaced times in [0, 1].

        Args:
            num_samples: Number of samples, at least 2

        Returns:
            (times, values) arrays
        """
        if num_samples < 2:
            raise ValueError(f"num_samples must be >= 2, got {num_samples}")

        ts = np.linspace(0.0, 1.0, num_samples)
        return ts, self.evaluate_array(ts)

    def __repr__(self) -> str:
        return f"CurveEvaluator(points={[p.to_tuple() for p in self._points]})"


__all__ = [
    "CurveEvaluator",
    "evaluate",
    "evaluate_point",
    "reduction_levels",
]
