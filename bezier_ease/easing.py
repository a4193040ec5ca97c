"""
Bezier easing function.

Wraps a CurveEvaluator as an animation easing function. The curve itself is
the ease-in core; the easing mode decides how it is applied:

    easeIn:    core(t)
    easeOut:   1 - core(1 - t)
    easeInOut: core(2t) / 2 below t = 0.5, mirrored ease-out above
"""

from typing import Iterable, Optional, Union

import numpy as np

from .config import EaseConfig, load_config
from .constants import EasingMode
from .core import (
    ControlPointSequence,
    CurveEvaluator,
    InvalidConfigurationError,
    get_logger,
)
from .core.points import PointLike
from .presets import get_preset

logger = get_logger(__name__)


def _as_mode(mode: Union[EasingMode, str]) -> EasingMode:
    try:
        return EasingMode(mode)
    except ValueError:
        raise InvalidConfigurationError(
            f"Unknown easing mode: {mode}",
            option="mode",
            available=[m.value for m in EasingMode],
        ) from None


class BezierEase:
    """
    Customizable easing function backed by an N-point Bezier curve.

    Usage:
        ease = BezierEase()                              # default 7-point curve
        ease = BezierEase([(0, 0), (0.5, 0), (1, 1)], mode="easeOut")
        progress = ease(0.3)

        ease = BezierEase.from_config({"controlPoints": [[0, 0], [1, 1]]})
    """

    def __init__(
        self,
        control_points: Optional[Iterable[PointLike]] = None,
        mode: Union[EasingMode, str] = EasingMode.EASE_IN,
    ):
        """
        Initialize easing function.

        Args:
            control_points: Ordered control points. Defaults to the 7-point curve.
            mode: Easing mode

        Raises:
            InvalidConfigurationError: If points are empty/malformed or mode is unknown
        """
        self.mode = _as_mode(mode)
        self._curve = CurveEvaluator(control_points)
        logger.debug(
            f"BezierEase created: {len(self._curve.points)} points, mode={self.mode.value}"
        )

    @property
    def control_points(self) -> ControlPointSequence:
        return self._curve.points

    @property
    def curve(self) -> CurveEvaluator:
        return self._curve

    def ease_in_core(self, normalized_time: float) -> float:
        """Raw curve value, the ease-in form of this function."""
        return self._curve.evaluate(normalized_time)

    def ease(self, normalized_time: float) -> float:
        """
        Transform animation progress according to the easing mode.

        Args:
            normalized_time: Progress of the animation, conventionally 0-1

        Returns:
            Eased progress (not clamped)
        """
        t = float(normalized_time)
        core = self._curve.evaluate

        if self.mode is EasingMode.EASE_IN:
            return core(t)
        if self.mode is EasingMode.EASE_OUT:
            return 1.0 - core(1.0 - t)
        if t < 0.5:
            return core(t * 2.0) * 0.5
        return (1.0 - core((1.0 - t) * 2.0)) * 0.5 + 0.5

    __call__ = ease

    def ease_array(self, normalized_times) -> np.ndarray:
        """Vectorized ease() over an array of normalized times."""
        ts = np.asarray(normalized_times, dtype=np.float64)
        core = self._curve.evaluate_array

        if self.mode is EasingMode.EASE_IN:
            return core(ts)
        if self.mode is EasingMode.EASE_OUT:
            return 1.0 - core(1.0 - ts)

        first_half = core(ts * 2.0) * 0.5
        second_half = (1.0 - core((1.0 - ts) * 2.0)) * 0.5 + 0.5
        return np.where(ts < 0.5, first_half, second_half)

    def apply_to_range(self, normalized_time: float, from_val: float, to_val: float) -> float:
        """
        Apply easing to interpolate between two values.

        Args:
            normalized_time: Progress 0-1
            from_val: Start value
            to_val: End value
        """
        eased_t = self.ease(normalized_time)
        return from_val + (to_val - from_val) * eased_t

    def create_instance(self) -> "BezierEase":
        """Create a blank instance with default configuration."""
        return type(self)()

    def clone(self) -> "BezierEase":
        """Create an independent instance with the same configuration."""
        return type(self)(self.control_points, self.mode)

    def to_config(self) -> EaseConfig:
        """Export the current configuration."""
        return EaseConfig(control_points=list(self.control_points), mode=self.mode)

    @classmethod
    def from_config(cls, config: Union[EaseConfig, dict]) -> "BezierEase":
        """
        Create from an EaseConfig or a raw options mapping.

        Raises:
            InvalidConfigurationError: If the configuration is invalid
        """
        if not isinstance(config, EaseConfig):
            config = load_config(config)
        return cls(config.to_points(), config.mode)

    @classmethod
    def from_preset(cls, name: str, mode: Union[EasingMode, str] = EasingMode.EASE_IN) -> "BezierEase":
        """Create from a named control point preset."""
        return cls(get_preset(name), mode)

    def __repr__(self) -> str:
        points = [p.to_tuple() for p in self.control_points]
        return f"BezierEase(control_points={points}, mode={self.mode.value!r})"


__all__ = [
    "BezierEase",
    "EasingMode",
]
