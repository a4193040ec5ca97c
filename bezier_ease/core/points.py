"""
Control point data structures.

A curve is defined by an ordered, immutable tuple of ControlPoint.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class ControlPoint:
    """
    Vertex of the defining polygon of a Bezier curve.

    Attributes:
        x: Horizontal coordinate (time axis for easing curves)
        y: Vertical coordinate (progress axis for easing curves)
    """
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) pair."""
        return (self.x, self.y)


ControlPointSequence = Tuple[ControlPoint, ...]
PointLike = Union[ControlPoint, Sequence[float], Mapping[str, float]]


# Approximates an ease-in-out curve with a late, steep rise
DEFAULT_CONTROL_POINTS: ControlPointSequence = (
    ControlPoint(0.00, 0.00),
    ControlPoint(0.01, 0.00),
    ControlPoint(0.40, 0.00),
    ControlPoint(0.70, 0.00),
    ControlPoint(0.85, 1.00),
    ControlPoint(0.90, 1.00),
    ControlPoint(1.00, 1.00),
)


def to_control_point(value: PointLike) -> ControlPoint:
    """
    Coerce a point-like value to a ControlPoint.

    Accepts ControlPoint, (x, y) pairs and {"x": .., "y": ..} mappings.

    Raises:
        InvalidConfigurationError: If the value is not a 2D point
    """
    if isinstance(value, ControlPoint):
        return value

    try:
        if isinstance(value, Mapping):
            return ControlPoint(float(value["x"]), float(value["y"]))
        if isinstance(value, (str, bytes)) or len(value) != 2:
            raise InvalidConfigurationError(
                "Control point must have exactly two coordinates",
                option="control_points", value=value,
            )
        x, y = value
        return ControlPoint(float(x), float(y))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"Invalid control point: {e}", option="control_points", value=value
        ) from e


def as_control_points(values: Iterable[PointLike]) -> ControlPointSequence:
    """
    Build a validated, immutable control point sequence.

    Args:
        values: Point-like values in curve order

    Returns:
        Tuple of ControlPoint

    Raises:
        InvalidConfigurationError: If the sequence is empty or malformed
    """
    if values is None:
        raise InvalidConfigurationError(
            "Control point sequence is required", option="control_points"
        )
    points = tuple(to_control_point(v) for v in values)
    if not points:
        raise InvalidConfigurationError(
            "Control point sequence must contain at least one point",
            option="control_points",
        )
    return points


def points_from_json(points_json: List[List[float]]) -> ControlPointSequence:
    """
    Create a sequence from JSON representation.

    Args:
        points_json: List of [x, y] pairs
                     Example: [[0, 0], [0.42, 0], [0.58, 1], [1, 1]]
    """
    return as_control_points(points_json)


def points_to_json(points: Iterable[ControlPoint]) -> List[List[float]]:
    """Convert a sequence to a JSON-serializable list of [x, y] pairs."""
    return [[p.x, p.y] for p in points]


__all__ = [
    "ControlPoint",
    "ControlPointSequence",
    "PointLike",
    "DEFAULT_CONTROL_POINTS",
    "to_control_point",
    "as_control_points",
    "points_from_json",
    "points_to_json",
]

