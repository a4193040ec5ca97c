"""Pydantic configuration model for Bezier easing."""

from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import EasingMode
from .core import (
    ControlPoint,
    ControlPointSequence,
    DEFAULT_CONTROL_POINTS,
    InvalidConfigurationError,
    as_control_points,
    get_logger,
)

logger = get_logger(__name__)


def _default_pairs() -> List[Tuple[float, float]]:
    return [p.to_tuple() for p in DEFAULT_CONTROL_POINTS]


class EaseConfig(BaseModel):
    """Easing configuration, accepted as JSON-style options."""

    control_points: List[Tuple[float, float]] = Field(
        default_factory=_default_pairs,
        min_length=1,
        alias="controlPoints",
        description="Ordered (x, y) control points",
    )
    mode: EasingMode = Field(
        default=EasingMode.EASE_IN,
        alias="easingMode",
        description="easeIn, easeOut or easeInOut",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("control_points", mode="before")
    @classmethod
    def _coerce_points(cls, value: Any) -> Any:
        """Accept ControlPoint objects and {"x", "y"} mappings next to pairs."""
        if isinstance(value, (list, tuple)):
            coerced = []
            for item in value:
                if isinstance(item, ControlPoint):
                    coerced.append(item.to_tuple())
                elif isinstance(item, Mapping):
                    coerced.append((item.get("x"), item.get("y")))
                else:
                    coerced.append(item)
            return coerced
        return value

    def to_points(self) -> ControlPointSequence:
        """Return the configured control points as an immutable sequence."""
        return as_control_points(self.control_points)


def load_config(data: Dict[str, Any]) -> EaseConfig:
    """
    Validate a configuration mapping.

    Args:
        data: Options such as {"controlPoints": [[0, 0], [1, 1]], "easingMode": "easeOut"}

    Raises:
        InvalidConfigurationError: If any option is invalid
    """
    try:
        config = EaseConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        logger.warning(f"Rejected easing configuration: {errors}")
        raise InvalidConfigurationError(
            "Invalid easing configuration", errors=errors
        ) from e

    logger.debug(
        f"Loaded easing configuration: {len(config.control_points)} points, mode={config.mode.value}"
    )
    return config


__all__ = [
    "EaseConfig",
    "load_config",
]
