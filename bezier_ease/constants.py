"""Constants and enums for easing configuration."""

from enum import Enum


class EasingMode(str, Enum):
    """How the core curve is applied over normalized time."""

    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"


__all__ = ["EasingMode"]
