"""
Exception hierarchy for bezier_ease.

All package errors derive from BezierEaseException and carry a details dict.
"""

from typing import Any, Dict, Optional


class BezierEaseException(Exception):
    """Base exception for the bezier_ease package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({detail_str})"


class InvalidConfigurationError(BezierEaseException):
    """Curve or easing configuration cannot be used."""

    def __init__(self, message: str, option=None, **kwargs):
        details = kwargs.copy()
        if option:
            details["option"] = option
        super().__init__(message, details)


__all__ = [
    "BezierEaseException",
    "InvalidConfigurationError",
]
