"""
Basic Usage Example for bezier_ease

Prints the default easing curve and a custom ease-in-out variant.
"""

import logging

from bezier_ease import BezierEase, CurveEvaluator, LogContext, setup_logging


def main():
    setup_logging(level=logging.DEBUG)

    # Default 7-point curve: flat start, steep rise after t=0.7
    ease = BezierEase()

    with LogContext("sample default curve", num_samples=11):
        ts, ys = ease.curve.sample(11)

    for t, y in zip(ts, ys):
        print(f"t={t:.1f}  eased={y:.4f}")

    # Same curve applied symmetrically
    ease_in_out = BezierEase.from_config({
        "controlPoints": [[0, 0], [0.01, 0], [0.4, 0], [0.7, 0], [0.85, 1], [0.9, 1], [1, 1]],
        "easingMode": "easeInOut",
    })
    print(f"easeInOut(0.25) = {ease_in_out(0.25):.4f}")

    # De Casteljau construction at t=0.85
    for level in CurveEvaluator().levels(0.85):
        print([f"({p.x:.3f}, {p.y:.3f})" for p in level])


if __name__ == "__main__":
    main()
