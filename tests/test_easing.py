"""
Unit Tests for the BezierEase easing function

Run with: pytest tests/test_easing.py -v
"""

import numpy as np
import pytest

from bezier_ease import (
    BezierEase,
    CurveEvaluator,
    DEFAULT_CONTROL_POINTS,
    EaseConfig,
    EasingMode,
    InvalidConfigurationError,
    get_preset,
)


@pytest.fixture
def default_ease():
    return BezierEase()


@pytest.fixture
def linear_points():
    return [(0.0, 0.0), (1.0, 1.0)]


class TestEaseIn:
    """Ease-in applies the raw curve."""

    def test_default_configuration(self, default_ease):
        assert default_ease.control_points == DEFAULT_CONTROL_POINTS
        assert default_ease.mode is EasingMode.EASE_IN

    def test_endpoints(self, default_ease):
        assert default_ease(0.0) == 0.0
        assert default_ease(1.0) == 1.0

    def test_matches_curve(self, default_ease):
        curve = CurveEvaluator()
        for t in (0.1, 0.5, 0.85):
            assert default_ease.ease(t) == curve.evaluate(t)
            assert default_ease.ease_in_core(t) == curve.evaluate(t)

    def test_elbow(self, default_ease):
        assert default_ease(0.85) == pytest.approx(0.95266140625)

    def test_not_clamped(self, linear_points):
        ease = BezierEase(linear_points)
        assert ease(1.5) == 1.5


class TestEasingModes:
    """Ease-out and ease-in-out transforms of the core curve."""

    def test_mode_from_string(self, linear_points):
        ease = BezierEase(linear_points, mode="easeOut")
        assert ease.mode is EasingMode.EASE_OUT

    def test_unknown_mode_rejected(self, linear_points):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            BezierEase(linear_points, mode="bounce")
        assert "easeInOut" in exc_info.value.details["available"]

    def test_ease_out_mirrors_curve(self, default_ease):
        ease_out = BezierEase(mode=EasingMode.EASE_OUT)
        for t in (0.0, 0.2, 0.5, 0.9, 1.0):
            assert ease_out(t) == pytest.approx(1.0 - default_ease(1.0 - t))

    def test_ease_out_default_midpoint(self):
        ease_out = BezierEase(mode=EasingMode.EASE_OUT)
        assert ease_out(0.5) == pytest.approx(1.0 - 0.34375)

    def test_ease_in_out_halves(self):
        ease = BezierEase(mode=EasingMode.EASE_IN_OUT)
        assert ease(0.0) == 0.0
        assert ease(0.5) == pytest.approx(0.5)
        assert ease(1.0) == pytest.approx(1.0)
        assert ease(0.25) == pytest.approx(0.171875)
        assert ease(0.75) == pytest.approx(1.0 - 0.171875)

    def test_linear_is_identity_in_every_mode(self, linear_points):
        for mode in EasingMode:
            ease = BezierEase(linear_points, mode=mode)
            for t in (0.0, 0.3, 0.5, 0.7, 1.0):
                assert ease(t) == pytest.approx(t)


class TestEaseArray:
    """Vectorized easing."""

    @pytest.mark.parametrize("mode", list(EasingMode))
    def test_matches_scalar(self, mode):
        ease = BezierEase(mode=mode)
        ts = np.linspace(0.0, 1.0, 21)
        expected = [ease(t) for t in ts]
        np.testing.assert_allclose(ease.ease_array(ts), expected, rtol=0, atol=1e-15)

    def test_accepts_list(self, default_ease):
        result = default_ease.ease_array([0.0, 1.0])
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, [0.0, 1.0])


class TestRangeAndLifecycle:
    """Range interpolation, cloning and construction hooks."""

    def test_apply_to_range(self, linear_points):
        ease = BezierEase(linear_points)
        assert ease.apply_to_range(0.25, 10.0, 20.0) == pytest.approx(12.5)

    def test_apply_to_range_uses_curve(self, default_ease):
        assert default_ease.apply_to_range(0.5, 0.0, 100.0) == pytest.approx(34.375)

    def test_create_instance_is_blank(self, linear_points):
        ease = BezierEase(linear_points, mode="easeOut")
        blank = ease.create_instance()
        assert isinstance(blank, BezierEase)
        assert blank is not ease
        assert blank.control_points == DEFAULT_CONTROL_POINTS
        assert blank.mode is EasingMode.EASE_IN

    def test_clone_copies_configuration(self, linear_points):
        ease = BezierEase(linear_points, mode="easeInOut")
        copy = ease.clone()
        assert copy is not ease
        assert copy.control_points == ease.control_points
        assert copy.mode is ease.mode
        assert copy(0.3) == ease(0.3)

    def test_create_instance_keeps_subclass(self):
        class StepEase(BezierEase):
            pass

        assert type(StepEase().create_instance()) is StepEase

    def test_empty_points_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            BezierEase([])


class TestFactories:
    """Construction from configuration and presets."""

    def test_from_config_mapping(self):
        ease = BezierEase.from_config({
            "controlPoints": [[0, 0], [1, 1]],
            "easingMode": "easeOut",
        })
        assert len(ease.control_points) == 2
        assert ease.mode is EasingMode.EASE_OUT

    def test_from_config_model(self):
        config = EaseConfig(control_points=[(0.0, 0.0), (1.0, 2.0)])
        ease = BezierEase.from_config(config)
        assert ease(0.5) == 1.0

    def test_from_config_empty_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            BezierEase.from_config({"controlPoints": []})

    def test_to_config_round_trip(self):
        ease = BezierEase([(0, 0), (0.5, 0), (1, 1)], mode="easeInOut")
        config = ease.to_config()
        assert config.mode is EasingMode.EASE_IN_OUT
        assert BezierEase.from_config(config).control_points == ease.control_points

    def test_from_preset(self):
        ease = BezierEase.from_preset("easeInOut", mode="easeOut")
        assert ease.control_points == get_preset("easeInOut")
        assert ease.mode is EasingMode.EASE_OUT

    def test_repr(self, linear_points):
        text = repr(BezierEase(linear_points))
        assert "BezierEase" in text and "easeIn" in text
