"""Tests for the ScaleModel auto/manual state machine."""

import math

import pytest

from radarchart.core.errors import InvalidConfigurationError
from radarchart.core.scale_model import DEFAULT_AXIS_MAX, ScaleModel


class TestConstruction:
    def test_defaults(self):
        scale = ScaleModel()
        assert scale.axis_max == DEFAULT_AXIS_MAX
        assert scale.axis_tick == pytest.approx(DEFAULT_AXIS_MAX / 5)
        assert scale.auto_size is True

    def test_tick_defaults_to_fifth_of_max(self):
        assert ScaleModel(axis_max=50).axis_tick == pytest.approx(10)

    def test_zero_max_gets_unit_tick(self):
        scale = ScaleModel(axis_max=0)
        assert scale.axis_tick == 1.0

    def test_rejects_negative_max(self):
        with pytest.raises(InvalidConfigurationError):
            ScaleModel(axis_max=-1)

    def test_rejects_zero_tick(self):
        with pytest.raises(InvalidConfigurationError):
            ScaleModel(axis_tick=0)


class TestAutoMode:
    def test_evaluate_tracks_max(self):
        scale = ScaleModel(auto_size=True)
        assert scale.evaluate([5, 15, 10]) is True
        assert scale.axis_max == 15

    def test_evaluate_empty_keeps_last_max(self):
        scale = ScaleModel(auto_size=True)
        scale.evaluate([7])
        assert scale.evaluate([]) is False
        assert scale.axis_max == 7

    def test_evaluate_unchanged_returns_false(self):
        scale = ScaleModel(axis_max=20, auto_size=True)
        assert scale.evaluate([20, 3]) is False

    def test_tick_independent_of_auto_max(self):
        scale = ScaleModel(axis_max=20, auto_size=True)
        scale.evaluate([100])
        assert scale.axis_tick == pytest.approx(4)


class TestManualMode:
    def test_evaluate_ignored_in_manual(self):
        scale = ScaleModel(axis_max=20, auto_size=False)
        assert scale.evaluate([100]) is False
        assert scale.axis_max == 20

    def test_set_axis_max_forces_manual(self):
        scale = ScaleModel(auto_size=True)
        scale.set_axis_max(42)
        assert scale.axis_max == 42
        assert scale.auto_size is False

    def test_enabling_auto_recomputes_immediately(self):
        scale = ScaleModel(axis_max=20, auto_size=False)
        assert scale.set_auto_size(True, [3, 9]) is True
        assert scale.axis_max == 9

    def test_enabling_auto_without_values_keeps_max(self):
        scale = ScaleModel(axis_max=20, auto_size=False)
        scale.set_auto_size(True, [])
        assert scale.axis_max == 20
        assert scale.auto_size is True


class TestRejectedSetters:
    @pytest.mark.parametrize("tick", [0, -1, math.nan, math.inf])
    def test_bad_tick_keeps_previous(self, tick):
        scale = ScaleModel(axis_max=20, axis_tick=4)
        with pytest.raises(InvalidConfigurationError):
            scale.set_axis_tick(tick)
        assert scale.axis_tick == 4

    def test_bad_max_keeps_previous_state(self):
        """A rejected axis_max does not flip the mode to manual either."""
        scale = ScaleModel(axis_max=20, auto_size=True)
        with pytest.raises(InvalidConfigurationError):
            scale.set_axis_max(-5)
        assert scale.axis_max == 20
        assert scale.auto_size is True

    def test_zero_max_is_allowed(self):
        scale = ScaleModel()
        scale.set_axis_max(0)
        assert scale.axis_max == 0
