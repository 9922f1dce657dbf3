"""Tests for the exception hierarchy."""

import pytest

from radarchart.core.errors import (
    AxisValueError,
    ConfigError,
    InvalidConfigurationError,
    RadarChartError,
)


class TestRadarChartError:
    def test_user_message_defaults_to_message(self):
        error = RadarChartError("internal detail")
        assert str(error) == "internal detail"
        assert error.user_message == "internal detail"
        assert error.context == {}

    def test_user_message_and_context(self):
        error = RadarChartError("detail", user_message="Something went wrong", context={"k": 1})
        assert error.user_message == "Something went wrong"
        assert error.context == {"k": 1}

    @pytest.mark.parametrize("cls", [ConfigError, InvalidConfigurationError, AxisValueError])
    def test_subclasses_caught_by_base(self, cls):
        with pytest.raises(RadarChartError):
            raise cls("boom")

    def test_invalid_configuration_is_config_error(self):
        assert issubclass(InvalidConfigurationError, ConfigError)
        assert not issubclass(AxisValueError, ConfigError)

    def test_rejected_setter_carries_context(self, chart):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            chart.axis_tick = 0
        assert exc_info.value.context
