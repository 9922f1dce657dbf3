# tests/test_typed_config.py
#
# Unit tests for radarchart.common.typed_config

from dataclasses import FrozenInstanceError

import pytest

from radarchart.common.typed_config import (
    ChartConfig,
    LayoutConfig,
    TypedConfigReader,
    safe_bool,
    safe_color,
    safe_float,
    safe_graph_style,
)
from radarchart.common.typed_config.models import DEFAULT_END_COLOR, DEFAULT_START_COLOR
from radarchart.core.render_intent import GraphStyle


# =============================================================================
# Helper tests
# =============================================================================


class TestSafeFloat:
    def test_none_returns_default(self):
        assert safe_float(None, 1.5) == 1.5

    def test_number_returned(self):
        assert safe_float(3, 1.5) == 3.0

    def test_string_converted(self):
        assert safe_float("2.25", 1.5) == 2.25

    @pytest.mark.parametrize("value", ["abc", "", [], {}, True, False, float("nan"), float("inf")])
    def test_unusable_returns_default(self, value):
        assert safe_float(value, 1.5) == 1.5


class TestSafeBool:
    @pytest.mark.parametrize("value", [True, 1, "true", "YES", " 1 "])
    def test_truthy(self, value):
        assert safe_bool(value, default=False) is True

    @pytest.mark.parametrize("value", [False, 0, "false", "No", "0"])
    def test_falsy(self, value):
        assert safe_bool(value, default=True) is False

    @pytest.mark.parametrize("value", [None, "fasle", "abc", 1.0, []])
    def test_unrecognized_returns_default(self, value):
        assert safe_bool(value, default=True) is True


class TestSafeColor:
    def test_hex(self):
        assert safe_color("#ff8000", (0, 0, 0)) == (255, 128, 0)

    def test_none_returns_default(self):
        assert safe_color(None, (1, 2, 3)) == (1, 2, 3)

    def test_invalid_logs_and_returns_default(self, caplog):
        with caplog.at_level("WARNING"):
            assert safe_color("#zzzzzz", (1, 2, 3)) == (1, 2, 3)
        assert "#zzzzzz" in caplog.text


class TestSafeGraphStyle:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("stroke", GraphStyle.STROKE),
            ("FILL", GraphStyle.FILL),
            (" stroke_and_fill ", GraphStyle.STROKE_AND_FILL),
            (GraphStyle.FILL, GraphStyle.FILL),
        ],
    )
    def test_parsed(self, value, expected):
        assert safe_graph_style(value, GraphStyle.STROKE) is expected

    @pytest.mark.parametrize("value", [None, "dotted", 3])
    def test_fallback(self, value):
        assert safe_graph_style(value, GraphStyle.FILL) is GraphStyle.FILL


# =============================================================================
# ChartConfig
# =============================================================================


class TestChartConfig:
    def test_defaults(self):
        config = ChartConfig.from_dict({})
        assert config == ChartConfig()
        assert config.start_color == DEFAULT_START_COLOR
        assert config.end_color == DEFAULT_END_COLOR
        assert config.axis_max == 20.0
        assert config.axis_tick is None
        assert config.graph_style is GraphStyle.STROKE
        assert config.auto_size is True
        assert config.smooth_gradient is False
        assert config.text_size == 15.0

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            ChartConfig().axis_max = 5  # type: ignore[misc]

    def test_values_parsed(self):
        config = ChartConfig.from_dict(
            {
                "start_color": "#000000",
                "graph_color": [10, 20, 30],
                "axis_max": "50",
                "axis_tick": 5,
                "graph_style": "fill",
                "circles_only": "yes",
                "auto_size": "false",
                "smooth_gradient": 1,
                "text_size": 12,
            }
        )
        assert config.start_color == (0, 0, 0)
        assert config.graph_color == (10, 20, 30)
        assert config.axis_max == 50.0
        assert config.axis_tick == 5.0
        assert config.graph_style is GraphStyle.FILL
        assert config.circles_only is True
        assert config.auto_size is False
        assert config.smooth_gradient is True
        assert config.text_size == 12.0

    def test_negative_axis_max_falls_back(self):
        assert ChartConfig.from_dict({"axis_max": -3}).axis_max == 20.0

    @pytest.mark.parametrize("tick", [0, -1, "abc"])
    def test_bad_tick_means_default_tick(self, tick):
        assert ChartConfig.from_dict({"axis_tick": tick}).axis_tick is None

    def test_bad_text_size_falls_back(self):
        assert ChartConfig.from_dict({"text_size": 0}).text_size == 15.0

    def test_bad_color_falls_back(self):
        assert ChartConfig.from_dict({"end_color": "nope"}).end_color == DEFAULT_END_COLOR


# =============================================================================
# LayoutConfig
# =============================================================================


class TestLayoutConfig:
    def test_defaults(self):
        assert LayoutConfig.from_dict({}).as_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_base_padding(self):
        assert LayoutConfig.from_dict({"padding": 12}).as_tuple() == (12.0, 12.0, 12.0, 12.0)

    def test_side_overrides_base(self):
        layout = LayoutConfig.from_dict({"padding": 12, "padding_top": 30})
        assert layout.as_tuple() == (12.0, 30.0, 12.0, 12.0)

    def test_negative_clamped(self):
        layout = LayoutConfig.from_dict({"padding": -5, "padding_right": -1})
        assert layout.as_tuple() == (0.0, 0.0, 0.0, 0.0)


# =============================================================================
# TypedConfigReader
# =============================================================================


class TestTypedConfigReader:
    def test_sections(self):
        reader = TypedConfigReader({"chart": {"axis_max": 40}, "layout": {"padding": 8}})
        assert reader.get_chart().axis_max == 40.0
        assert reader.get_layout().padding_left == 8.0

    def test_missing_or_malformed_sections_use_defaults(self):
        reader = TypedConfigReader({"chart": "not a dict"})
        assert reader.get_chart() == ChartConfig()
        assert reader.get_layout() == LayoutConfig()

    def test_reads_latest_values(self):
        config = {"chart": {"axis_max": 10}}
        reader = TypedConfigReader(config)
        config["chart"]["axis_max"] = 30
        assert reader.get_chart().axis_max == 30.0

    def test_section_not_mutated(self):
        section = {"axis_max": 10}
        TypedConfigReader({"chart": section}).get_chart()
        assert section == {"axis_max": 10}
