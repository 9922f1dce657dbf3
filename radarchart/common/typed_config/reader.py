# radarchart/common/typed_config/reader.py
#
# TypedConfigReader - typed access to a plain configuration dict.

from typing import Any

from radarchart.common.typed_config.models import ChartConfig, LayoutConfig


class TypedConfigReader:
    """Typed config reader.

    from_dict() runs on every call, so the latest values are always returned.
    Section dicts are copied before parsing.

    Usage:
        reader = TypedConfigReader(config_dict)
        chart = reader.get_chart()  # ChartConfig
        layout = reader.get_layout()  # LayoutConfig
    """

    def __init__(self, config_dict: dict[str, Any]) -> None:
        """Keep a reference to the config dict (not copied)."""
        self._config = config_dict

    def _section(self, name: str) -> dict[str, Any]:
        raw = self._config.get(name)
        return dict(raw) if isinstance(raw, dict) else {}

    def get_chart(self) -> ChartConfig:
        return ChartConfig.from_dict(self._section("chart"))

    def get_layout(self) -> LayoutConfig:
        return LayoutConfig.from_dict(self._section("layout"))
