# radarchart/common/typed_config - typed configuration accessors
#
# Chart and layout sections are typed as frozen dataclasses and read via
# TypedConfigReader.get_<section>().

from radarchart.common.typed_config.models import (
    ChartConfig,
    LayoutConfig,
    safe_bool,
    safe_color,
    safe_float,
    safe_graph_style,
)
from radarchart.common.typed_config.reader import TypedConfigReader

__all__ = [
    # Dataclasses
    "ChartConfig",
    "LayoutConfig",
    # Reader
    "TypedConfigReader",
    # Helper functions
    "safe_float",
    "safe_bool",
    "safe_color",
    "safe_graph_style",
]
