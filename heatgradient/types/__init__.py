from .format_type import FormatType, max_non_hue, HUE_360
from .color_types import PackedColor, Colormap, ChannelTuple

__all__ = [
    "FormatType",
    "max_non_hue",
    "HUE_360",
    "PackedColor",
    "Colormap",
    "ChannelTuple",
]
