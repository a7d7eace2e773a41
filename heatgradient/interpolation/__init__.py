from .hue import shortest_hue_arc, interpolate_color, np_interpolate_colors

__all__ = ["shortest_hue_arc", "interpolate_color", "np_interpolate_colors"]
