from __future__ import annotations
from typing import Union
import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import (
    PackedColor,
    ChannelTuple,
    Scalar,
    ARGB_MASK,
    CHANNEL_MASK,
    ALPHA_SHIFT,
    RED_SHIFT,
    GREEN_SHIFT,
    BLUE_SHIFT,
)

_np_clamp = bound_type_to_np_function[BoundType.CLAMP]


def _to_channel(value: Scalar) -> int:
    """Truncate toward zero and saturate into a single 8-bit channel."""
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            raise ValueError("Channel value cannot be NaN")
        value = math.trunc(value)
    return int(clamp(int(value), 0, CHANNEL_MASK))


def normalize_argb(color: int) -> PackedColor:
    """
    Normalize a packed color to its unsigned 32-bit form.

    Signed 32-bit colors (negative whenever alpha >= 128) map onto the same
    bit pattern as their unsigned counterpart.
    """
    if isinstance(color, (bool, np.bool_)) or not isinstance(color, (int, np.integer)):
        raise TypeError(f"Packed ARGB color must be an integer, got {type(color).__name__}")
    color = int(color)
    if not -(1 << 31) <= color <= ARGB_MASK:
        raise ValueError(f"Packed ARGB color {color:#x} does not fit in 32 bits")
    return color & ARGB_MASK


def argb(a: Scalar, r: Scalar, g: Scalar, b: Scalar) -> PackedColor:
    """Pack four channels into one ARGB integer. Channels saturate at 0 and 255."""
    return (
        (_to_channel(a) << ALPHA_SHIFT)
        | (_to_channel(r) << RED_SHIFT)
        | (_to_channel(g) << GREEN_SHIFT)
        | (_to_channel(b) << BLUE_SHIFT)
    )


def rgb(r: Scalar, g: Scalar, b: Scalar) -> PackedColor:
    """Pack an opaque color."""
    return argb(CHANNEL_MASK, r, g, b)


def alpha(color: int) -> int:
    return (normalize_argb(color) >> ALPHA_SHIFT) & CHANNEL_MASK


def red(color: int) -> int:
    return (normalize_argb(color) >> RED_SHIFT) & CHANNEL_MASK


def green(color: int) -> int:
    return (normalize_argb(color) >> GREEN_SHIFT) & CHANNEL_MASK


def blue(color: int) -> int:
    return (normalize_argb(color) >> BLUE_SHIFT) & CHANNEL_MASK


def unpack_argb(color: int, format_type: FormatType = FormatType.INT) -> ChannelTuple:
    """
    Split a packed color into ``(a, r, g, b)``.

    Args:
        color: Packed ARGB integer (signed or unsigned 32-bit)
        format_type: INT for 0..255 ints, FLOAT for 0..1 floats

    Returns:
        Tuple of four channels in the requested format
    """
    color = normalize_argb(color)
    channels = (
        (color >> ALPHA_SHIFT) & CHANNEL_MASK,
        (color >> RED_SHIFT) & CHANNEL_MASK,
        (color >> GREEN_SHIFT) & CHANNEL_MASK,
        (color >> BLUE_SHIFT) & CHANNEL_MASK,
    )
    format_type = FormatType(format_type)
    if format_type == FormatType.INT:
        return channels
    maxval = max_non_hue[FormatType.INT]
    return tuple(c / maxval for c in channels)  # type: ignore[return-value]


def with_alpha(color: int, new_alpha: Scalar) -> PackedColor:
    """Return ``color`` with its alpha channel replaced, RGB untouched."""
    _, r, g, b = unpack_argb(color)
    return argb(new_alpha, r, g, b)


def transparent_variant(color: int) -> PackedColor:
    """Same RGB as ``color`` with alpha 0."""
    return with_alpha(color, 0)


# ===================== Vectorized =====================

def np_normalize_argb(colors: Union[NDArray, list, tuple]) -> NDArray:
    """Vectorized :func:`normalize_argb`; returns a ``uint32`` array."""
    arr = np.asarray(colors)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        if arr.size == 0:
            return np.zeros(arr.shape, dtype=np.uint32)
        raise TypeError(f"Packed ARGB colors must be integers, got dtype {arr.dtype}")
    wide = arr.astype(np.int64)
    if np.any(wide < -(1 << 31)) or np.any(wide > ARGB_MASK):
        raise ValueError("Packed ARGB colors must fit in 32 bits")
    return (wide & ARGB_MASK).astype(np.uint32)


def np_unpack_argb(colors: NDArray, format_type: FormatType = FormatType.INT) -> NDArray:
    """
    Vectorized :func:`unpack_argb`.

    Returns:
        Array of shape (..., 4) ordered (a, r, g, b); ``uint8`` for INT,
        ``float64`` in [0, 1] for FLOAT.
    """
    packed = np_normalize_argb(colors)
    channels = np.stack(
        [
            (packed >> ALPHA_SHIFT) & CHANNEL_MASK,
            (packed >> RED_SHIFT) & CHANNEL_MASK,
            (packed >> GREEN_SHIFT) & CHANNEL_MASK,
            (packed >> BLUE_SHIFT) & CHANNEL_MASK,
        ],
        axis=-1,
    )
    if FormatType(format_type) == FormatType.INT:
        return channels.astype(np.uint8)
    return channels / float(max_non_hue[FormatType.INT])


def np_pack_argb(a: NDArray, r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`argb`.

    Float channels are truncated toward zero, then every channel saturates
    into 0..255 before packing.
    """
    out_shape = np.broadcast(a, r, g, b).shape
    packed = np.zeros(out_shape, dtype=np.uint32)
    for channel, shift in ((a, ALPHA_SHIFT), (r, RED_SHIFT), (g, GREEN_SHIFT), (b, BLUE_SHIFT)):
        channel = np.asarray(channel)
        if np.issubdtype(channel.dtype, np.floating):
            if np.any(np.isnan(channel)):
                raise ValueError("Channel values cannot be NaN")
            channel = np.trunc(channel)
        channel = _np_clamp(channel, 0, CHANNEL_MASK).astype(np.uint32)
        packed |= np.broadcast_to(channel, out_shape) << np.uint32(shift)
    return packed


def np_with_alpha(colors: NDArray, new_alpha: Union[Scalar, NDArray]) -> NDArray:
    """Vectorized :func:`with_alpha`."""
    channels = np_unpack_argb(colors)
    return np_pack_argb(new_alpha, channels[..., 1], channels[..., 2], channels[..., 3])


def np_alpha(colors: NDArray) -> NDArray:
    return np_unpack_argb(colors)[..., 0]
