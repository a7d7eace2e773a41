from __future__ import annotations
from typing import Tuple, TypeAlias
import numpy as np

PackedColor: TypeAlias = int
Colormap: TypeAlias = np.ndarray  # 1d uint32 of packed ARGB
Scalar = int | float
ChannelTuple = Tuple[Scalar, Scalar, Scalar, Scalar]

ARGB_MASK = 0xFFFFFFFF
CHANNEL_MASK = 0xFF
ALPHA_SHIFT = 24
RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0
