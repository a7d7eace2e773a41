from .argb import argb

TRANSPARENT = argb(0, 0, 0, 0)
BLACK = argb(255, 0, 0, 0)
WHITE = argb(255, 255, 255, 255)

RED = argb(255, 255, 0, 0)
GREEN = argb(255, 0, 255, 0)
BLUE = argb(255, 0, 0, 255)

YELLOW = argb(255, 255, 255, 0)
CYAN = argb(255, 0, 255, 255)
MAGENTA = argb(255, 255, 0, 255)
