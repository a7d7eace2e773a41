# 0..255 RGB -> (hue degrees, saturation, value)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (120.0, 1.0, 1.0),
    (0, 0, 255): (240.0, 1.0, 1.0),
    (255, 255, 0): (60.0, 1.0, 1.0),
    (0, 255, 255): (180.0, 1.0, 1.0),
    (255, 0, 255): (300.0, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (255, 128, 0): (60 * 128 / 255, 1.0, 1.0),
    (102, 225, 0): (92.8, 1.0, 225 / 255),
    (255, 0, 128): (360 - 60 * 128 / 255, 1.0, 1.0),
    (64, 128, 192): (210.0, 2 / 3, 192 / 255),
}

# Packed ARGB -> (a, r, g, b)
samples_argb = {
    0xFF000000: (255, 0, 0, 0),
    0x80FF0000: (128, 255, 0, 0),
    0x00123456: (0, 0x12, 0x34, 0x56),
    0xFFFFFFFF: (255, 255, 255, 255),
    0x7F66E100: (127, 102, 225, 0),
}
