# No dependencies
MAX_RGB = 255
HSB_MAX = 1.0

# Number of sectors the hue ring is split into for HSB -> RGB
HUE_SECTORS = 6

GOLDEN_RATIO_CONJUGATE = 0.618033988749895
