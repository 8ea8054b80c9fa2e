"""
Constants declarations for uvoxid
"""

# Angular codes are stored in millionths of a degree
MICRO_PER_DEGREE = 1_000_000

LAT_MAX_MICRO = 90_000_000
LAT_MIN_MICRO = -90_000_000
LON_MAX_MICRO = 180_000_000  # exclusive
LON_MIN_MICRO = -180_000_000
HALF_TURN_MICRO = 180_000_000
FULL_TURN_MICRO = 360_000_000

# Biases applied to lat/lon codes in the packed form
LAT_BIAS = 90_000_000
LON_BIAS = 180_000_000

# Fixed-width integer limits
U64_MAX = 2 ** 64 - 1
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
I128_MIN = -(2 ** 127)
I128_MAX = 2 ** 127 - 1

# Packed layout: [frame_id:64][r_um:64][lat_biased:64][lon_biased:64]
FIELD_BITS = 64
FIELD_HEX_CHARS = FIELD_BITS // 4
TOTAL_BITS = 4 * FIELD_BITS
HEX_LENGTH = TOTAL_BITS // 4

# Tolerance granularity (one base-32 character per unit)
BITS_PER_UNIT = 5
MAX_SIGNIFICANT_UNITS = TOTAL_BITS // BITS_PER_UNIT
SNAP_PREFIX = 'uvoxid:'

# 1 voxel = 1 micrometre edge length
VOXEL_SIZE_M = 1e-6
MICROMETERS_PER_METER = 1_000_000

# Well-known reference frames
FRAME_EARTH = 0
FRAME_MOON = 1
FRAME_SUN = 2

# Mean Earth radius, in micrometres
EARTH_RADIUS_UM = 6_371_000_000_000
