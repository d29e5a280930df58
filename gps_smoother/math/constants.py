"""
Mathematical and physical constants for GPS track smoothing.
"""

import math

# Mathematical constants
PI = math.pi
TWO_PI = 2 * math.pi

# Earth parameters
EARTH_RADIUS_M = 6371000.0  # Mean Earth radius in meters

# Conversion factors
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
FULL_CIRCLE_DEG = 360.0

# Timestamps are epoch milliseconds unless configured otherwise
MS_PER_SECOND = 1000.0

# Smoother defaults
DEFAULT_WINDOW_SIZE = 5
DEFAULT_ALPHA = 0.3
DEFAULT_MAX_BEARING_STD_DEG = 15.0  # Bearing scatter above this is "unstable"
