"""
Mathematical utilities for GPS track smoothing.
"""

from .utils import (haversine_distance, calculate_bearing, wrap_degrees, circular_std,
                    circular_mean, upper_median, std_dev, exponential_blend)
from .constants import *

__all__ = [
    "haversine_distance",
    "calculate_bearing",
    "wrap_degrees",
    "circular_mean",
    "circular_std",
    "upper_median",
    "std_dev",
    "exponential_blend",
]
