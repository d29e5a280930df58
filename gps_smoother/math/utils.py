"""
Mathematical utility functions for GPS track smoothing.
"""

import numpy as np
import math
from typing import Optional, Sequence

from .constants import EARTH_RADIUS_M, FULL_CIRCLE_DEG

def wrap_degrees(angle):
    """
    Wrap angle to [0, 360) range.

    Args:
        angle (float): Angle in degrees

    Returns:
        float: Wrapped angle in [0, 360)
    """
    # Shift first so tiny negative inputs land on 0 rather than 360
    wrapped = (angle + FULL_CIRCLE_DEG) % FULL_CIRCLE_DEG
    if wrapped >= FULL_CIRCLE_DEG:
        return 0.0
    return wrapped

def haversine_distance(lat1, lon1, lat2, lon2, radius=EARTH_RADIUS_M):
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: Latitude and longitude of first point (degrees)
        lat2, lon2: Latitude and longitude of second point (degrees)
        radius: Sphere radius in meters

    Returns:
        float: Distance in meters
    """
    # Convert to radians
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

    # Haversine formula
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c

def calculate_bearing(lat1, lon1, lat2, lon2):
    """
    Calculate the initial bearing (forward azimuth) between two GPS coordinates.

    Args:
        lat1, lon1: Starting latitude and longitude (degrees)
        lat2, lon2: Ending latitude and longitude (degrees)

    Returns:
        float: Bearing in degrees [0, 360), clockwise from true north
    """
    # Convert to radians
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

    dlon = lon2 - lon1

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return wrap_degrees(math.degrees(math.atan2(y, x)))

def circular_mean(angles: Sequence[float]) -> Optional[float]:
    """
    Average angles in degrees by summing unit vectors.

    Args:
        angles: Angles in degrees

    Returns:
        Mean angle in [0, 360), or None if no angles were given
    """
    if len(angles) == 0:
        return None

    radians = np.radians(np.asarray(angles, dtype=float))
    sum_sin = np.sum(np.sin(radians))
    sum_cos = np.sum(np.cos(radians))

    return wrap_degrees(math.degrees(math.atan2(sum_sin, sum_cos)))

def upper_median(values: Sequence[float]) -> Optional[float]:
    """
    Median that picks the element at index len // 2 of the sorted values.

    For even lengths this is the upper of the two middle elements; the
    two are never averaged.

    Args:
        values: Sequence of numbers

    Returns:
        Median value, or None for an empty sequence
    """
    if len(values) == 0:
        return None

    ordered = np.sort(np.asarray(values, dtype=float))
    return float(ordered[len(ordered) // 2])

def std_dev(values: Sequence[float]) -> float:
    """
    Population standard deviation (divides by N).

    Args:
        values: Sequence of numbers

    Returns:
        Standard deviation, 0.0 for an empty sequence
    """
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))

def circular_std(angles: Sequence[float]) -> float:
    """
    RMS deviation of angles from their circular mean.

    Deviations are wrapped to [-180, 180) so angles either side of north
    count as close together.

    Args:
        angles: Angles in degrees

    Returns:
        Scatter in degrees, 0.0 for an empty sequence
    """
    mean = circular_mean(angles)
    if mean is None:
        return 0.0

    deltas = (np.asarray(angles, dtype=float) - mean + 180.0) % FULL_CIRCLE_DEG - 180.0
    return float(np.sqrt(np.mean(deltas ** 2)))

def exponential_blend(new_value, previous, alpha):
    """
    Single-pole exponential smoothing step.

    Args:
        new_value: Latest instantaneous estimate
        previous: Previous smoothed estimate, or None on cold start
        alpha: Weight given to the new estimate

    Returns:
        float: new_value on cold start, otherwise the blended estimate
    """
    if previous is None:
        return new_value
    return alpha * new_value + (1 - alpha) * previous
