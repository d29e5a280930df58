"""
Bearing, altitude and speed estimators for the sliding-window smoother.

Each estimator recomputes its working array from the full window on every
call and then updates the matching smoothed value on the shared state.
"""

import numpy as np
from typing import List

from .state import Sample, SmootherState
from ..math.utils import (haversine_distance, calculate_bearing, circular_mean,
                          upper_median, exponential_blend)

class BearingEstimator:
    """
    Circular mean of the bearings between consecutive window samples.

    The mean replaces the previous estimate outright; it is not blended.
    """

    @staticmethod
    def pairwise_bearings(window: List[Sample]) -> List[float]:
        """
        Compute bearings between consecutive samples.

        Args:
            window: Samples in chronological order

        Returns:
            Bearings in degrees, one per consecutive pair
        """
        return [
            calculate_bearing(prev.lat, prev.lon, curr.lat, curr.lon)
            for prev, curr in zip(window, window[1:])
        ]

    @staticmethod
    def update(state: SmootherState):
        """Recompute bearings and replace the smoothed bearing."""
        state.bearings = BearingEstimator.pairwise_bearings(state.window)

        if len(state.window) < 2:
            return

        state.smoothed_bearing = circular_mean(state.bearings)

class AltitudeFilter:
    """
    Median altitude over the window followed by exponential smoothing.
    """

    @staticmethod
    def update(state: SmootherState):
        """Recompute altitudes and blend the window median into the estimate."""
        state.altitudes = [sample.altitude for sample in state.window]

        median = upper_median(state.altitudes)
        if median is None:
            return

        state.smoothed_altitude = exponential_blend(
            median, state.smoothed_altitude, state.alpha)

class SpeedEstimator:
    """
    Mean of pairwise haversine speeds followed by exponential smoothing.
    """

    @staticmethod
    def pairwise_speeds(window: List[Sample], timestamp_scale: float) -> List[float]:
        """
        Compute instantaneous speeds between consecutive samples.

        Pairs whose elapsed time is zero or negative are skipped.

        Args:
            window: Samples in chronological order
            timestamp_scale: Timestamp units per second

        Returns:
            Speeds in m/s for pairs with positive elapsed time
        """
        speeds = []
        for prev, curr in zip(window, window[1:]):
            distance = haversine_distance(prev.lat, prev.lon, curr.lat, curr.lon)
            dt = (curr.timestamp - prev.timestamp) / timestamp_scale

            if dt > 0:
                speeds.append(distance / dt)

        return speeds

    @staticmethod
    def update(state: SmootherState):
        """Recompute speeds and blend their mean into the estimate."""
        state.speeds = SpeedEstimator.pairwise_speeds(state.window, state.timestamp_scale)

        if len(state.window) < 2:
            return

        # No usable pair still counts as an observation of zero speed
        mean_speed = float(np.mean(state.speeds)) if state.speeds else 0.0

        state.smoothed_speed = exponential_blend(
            mean_speed, state.smoothed_speed, state.alpha)
