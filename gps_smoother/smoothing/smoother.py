"""
Sliding-window GPS smoother producing heading, altitude and ground speed.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from .state import Sample, SmootherState
from .estimators import BearingEstimator, AltitudeFilter, SpeedEstimator
from ..math.utils import std_dev, circular_std
from ..math.constants import (DEFAULT_WINDOW_SIZE, DEFAULT_ALPHA,
                              DEFAULT_MAX_BEARING_STD_DEG, MS_PER_SECOND)

logger = logging.getLogger(__name__)

class GpsSmoother:
    """
    Denoises a stream of position fixes over a fixed-size window.

    Every call to add_position recomputes bearing, altitude and speed from
    the whole window. Dispersion statistics are computed when queried.
    Instances are not thread-safe; use one smoother per track.
    """

    def __init__(self,
                 window_size: int = DEFAULT_WINDOW_SIZE,
                 alpha: float = DEFAULT_ALPHA,
                 timestamp_scale: float = MS_PER_SECOND,
                 max_bearing_std_deg: float = DEFAULT_MAX_BEARING_STD_DEG):
        """
        Initialize the smoother.

        Args:
            window_size: Number of recent samples kept (must be positive)
            alpha: Weight given to each new estimate, not clamped to [0, 1]
            timestamp_scale: Timestamp units per second (1000 for milliseconds)
            max_bearing_std_deg: Default threshold for bearing_is_stable

        Raises:
            InvalidConfiguration: If window_size is not a positive integer
        """
        self.state = SmootherState(
            window_size=window_size,
            alpha=alpha,
            timestamp_scale=timestamp_scale
        )
        self.max_bearing_std_deg = max_bearing_std_deg

        # Statistics
        self.sample_count = 0

    @classmethod
    def from_config(cls, config) -> 'GpsSmoother':
        """
        Build a smoother from a SmootherConfig.

        Args:
            config: Loaded configuration

        Returns:
            Configured GpsSmoother
        """
        return cls(
            window_size=config.window_size,
            alpha=config.alpha,
            timestamp_scale=config.timestamp_scale,
            max_bearing_std_deg=config.max_bearing_std_deg
        )

    @property
    def window_size(self) -> int:
        return self.state.window_size

    @property
    def alpha(self) -> float:
        return self.state.alpha

    @property
    def window(self) -> List[Sample]:
        """Copy of the samples currently in the window, oldest first."""
        return list(self.state.window)

    def __len__(self) -> int:
        return len(self.state.window)

    def reset(self):
        """Clear the window and all smoothed estimates."""
        self.state.clear()
        self.sample_count = 0
        logger.debug("Smoother reset")

    def set_window_size(self, window_size: int):
        """
        Change the window capacity.

        Shrinking keeps the most recent samples. Derived arrays are
        refreshed on the next add_position call.

        Args:
            window_size: New capacity

        Raises:
            InvalidConfiguration: If window_size is not a positive integer
        """
        self.state.truncate(window_size)
        logger.debug("Window size set to %d (%d samples kept)",
                     window_size, len(self.state.window))

    def set_alpha(self, alpha: float):
        """
        Replace the smoothing coefficient for subsequent updates.

        Args:
            alpha: Weight given to each new estimate
        """
        self.state.alpha = alpha
        logger.debug("Smoothing alpha set to %s", alpha)

    def add_position(self, lat: float, lon: float, altitude: float,
                     timestamp: Optional[int] = None):
        """
        Insert a position fix and refresh the smoothed estimates.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            altitude: Altitude in meters
            timestamp: Fix time in epoch milliseconds (defaults to now)
        """
        if timestamp is None:
            timestamp = int(time.time() * 1000)

        self.state.push(Sample(lat=lat, lon=lon, altitude=altitude, timestamp=timestamp))
        self.sample_count += 1

        BearingEstimator.update(self.state)
        AltitudeFilter.update(self.state)
        SpeedEstimator.update(self.state)

    def get_smoothed_data(self) -> Dict[str, Optional[float]]:
        """
        Get the current estimates with dispersion metrics.

        Returns:
            Dict with bearing, altitude, speed (None until available),
            bearing_stability and altitude_variance (standard deviations)
        """
        return {
            'bearing': self.state.smoothed_bearing,
            'altitude': self.state.smoothed_altitude,
            'speed': self.state.smoothed_speed,
            'bearing_stability': std_dev(self.state.bearings),
            'altitude_variance': std_dev(self.state.altitudes),
        }

    def to_geojson(self) -> Dict[str, Any]:
        """
        Project the window as a GeoJSON LineString feature.

        Returns:
            Feature with [lon, lat] coordinates in window order and the
            smoothed data as properties
        """
        return {
            'type': 'Feature',
            'geometry': {
                'type': 'LineString',
                'coordinates': [sample.coordinates for sample in self.state.window],
            },
            'properties': self.get_smoothed_data(),
        }

    def bearing_is_stable(self, max_std_deg: Optional[float] = None) -> bool:
        """
        Check whether the bearing estimate is steady enough to display.

        Args:
            max_std_deg: Largest acceptable bearing scatter in degrees
                (defaults to the configured threshold)

        Returns:
            True if a bearing exists and its scatter is within the threshold
        """
        if self.state.smoothed_bearing is None:
            return False

        threshold = self.max_bearing_std_deg if max_std_deg is None else max_std_deg
        return circular_std(self.state.bearings) <= threshold

    def get_statistics(self) -> dict:
        """Get smoother statistics."""
        return {
            'sample_count': self.sample_count,
            'window_length': len(self.state.window),
            'window_size': self.state.window_size,
            'alpha': self.state.alpha,
            'bearing_stable': self.bearing_is_stable(),
            'smoothed': self.get_smoothed_data()
        }

    def __repr__(self) -> str:
        return f"GpsSmoother({self.state})"
