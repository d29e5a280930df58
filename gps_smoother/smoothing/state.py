"""
Sample and smoother state representation.
"""

import numbers
from dataclasses import dataclass, field
from typing import List, Optional

from ..math.constants import DEFAULT_WINDOW_SIZE, DEFAULT_ALPHA, MS_PER_SECOND

class InvalidConfiguration(ValueError):
    """Raised when the smoother is given a window size it cannot hold data with."""

def validate_window_size(window_size) -> int:
    """
    Check that a window size is a positive integer.

    Args:
        window_size: Requested window capacity

    Returns:
        The validated window size

    Raises:
        InvalidConfiguration: If the size is not a positive integer
    """
    # bool is an int subclass but True/False are never meant as sizes
    if isinstance(window_size, bool) or not isinstance(window_size, numbers.Integral):
        raise InvalidConfiguration(
            f"window_size must be a positive integer, got {window_size!r}")
    if window_size <= 0:
        raise InvalidConfiguration(
            f"window_size must be positive, got {window_size}")
    return int(window_size)

@dataclass(frozen=True)
class Sample:
    """A single position fix held in the smoothing window."""

    # Position (decimal degrees)
    lat: float
    lon: float

    # Altitude (meters)
    altitude: float

    # Timestamp (epoch milliseconds or caller-defined monotonic unit)
    timestamp: int

    @property
    def coordinates(self) -> List[float]:
        """Get position in GeoJSON [lon, lat] order."""
        return [self.lon, self.lat]

@dataclass
class SmootherState:
    """
    Mutable state shared by the window manager and the estimators.

    - window: most recent samples, oldest first
    - bearings: per-pair bearings in degrees [0, 360)
    - altitudes: raw altitudes mirrored from the window
    - speeds: per-pair instantaneous speeds in m/s
    - smoothed_*: None until the first applicable update
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    alpha: float = DEFAULT_ALPHA

    # Timestamp units per second
    timestamp_scale: float = MS_PER_SECOND

    window: List[Sample] = field(default_factory=list)

    # Derived arrays
    bearings: List[float] = field(default_factory=list)
    altitudes: List[float] = field(default_factory=list)
    speeds: List[float] = field(default_factory=list)

    # Smoothed estimates
    smoothed_bearing: Optional[float] = None
    smoothed_altitude: Optional[float] = None
    smoothed_speed: Optional[float] = None

    def __post_init__(self):
        self.window_size = validate_window_size(self.window_size)

    def clear(self):
        """Drop all samples, derived arrays and smoothed estimates."""
        self.window = []
        self.bearings = []
        self.altitudes = []
        self.speeds = []
        self.smoothed_bearing = None
        self.smoothed_altitude = None
        self.smoothed_speed = None

    def push(self, sample: Sample):
        """Append a sample, evicting the oldest when capacity is exceeded."""
        self.window.append(sample)
        if len(self.window) > self.window_size:
            self.window.pop(0)

    def truncate(self, window_size: int):
        """Set capacity and keep only the most recent samples that fit."""
        self.window_size = validate_window_size(window_size)
        if len(self.window) > self.window_size:
            self.window = self.window[-self.window_size:]

    def __str__(self) -> str:
        return (
            f"SmootherState(samples={len(self.window)}/{self.window_size}, "
            f"alpha={self.alpha}, bearing={self.smoothed_bearing}, "
            f"altitude={self.smoothed_altitude}, speed={self.smoothed_speed})"
        )
