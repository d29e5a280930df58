"""
GPS track smoothing.

This package provides platform-independent implementations of:
- Sliding-window smoothing of heading, altitude and ground speed
- Dispersion metrics for quality gating
- Great-circle math utilities
"""

__version__ = "1.0.0"
__author__ = "GPS Smoother Team"

from .smoothing import GpsSmoother, Sample, InvalidConfiguration
from .config import SmootherConfig
from .math import haversine_distance, calculate_bearing

__all__ = [
    "GpsSmoother",
    "Sample",
    "InvalidConfiguration",
    "SmootherConfig",
    "haversine_distance",
    "calculate_bearing"
]
