"""
Sliding-window smoothing of GPS position fixes.
"""

from .smoother import GpsSmoother
from .state import Sample, SmootherState, InvalidConfiguration
from .estimators import BearingEstimator, AltitudeFilter, SpeedEstimator

__all__ = [
    "GpsSmoother",
    "Sample",
    "SmootherState",
    "InvalidConfiguration",
    "BearingEstimator",
    "AltitudeFilter",
    "SpeedEstimator",
]
