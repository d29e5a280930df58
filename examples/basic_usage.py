#!/usr/bin/env python3
"""
Basic usage example of the GPS smoother.

This example feeds a simulated noisy track into the smoother and prints
the smoothed heading, altitude and speed as it goes.
"""

import sys
import os
import time
import numpy as np

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gps_smoother import GpsSmoother
from gps_smoother.math.constants import EARTH_RADIUS_M

def simulate_track(duration=60, dt=1.0):
    """
    Simulate a vehicle driving a circle with noisy GPS fixes.

    Args:
        duration: Simulation duration in seconds
        dt: Time between fixes in seconds

    Yields:
        (lat, lon, altitude, timestamp_ms) tuples
    """
    # Vehicle motion parameters
    speed = 10.0  # m/s
    turn_radius = 200.0  # meters
    angular_velocity = speed / turn_radius  # rad/s

    # Starting position (San Francisco)
    start_lat = 37.7749
    start_lon = -122.4194
    start_alt = 50.0

    # Noise parameters
    gps_noise = 0.00001  # degrees (~1m)
    alt_noise = 3.0      # meters

    start_ms = int(time.time() * 1000)

    t = 0.0
    while t < duration:
        # Position on the circle (x east, y north)
        x = turn_radius * np.sin(angular_velocity * t)
        y = turn_radius * (1 - np.cos(angular_velocity * t))

        lat_offset = np.degrees(y / EARTH_RADIUS_M)
        lon_offset = np.degrees(x / (EARTH_RADIUS_M * np.cos(np.radians(start_lat))))

        yield (
            start_lat + lat_offset + np.random.normal(0, gps_noise),
            start_lon + lon_offset + np.random.normal(0, gps_noise),
            start_alt + np.random.normal(0, alt_noise),
            start_ms + int(t * 1000)
        )

        t += dt

def print_status(smoother: GpsSmoother, index: int):
    """Print current smoother output."""
    data = smoother.get_smoothed_data()
    stable = "stable" if smoother.bearing_is_stable() else "unstable"

    print(f"Fix #{index}")
    print(f"  Bearing:  {data['bearing']:6.1f}° ({stable}, σ={data['bearing_stability']:.1f}°)")
    print(f"  Altitude: {data['altitude']:6.1f} m (σ={data['altitude_variance']:.1f} m)")
    print(f"  Speed:    {data['speed']:6.2f} m/s")
    print()

def main():
    """Main example function."""
    print("GPS Smoother - Basic Usage Example")
    print("=" * 50)

    smoother = GpsSmoother(window_size=5, alpha=0.3)
    print(f"Initialized {smoother!r}")
    print()

    print_interval = 10

    for index, (lat, lon, altitude, timestamp) in enumerate(simulate_track(duration=60), start=1):
        smoother.add_position(lat, lon, altitude, timestamp)

        if index % print_interval == 0:
            print_status(smoother, index)

    print("Simulation completed!")

    feature = smoother.to_geojson()
    print(f"Window holds {len(feature['geometry']['coordinates'])} fixes")

if __name__ == "__main__":
    main()
