#!/usr/bin/env python3
"""
Integration tests for the complete GPS smoothing pipeline.
"""

import unittest
import json
import numpy as np
import sys
import os
import tempfile
import time

# Add package and tools to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'tools'))

from gps_smoother import GpsSmoother, haversine_distance
from gps_smoother.math.constants import EARTH_RADIUS_M
import smooth_track

def straight_track(bearing_deg, speed, count, noise_deg=0.0, seed=0):
    """Generate fixes moving at constant speed along a fixed heading."""
    rng = np.random.default_rng(seed)
    start_lat, start_lon = 37.7749, -122.4194
    rows = []
    for i in range(count):
        distance = speed * i
        north = distance * np.cos(np.radians(bearing_deg))
        east = distance * np.sin(np.radians(bearing_deg))
        lat = start_lat + np.degrees(north / EARTH_RADIUS_M)
        lon = start_lon + np.degrees(east / (EARTH_RADIUS_M * np.cos(np.radians(start_lat))))
        rows.append((
            float(lat + rng.normal(0, noise_deg)),
            float(lon + rng.normal(0, noise_deg)),
            float(50.0 + rng.normal(0, 2.0)),
            i * 1000
        ))
    return rows

class TestTrackSmoothing(unittest.TestCase):
    """Test smoothing of simulated tracks."""

    def test_noisy_track_recovers_heading_and_speed(self):
        """Test noisy fixes still give the true heading and speed."""
        smoother = GpsSmoother(window_size=10, alpha=0.3)
        for row in straight_track(bearing_deg=45.0, speed=15.0, count=60, noise_deg=0.000005):
            smoother.add_position(*row)

        data = smoother.get_smoothed_data()
        self.assertAlmostEqual(data['bearing'], 45.0, delta=5.0)
        self.assertAlmostEqual(data['speed'], 15.0, delta=3.0)
        self.assertAlmostEqual(data['altitude'], 50.0, delta=3.0)
        self.assertEqual(len(smoother), 10)

    def test_heading_across_north(self):
        """Test a track heading just west of north reports near 360."""
        smoother = GpsSmoother(window_size=5)
        for row in straight_track(bearing_deg=-2.0, speed=10.0, count=10):
            smoother.add_position(*row)

        bearing = smoother.get_smoothed_data()['bearing']
        self.assertAlmostEqual(bearing, 358.0, delta=0.1)

    def test_stationary_track(self):
        """Test repeated fixes at one place give zero speed."""
        smoother = GpsSmoother()
        for i in range(6):
            smoother.add_position(37.0, -122.0, 10.0, i * 1000)

        data = smoother.get_smoothed_data()
        self.assertEqual(data['speed'], 0.0)
        self.assertEqual(data['altitude'], 10.0)
        self.assertEqual(data['altitude_variance'], 0.0)

    def test_geojson_serializable(self):
        """Test the GeoJSON feature serializes to JSON."""
        smoother = GpsSmoother()
        for row in straight_track(bearing_deg=90.0, speed=5.0, count=8):
            smoother.add_position(*row)

        feature = json.loads(json.dumps(smoother.to_geojson()))
        self.assertEqual(len(feature['geometry']['coordinates']), 5)
        self.assertEqual(feature['properties']['bearing'],
                         smoother.get_smoothed_data()['bearing'])

    def test_independent_instances(self):
        """Test smoothers for separate tracks do not share state."""
        first = GpsSmoother()
        second = GpsSmoother()

        first.add_position(0.0, 0.0, 1.0, 0)
        first.add_position(0.0, 0.001, 1.0, 1000)

        self.assertEqual(len(second), 0)
        self.assertIsNone(second.get_smoothed_data()['bearing'])

    def test_haversine_matches_track_spacing(self):
        """Test generated fixes are the requested distance apart."""
        rows = straight_track(bearing_deg=30.0, speed=20.0, count=2)
        (lat1, lon1, _, _), (lat2, lon2, _, _) = rows
        self.assertAlmostEqual(haversine_distance(lat1, lon1, lat2, lon2), 20.0, delta=0.1)

class TestPerformance(unittest.TestCase):
    """Test smoother performance characteristics."""

    def test_update_performance(self):
        """Test insertion cost stays small."""
        smoother = GpsSmoother(window_size=10)
        rows = straight_track(bearing_deg=10.0, speed=5.0, count=1000)

        start_time = time.time()
        for row in rows:
            smoother.add_position(*row)
        elapsed = time.time() - start_time

        self.assertLess(elapsed, 2.0,
                        f"Insertions too slow: {elapsed:.3f}s for 1000 updates")
        self.assertEqual(len(smoother), 10)

class TestSmoothTrackTool(unittest.TestCase):
    """Test the CSV replay tool."""

    def setUp(self):
        """Write a small track to a scratch CSV."""
        self.tmpdir = tempfile.TemporaryDirectory()
        self.track_path = os.path.join(self.tmpdir.name, "track.csv")
        self.output_path = os.path.join(self.tmpdir.name, "track.geojson")

        with open(self.track_path, "w") as f:
            f.write("lat,lon,altitude,timestamp\n")
            f.write("0.0,0.0,100,0\n")
            f.write("0.0,0.001,110,1000\n")
            f.write("bad,row,here,x\n")
            f.write("0.0,0.002,90,2000\n")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_writes_geojson(self):
        """Test the tool smooths the track and writes a feature."""
        status = smooth_track.main([self.track_path, "--window-size", "3",
                                    "--alpha", "0.5", "--output", self.output_path])
        self.assertEqual(status, 0)

        with open(self.output_path) as f:
            feature = json.load(f)

        self.assertEqual(feature['geometry']['coordinates'],
                         [[0.0, 0.0], [0.001, 0.0], [0.002, 0.0]])
        self.assertAlmostEqual(feature['properties']['bearing'], 90.0, places=6)
        self.assertAlmostEqual(feature['properties']['altitude'], 102.5)

    def test_rejects_bad_window_size(self):
        """Test an invalid window size exits with status 2."""
        status = smooth_track.main([self.track_path, "--window-size", "0"])
        self.assertEqual(status, 2)

    def test_read_track_skips_bad_rows(self):
        """Test malformed rows are skipped."""
        rows = list(smooth_track.read_track(self.track_path))
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[1], (0.0, 0.001, 110.0, 1000))

if __name__ == '__main__':
    unittest.main(verbosity=2)
