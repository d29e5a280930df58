#!/usr/bin/env python3
"""
Replay a recorded GPS track through the smoother and print GeoJSON.

CSV columns (header required): lat, lon, altitude, timestamp
"""

import argparse
import csv
import json
import logging
import os
import sys

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gps_smoother import GpsSmoother, InvalidConfiguration, SmootherConfig

logger = logging.getLogger("smooth_track")

def read_track(path):
    """Yield (lat, lon, altitude, timestamp) rows from a CSV file."""
    with open(path, "r", newline="") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            try:
                yield (float(row["lat"]), float(row["lon"]),
                       float(row["altitude"]), int(float(row["timestamp"])))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping line %d: %s", line_no, e)

def build_parser():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("track", help="CSV file with lat,lon,altitude,timestamp columns")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--window-size", type=int, help="Override window size")
    parser.add_argument("--alpha", type=float, help="Override smoothing alpha")
    parser.add_argument("--output", help="Write GeoJSON here instead of stdout")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    config = SmootherConfig(args.config)
    if args.window_size is not None:
        config.set("window_size", args.window_size)
    if args.alpha is not None:
        config.set("alpha", args.alpha)
    config.configure_logging()

    try:
        smoother = GpsSmoother.from_config(config)
    except InvalidConfiguration as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for lat, lon, altitude, timestamp in read_track(args.track):
        smoother.add_position(lat, lon, altitude, timestamp)

    stats = smoother.get_statistics()
    logger.info("Processed %d samples, bearing stable: %s",
                stats['sample_count'], stats['bearing_stable'])

    feature = json.dumps(smoother.to_geojson(), indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(feature + "\n")
        logger.info("Saved %s", args.output)
    else:
        print(feature)

    return 0

if __name__ == "__main__":
    sys.exit(main())
