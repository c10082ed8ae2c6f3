#!/usr/bin/env python3
# radarscope/simulation/tests/test_config.py

import os
import sys
import json
import tempfile
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from radarscope.simulation import SimulationConfig, ConfigurationError

class TestSimulationConfig(unittest.TestCase):
    def test_defaults(self):
        config = SimulationConfig()
        self.assertEqual(config.sweep_interval_ms, 2000)
        self.assertEqual(config.active_airports, {"LIML": ["RW35"], "LIMC": ["RW35R"]})
        bounds = config.build_bounds()
        center_lat, center_lon = bounds.center
        self.assertAlmostEqual(center_lat, 45.44944444)
        self.assertAlmostEqual(center_lon, 9.27833333)
        # 30 NM each way along the meridian
        self.assertAlmostEqual(bounds.lat_span * 111.32 / 2, 30 * 1.852)

    def test_corners_override_center(self):
        config = SimulationConfig(corners=[45.0, 9.0, 46.0, 10.0])
        bounds = config.build_bounds()
        self.assertEqual((bounds.min_lat, bounds.max_lat, bounds.min_lon, bounds.max_lon), (45.0, 46.0, 9.0, 10.0))

    def test_degenerate_corners_rejected(self):
        config = SimulationConfig(corners=(45.0, 9.0, 45.0, 10.0))
        with self.assertRaises(ConfigurationError):
            config.build_bounds()

    def test_invalid_values(self):
        with self.assertRaises(ConfigurationError):
            SimulationConfig(sweep_interval_ms=0)
        with self.assertRaises(ConfigurationError):
            SimulationConfig(turn_rate_deg_s=-2)
        with self.assertRaises(ConfigurationError):
            SimulationConfig(corners=(45.0, 9.0))

    def test_center_must_be_numeric(self):
        with self.assertRaises(ConfigurationError) as ctx:
            SimulationConfig.from_dict({"center_lat": "45.4"})
        self.assertEqual(ctx.exception.config_name, "center_lat")
        with self.assertRaises(ConfigurationError):
            SimulationConfig(center_lon=float('nan'))
        with self.assertRaises(ConfigurationError):
            SimulationConfig(min_speed_kt=None)

    def test_malformed_corners_rejected(self):
        for corners in (["a", 9, 46, 10], "4590", 45.0, [45.0, 9.0, float('inf'), 10.0]):
            with self.subTest(corners=corners):
                with self.assertRaises(ConfigurationError) as ctx:
                    SimulationConfig.from_dict({"corners": corners})
                self.assertEqual(ctx.exception.config_name, "corners")

    def test_performance_profile(self):
        profile = SimulationConfig(turn_rate_deg_s=3, vertical_rate_fpm=2000).performance_profile()
        self.assertEqual(profile.turn_rate_deg_s, 3)
        self.assertEqual(profile.vertical_rate_fpm, 2000)
        self.assertEqual(profile.min_speed_kt, 100)

    def test_from_dict_rejects_unknown_keys(self):
        with self.assertRaises(ConfigurationError) as ctx:
            SimulationConfig.from_dict({"range_nm": 20, "radar_colour": "green"})
        self.assertEqual(ctx.exception.config_name, "radar_colour")

    def test_from_json(self):
        fd, path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, 'w') as f:
            json.dump({"range_nm": 20, "active_airports": None}, f)
        try:
            config = SimulationConfig.from_json(path)
        finally:
            os.remove(path)
        self.assertEqual(config.range_nm, 20)
        self.assertIsNone(config.active_airports)

    def test_from_json_missing_file(self):
        with self.assertRaises(ConfigurationError):
            SimulationConfig.from_json("/nonexistent/radarscope.json")

if __name__ == '__main__':
    unittest.main()
