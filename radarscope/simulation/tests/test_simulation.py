#!/usr/bin/env python3
# radarscope/simulation/tests/test_simulation.py

import sys
from pathlib import Path
import unittest
from unittest.mock import MagicMock

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from radarscope.navdata import NavigationDataset, DatasetState, Runway, Ils
from radarscope.simulation import RadarSimulation, SimulationConfig, UnknownAircraftError, SimulationError
from radarscope.simulation.exceptions import ConfigurationError
from radarscope.visualization import LineSegment, CircleShape, TextLabel

def make_dataset():
    return NavigationDataset.loaded(
        runways=[Runway("RW35", "LIML", 45.43, 9.28, 8000, 357.5), Runway("RW17", "LIML", 45.46, 9.28, 8000, 177.5)],
        ils=[Ils("LIML", "RW35", 355.0, 2.5)]
    )

class TestRadarSimulation(unittest.TestCase):
    def setUp(self):
        self.sim = RadarSimulation(SimulationConfig())
        self.aircraft = self.sim.add_aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")

    def test_initial_display_matches_true_state(self):
        self.assertEqual((self.aircraft.display_x, self.aircraft.display_y),
                         self.sim.projection.to_pixel(45.5, 9.2))
        self.assertEqual(self.aircraft.display_heading, 135)

    def test_sweep_freeze_and_refresh(self):
        shown = (self.aircraft.display_x, self.aircraft.display_y)
        self.sim.tick(0)
        result = self.sim.tick(1900)
        self.assertFalse(result.swept)
        self.assertEqual((self.aircraft.display_x, self.aircraft.display_y), shown)
        self.assertNotEqual((self.aircraft.lat, self.aircraft.lon), (45.5, 9.2))

        result = self.sim.tick(2000)
        self.assertTrue(result.swept)
        self.assertEqual(result.sweep_count, 1)
        self.assertEqual((self.aircraft.display_x, self.aircraft.display_y),
                         self.sim.projection.to_pixel(self.aircraft.lat, self.aircraft.lon))

    def test_sweep_remainder_carried(self):
        self.sim.tick(0)
        result = self.sim.tick(2100)
        self.assertTrue(result.swept)
        self.assertAlmostEqual(result.delta_seconds, 2.1)
        self.assertEqual(self.sim.sweep.accumulated_ms, 100)

    def test_label_state_is_live_between_sweeps(self):
        self.aircraft.set_altitude_target(20000)
        self.sim.tick(0)
        self.sim.tick(1000)
        self.assertEqual(self.aircraft.altitude, 18025)
        self.assertEqual(self.aircraft.vertical_speed, 1500)

    def test_duplicate_and_unknown_aircraft(self):
        with self.assertRaises(SimulationError):
            self.sim.add_aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")
        with self.assertRaises(UnknownAircraftError):
            self.sim.remove_aircraft("NOPE")
        self.sim.remove_aircraft("BAW123")
        self.assertEqual(self.sim.aircraft, {})

    def test_config_profile_applies_to_new_aircraft(self):
        sim = RadarSimulation(SimulationConfig(turn_rate_deg_s=3))
        aircraft = sim.add_aircraft("SLOW1", 45.5, 9.2, 90, 5000, 150, "LIML", "L")
        aircraft.set_heading_target(120)
        sim.tick(0)
        sim.tick(1000)
        self.assertEqual(aircraft.heading, 93)

    def test_redraw_callback_failure_does_not_stop_traffic(self):
        self.sim.on_redraw = MagicMock(side_effect=RuntimeError("canvas lost"))
        self.sim.tick(0)
        with self.assertLogs('radarscope.simulation.core', level='ERROR'):
            result = self.sim.tick(500)
        self.assertAlmostEqual(result.delta_seconds, 0.5)
        self.assertEqual(self.sim.on_redraw.call_count, 2)
        self.assertNotEqual(self.aircraft.lat, 45.5)

    def test_non_finite_timestamp_does_not_stall_traffic(self):
        self.sim.tick(0)
        with self.assertLogs('radarscope.simulation.clock', level='WARNING'):
            result = self.sim.tick(float('nan'))
        self.assertEqual(result.delta_seconds, 0.0)
        self.assertEqual((self.aircraft.lat, self.aircraft.lon), (45.5, 9.2))
        result = self.sim.tick(5000)
        self.assertAlmostEqual(result.delta_seconds, 5.0)
        self.assertTrue(result.swept)
        self.assertNotEqual((self.aircraft.lat, self.aircraft.lon), (45.5, 9.2))

class TestNavigationLifecycle(unittest.TestCase):
    def test_pending_until_loaded(self):
        sim = RadarSimulation()
        self.assertEqual(sim.dataset.state, DatasetState.PENDING)
        self.assertTrue(sim.geometry.is_empty)
        geometry = sim.load_navigation(make_dataset())
        self.assertEqual(len(geometry.runways), 1)
        self.assertEqual(len(geometry.localizers), 1)

    def test_unavailable_data_keeps_traffic_running(self):
        sim = RadarSimulation(dataset=NavigationDataset.unavailable("database missing"))
        aircraft = sim.add_aircraft("AWE456", 45.3, 9.4, 225, 16000, 160, "LIML", "M")
        sim.tick(0)
        sim.tick(2000)
        self.assertTrue(sim.geometry.is_empty)
        self.assertNotEqual(aircraft.lat, 45.3)

    def test_load_from_missing_database(self):
        sim = RadarSimulation(SimulationConfig(navdb_path="/nonexistent/navdb.s3db"))
        geometry = sim.load_navigation_from_db()
        self.assertTrue(geometry.is_empty)
        self.assertEqual(sim.dataset.state, DatasetState.UNAVAILABLE)

    def test_load_without_database_configured(self):
        with self.assertRaises(ConfigurationError):
            RadarSimulation().load_navigation_from_db()

    def test_resize_rederives_geometry(self):
        sim = RadarSimulation(dataset=make_dataset())
        aircraft = sim.add_aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")
        before = sim.geometry.runways[0].threshold_a
        sim.resize(400, 400)
        after = sim.geometry.runways[0].threshold_a
        self.assertAlmostEqual(after[0], before[0] / 2)
        self.assertAlmostEqual(after[1], before[1] / 2)
        expected_x, expected_y = sim.projection.to_pixel(45.5, 9.2)
        self.assertAlmostEqual(aircraft.display_x, expected_x)
        self.assertAlmostEqual(aircraft.display_y, expected_y)

    def test_resize_keeps_return_frozen_between_sweeps(self):
        sim = RadarSimulation()
        aircraft = sim.add_aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")
        aircraft.set_heading_target(180)
        sim.tick(0)
        result = sim.tick(1500)
        self.assertFalse(result.swept)
        sim.resize(400, 400)
        shown_lat, shown_lon = sim.projection.to_geo(aircraft.display_x, aircraft.display_y)
        self.assertAlmostEqual(shown_lat, 45.5)
        self.assertAlmostEqual(shown_lon, 9.2)
        self.assertEqual(aircraft.display_heading, 135)
        self.assertNotEqual(aircraft.heading, 135)

    def test_scene_contains_map_and_traffic(self):
        sim = RadarSimulation(dataset=make_dataset())
        sim.add_aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")
        primitives = sim.scene()
        self.assertEqual(sum(isinstance(p, LineSegment) for p in primitives), 3)   # runway, localizer, vector
        self.assertEqual(sum(isinstance(p, CircleShape) for p in primitives), 1)
        self.assertIn("BAW123 H135", [p.text for p in primitives if isinstance(p, TextLabel)])

if __name__ == '__main__':
    unittest.main()
