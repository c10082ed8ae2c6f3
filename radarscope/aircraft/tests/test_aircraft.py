#!/usr/bin/env python3
# radarscope/aircraft/tests/test_aircraft.py

import sys
import math
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from radarscope.aircraft import Aircraft, AxisState, PerformanceProfile, InvalidCommandError
from radarscope.aircraft.systems.navigation import advance_position, distance_flown_km
from radarscope.constants.units import UnitConstants
from radarscope.projection import GeoBounds, GeoProjection

def haversine_km(lat1, lon1, lat2, lon2):
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    a = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    return 2 * UnitConstants.EARTH_RADIUS_KM * math.asin(math.sqrt(a))

class TestGreatCircleStep(unittest.TestCase):
    def test_equator_due_east(self):
        # 360 kt for 100 s along the equator
        distance = distance_flown_km(360, 100)
        lat, lon = advance_position(0.0, 0.0, 90.0, distance)
        expected_lon = math.degrees(distance / UnitConstants.EARTH_RADIUS_KM)
        self.assertAlmostEqual(lat, 0.0, places=9)
        self.assertAlmostEqual(lon, expected_lon, places=9)

    def test_due_north_changes_latitude_only(self):
        lat, lon = advance_position(45.0, 9.0, 0.0, 111.0)
        self.assertAlmostEqual(lon, 9.0, places=9)
        self.assertAlmostEqual(lat, 45.0 + math.degrees(111.0 / UnitConstants.EARTH_RADIUS_KM), places=9)

    def test_distance_matches_haversine(self):
        lat, lon = advance_position(45.45, 9.28, 135.0, 20.0)
        self.assertAlmostEqual(haversine_km(45.45, 9.28, lat, lon), 20.0, places=6)

class TestAircraft(unittest.TestCase):
    def setUp(self):
        self.aircraft = Aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M")
        self.projection = GeoProjection(GeoBounds.from_center(45.45, 9.28, 30), 800, 800)

    def test_initial_target_equals_true_state(self):
        self.assertEqual(self.aircraft.target_heading, 135)
        self.assertEqual(self.aircraft.target_altitude, 18000)
        self.assertEqual(self.aircraft.target_speed, 230)
        self.assertEqual(self.aircraft.vertical_speed, 0)
        for state in (self.aircraft.heading_state, self.aircraft.speed_state, self.aircraft.altitude_state):
            self.assertEqual(state, AxisState.CAPTURED)

    def test_setters_do_not_change_true_state(self):
        self.aircraft.set_heading_target(200)
        self.aircraft.set_speed_target(250)
        self.aircraft.set_altitude_target(20000)
        self.assertEqual(self.aircraft.heading, 135)
        self.assertEqual(self.aircraft.speed, 230)
        self.assertEqual(self.aircraft.altitude, 18000)
        self.assertEqual(self.aircraft.heading_state, AxisState.CAPTURING)

    def test_latest_command_wins(self):
        self.aircraft.set_altitude_target(20000)
        self.aircraft.update(1.0)
        self.aircraft.set_altitude_target(16000)
        self.aircraft.update(1.0)
        self.assertEqual(self.aircraft.altitude, 18000)
        self.assertEqual(self.aircraft.vertical_speed, -1500)

    def test_invalid_command_leaves_state(self):
        with self.assertRaises(InvalidCommandError):
            self.aircraft.set_speed_target("fast")
        self.assertEqual(self.aircraft.target_speed, 230)

    def test_update_moves_position(self):
        lat, lon = self.aircraft.lat, self.aircraft.lon
        self.aircraft.update(10.0)
        self.assertLess(self.aircraft.lat, lat)      # heading 135 is south-east
        self.assertGreater(self.aircraft.lon, lon)

    def test_zero_delta_is_noop(self):
        self.aircraft.set_heading_target(200)
        self.aircraft.update(0.0)
        self.assertEqual(self.aircraft.heading, 135)
        self.assertEqual(self.aircraft.lat, 45.5)

    def test_non_finite_delta_is_noop(self):
        self.aircraft.set_heading_target(200)
        for delta in (float('nan'), float('inf'), float('-inf')):
            self.aircraft.update(delta)
        self.assertEqual(self.aircraft.heading, 135)
        self.assertEqual((self.aircraft.lat, self.aircraft.lon), (45.5, 9.2))
        self.aircraft.update(1.0)
        self.assertNotEqual(self.aircraft.heading, 135)

    def test_unknown_wake_category_rejected(self):
        with self.assertRaises(InvalidCommandError) as ctx:
            Aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "X")
        self.assertEqual(ctx.exception.field, "wtc")
        self.assertEqual(Aircraft("A388", 45.5, 9.2, 135, 18000, 230, "LIMC", "J").wtc, "J")

    def test_display_set_at_creation_with_projection(self):
        aircraft = Aircraft("BAW123", 45.5, 9.2, 135, 18000, 230, "LIMC", "M", projection=self.projection)
        self.assertEqual((aircraft.display_x, aircraft.display_y), self.projection.to_pixel(45.5, 9.2))
        self.assertEqual(aircraft.display_heading, 135)
        self.assertIsNone(self.aircraft.display_x)

    def test_reproject_display_keeps_swept_position(self):
        self.aircraft.reproject_display(self.projection, self.projection.resized(400, 400))
        self.assertIsNone(self.aircraft.display_x)

        self.aircraft.refresh_display(self.projection)
        self.aircraft.update(10.0)
        smaller = self.projection.resized(400, 400)
        self.aircraft.reproject_display(self.projection, smaller)
        lat, lon = smaller.to_geo(self.aircraft.display_x, self.aircraft.display_y)
        self.assertAlmostEqual(lat, 45.5)
        self.assertAlmostEqual(lon, 9.2)

    def test_snapshot(self):
        self.aircraft.set_altitude_target(20000)
        self.aircraft.refresh_display(self.projection)
        self.aircraft.update(1.0)
        snapshot = self.aircraft.snapshot()
        self.assertEqual(snapshot.callsign, "BAW123")
        self.assertEqual((snapshot.lat, snapshot.lon), (self.aircraft.lat, self.aircraft.lon))
        self.assertEqual(snapshot.altitude_ft, 18025)
        self.assertEqual(snapshot.vertical_speed_fpm, 1500)
        self.assertEqual(snapshot.target_altitude_ft, 20000)
        self.assertEqual(snapshot.target_heading_deg, 135)
        self.assertEqual(snapshot.target_speed_kt, 230)
        self.assertEqual((snapshot.display_x, snapshot.display_y), self.projection.to_pixel(45.5, 9.2))
        self.assertEqual(snapshot.display_heading_deg, 135)
        with self.assertRaises(AttributeError):
            snapshot.lat = 0.0

    def test_display_frozen_until_refresh(self):
        self.aircraft.refresh_display(self.projection)
        shown = (self.aircraft.display_x, self.aircraft.display_y)
        self.aircraft.set_heading_target(180)
        self.aircraft.update(5.0)
        self.assertEqual((self.aircraft.display_x, self.aircraft.display_y), shown)
        self.assertEqual(self.aircraft.display_heading, 135)

        self.aircraft.refresh_display(self.projection)
        self.assertEqual((self.aircraft.display_x, self.aircraft.display_y),
                         self.projection.to_pixel(self.aircraft.lat, self.aircraft.lon))
        self.assertEqual(self.aircraft.display_heading, 145)

    def test_no_bounds_clamp(self):
        aircraft = Aircraft("FAR01", 45.95, 9.28, 0, 10000, 480, "LIML", "H")
        for _ in range(600):
            aircraft.update(1.0)
        self.assertFalse(self.projection.bounds.contains(aircraft.lat, aircraft.lon))

    def test_custom_profile(self):
        aircraft = Aircraft("SLOW1", 45.5, 9.2, 90, 5000, 150, "LIML", "L",
                            profile=PerformanceProfile(turn_rate_deg_s=3.0))
        aircraft.set_heading_target(120)
        aircraft.update(1.0)
        self.assertEqual(aircraft.heading, 93)

    def test_rotate_tag(self):
        self.aircraft.rotate_tag()
        self.assertAlmostEqual(self.aircraft.tag_angle, math.pi / 3)
        for _ in range(5):
            self.aircraft.rotate_tag()
        self.assertAlmostEqual(math.cos(self.aircraft.tag_angle), 1.0, places=9)
        self.assertAlmostEqual(math.sin(self.aircraft.tag_angle), 0.0, places=9)

    def test_vector_length(self):
        self.assertAlmostEqual(self.aircraft.vector_length_km(60), 230 * UnitConstants.KNOTS_TO_KPS * 60)

if __name__ == '__main__':
    unittest.main()
