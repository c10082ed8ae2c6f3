#!/usr/bin/env python3
# radarscope/nav_geometry/tests/test_approach.py

import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from radarscope.navdata import ApproachLeg
from radarscope.nav_geometry.utils import is_initial_fix, select_initial_fix

def leg(name, approach_id="I09L", code="E  A", airport="TEST", lat=45.5, lon=9.2):
    return ApproachLeg(airport, approach_id, name, code, lat, lon)

class TestInitialFixSelection(unittest.TestCase):
    def test_iaf_codes(self):
        self.assertTrue(is_initial_fix(leg("KITE", code="E  A")))
        self.assertTrue(is_initial_fix(leg("KITE", code="E  C")))
        self.assertTrue(is_initial_fix(leg("KITE", code="E  D")))
        self.assertFalse(is_initial_fix(leg("KITE", code="E  F")))
        self.assertFalse(is_initial_fix(leg("KITE", code="E")))

    def test_named_fix_wins_a_tie(self):
        legs = [leg("AB12"), leg("KITE"), leg("AB12"), leg("KITE")]
        self.assertEqual(select_initial_fix(legs, "TEST", "RW09L").waypoint_id, "KITE")

    def test_more_frequent_coded_fix_still_wins(self):
        legs = [leg("KITE"), leg("AB12"), leg("AB12")]
        self.assertEqual(select_initial_fix(legs, "TEST", "RW09L").waypoint_id, "AB12")

    def test_first_encountered_breaks_remaining_ties(self):
        legs = [leg("ROKAR"), leg("KITE")]
        self.assertEqual(select_initial_fix(legs, "TEST", "RW09L").waypoint_id, "ROKAR")

    def test_filters_runway_airport_and_code(self):
        legs = [
            leg("OTHER", approach_id="I27R"),
            leg("ELSEW", airport="LIMC"),
            leg("NOIAF", code="E  F"),
        ]
        self.assertIsNone(select_initial_fix(legs, "TEST", "RW09L"))

if __name__ == '__main__':
    unittest.main()
