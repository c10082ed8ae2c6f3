#!/usr/bin/env python3
# radarscope/nav_geometry/tests/test_runway_ids.py

import sys
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from radarscope.nav_geometry.utils import parse_runway_id, reciprocal_runway_id, runway_suffix

class TestRunwayIds(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(parse_runway_id("RW09L"), (9, "L"))
        self.assertEqual(parse_runway_id("RW35"), (35, ""))
        self.assertIsNone(parse_runway_id("H1"))
        self.assertIsNone(parse_runway_id("RW45"))
        self.assertIsNone(parse_runway_id(""))

    def test_reciprocal(self):
        self.assertEqual(reciprocal_runway_id("RW09L"), "RW27R")
        self.assertEqual(reciprocal_runway_id("RW27R"), "RW09L")
        self.assertEqual(reciprocal_runway_id("RW18C"), "RW36C")
        self.assertEqual(reciprocal_runway_id("RW36"), "RW18")
        self.assertEqual(reciprocal_runway_id("RW35R"), "RW17L")
        self.assertIsNone(reciprocal_runway_id("PAD1"))

    def test_suffix(self):
        self.assertEqual(runway_suffix("RW35R"), "35R")
        self.assertEqual(runway_suffix("35R"), "35R")

if __name__ == '__main__':
    unittest.main()
