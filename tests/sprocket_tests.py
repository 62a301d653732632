"""

Parametric Hub Sprocket Unit Tests

name: sprocket_tests.py
by:   Gumyr
date: October 19th 2026

desc: Unit tests for the sprocket assembly of cq_sprocket

license:

    Copyright 2026 Gumyr

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

"""
import math
import unittest
from cadquery import Vector
from cq_sprocket.csg import Box, Cylinder, Difference, Thread
from cq_sprocket.clearance import WarningKind
from cq_sprocket.parameters import SprocketConfig, DerivedGeometry
from cq_sprocket.sprocket import *
from cq_sprocket.thread import generate_plain_hole
from cq_sprocket.tolerances import PrintTolerances

MM = 1
INCH = 25.4 * MM


class TestParsing(unittest.TestCase):
    """Validate SprocketConfig input validation"""

    def test_teeth(self):
        for teeth in [2, 0, -5, 12.0, True, "12"]:
            with self.subTest(teeth=teeth):
                with self.assertRaises(ValueError):
                    SprocketConfig(chain_size=25, teeth=teeth, bore_diameter=0.25)

    def test_unknown_chain_size(self):
        with self.assertRaises(ValueError):
            SprocketConfig(chain_size=99, teeth=12, bore_diameter=0.25)

    def test_negative_dimensions(self):
        with self.assertRaises(ValueError):
            SprocketConfig(chain_size=25, teeth=12, bore_diameter=-0.25)
        with self.assertRaises(ValueError):
            SprocketConfig(chain_size=25, teeth=12, bore_diameter=0.25, hub_height=-1)

    def test_hub_smaller_than_bore(self):
        with self.assertRaises(ValueError):
            SprocketConfig(
                chain_size=25, teeth=12, bore_diameter=1, hub_diameter=1, hub_height=0.5
            )

    def test_has_hub(self):
        self.assertFalse(SprocketConfig(25, 12, 0.25).has_hub)
        self.assertFalse(SprocketConfig(25, 12, 0.25, hub_diameter=1).has_hub)
        self.assertFalse(SprocketConfig(25, 12, 0.25, hub_height=1).has_hub)
        self.assertTrue(SprocketConfig(25, 12, 0.25, 1, 1).has_hub)

    def test_tolerances(self):
        with self.assertRaises(ValueError):
            PrintTolerances(bore=-0.1)


class TestDerivedGeometry(unittest.TestCase):
    def test_plain_sprocket(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.3125)
        derived = DerivedGeometry.from_config(config)
        self.assertAlmostEqual(derived.pitch, 0.25 * INCH)
        self.assertAlmostEqual(derived.roller_radius, 0.130 * INCH / 2)
        self.assertAlmostEqual(derived.thickness, 0.110 * INCH)
        self.assertAlmostEqual(derived.pitch_radius, 9.2831, 3)
        self.assertAlmostEqual(derived.bore_radius, 0.3125 * INCH / 2)
        for name in [
            "hub_radius",
            "hub_height",
            "hub_wall_thickness",
            "hub_usable_height",
            "keyway_width",
            "setscrew_width",
            "setscrew_threads_per_inch",
            "setscrew_hole_length",
        ]:
            with self.subTest(name=name):
                self.assertEqual(getattr(derived, name), 0)

    def test_hub_sprocket(self):
        config = SprocketConfig(
            chain_size=25,
            teeth=9,
            bore_diameter=1.0,
            hub_diameter=1.5,
            hub_height=0.5,
            keyway=True,
            setscrew=True,
        )
        derived = DerivedGeometry.from_config(config)
        self.assertAlmostEqual(derived.hub_radius, 0.75 * INCH)
        self.assertAlmostEqual(derived.hub_wall_thickness, 0.25 * INCH)
        self.assertAlmostEqual(derived.hub_usable_height, (0.5 - 0.110) * INCH)
        self.assertAlmostEqual(derived.keyway_width, 0.25 * INCH)
        self.assertAlmostEqual(derived.keyway_depth, 0.125 * INCH)
        self.assertAlmostEqual(derived.setscrew_width, 0.3125 * INCH)
        self.assertEqual(derived.setscrew_threads_per_inch, 18)
        self.assertAlmostEqual(derived.setscrew_hole_length, 0.35 * INCH)
        self.assertAlmostEqual(derived.setscrew_z, 0.25 * INCH)

    def test_small_bore_keyway(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.2, keyway=True)
        self.assertEqual(DerivedGeometry.from_config(config).keyway_width, 0)


class TestSprocketTree(unittest.TestCase):
    def test_plain_sprocket(self):
        """Only the bore is cut from the plate"""
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.3125)
        tree = build_sprocket_tree(config)
        self.assertIsInstance(tree, Difference)
        self.assertEqual(len(tree.cutters), 1)
        self.assertIsInstance(tree.cutters[0].child, Cylinder)
        self.assertEqual(tree.count(Box), 9)
        self.assertEqual(tree.count(Thread), 0)

    def test_no_bore(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0)
        tree = build_sprocket_tree(config)
        self.assertEqual(tree.count(Cylinder), 9 * 2 + 1 + 9)

    def test_small_bore_keyway(self):
        """A keyway request below the minimum bore is ignored"""
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.2, keyway=True)
        self.assertEqual(build_sprocket_tree(config).count(Box), 9)

    def test_keyway(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.5, keyway=True)
        self.assertEqual(build_sprocket_tree(config).count(Box), 10)

    def test_hub_and_setscrews(self):
        config = SprocketConfig(
            chain_size=40,
            teeth=20,
            bore_diameter=1.0,
            hub_diameter=1.75,
            hub_height=0.75,
            keyway=True,
            setscrew=True,
        )
        tree = build_sprocket_tree(config)
        self.assertEqual(tree.count(Thread), 1)
        self.assertEqual(tree.count(Box), 21)
        both = build_sprocket_tree(
            SprocketConfig(
                chain_size=40,
                teeth=20,
                bore_diameter=1.0,
                hub_diameter=1.75,
                hub_height=0.75,
                keyway=True,
                setscrew=True,
                keyway_setscrew=True,
            )
        )
        self.assertEqual(both.count(Thread), 2)

    def test_setscrew_needs_hub(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=1.0, setscrew=True)
        self.assertEqual(build_sprocket_tree(config).count(Thread), 0)

    def test_deterministic(self):
        config = SprocketConfig(
            chain_size=35, teeth=14, bore_diameter=0.75, hub_diameter=1.25, hub_height=0.6,
            keyway=True, setscrew=True,
        )
        self.assertEqual(build_sprocket_tree(config), build_sprocket_tree(config))


class TestSprocketShape(unittest.TestCase):
    """Validate the generated solids"""

    def test_plain_sprocket(self):
        config = SprocketConfig(chain_size=25, teeth=9, bore_diameter=0.3125)
        sprocket, warnings = generate_sprocket(config)
        self.assertEqual(warnings, [])
        self.assertTrue(sprocket.isValid())
        self.assertEqual(len(sprocket.Solids()), 1)
        self.assertFalse(sprocket.isInside(Vector(0, 0, 0)))
        bbox = sprocket.BoundingBox()
        self.assertAlmostEqual(bbox.zmax - bbox.zmin, 0.110 * INCH, 3)

    def test_hub_sprocket(self):
        config = SprocketConfig(
            chain_size=40,
            teeth=20,
            bore_diameter=1.0,
            hub_diameter=1.75,
            hub_height=0.75,
            keyway=True,
            setscrew=True,
            keyway_setscrew=True,
        )
        sprocket, warnings = generate_sprocket(config, thread_maker=generate_plain_hole)
        self.assertEqual(warnings, [])
        self.assertTrue(sprocket.isValid())
        bbox = sprocket.BoundingBox()
        self.assertAlmostEqual(bbox.zmin, -0.284 * INCH / 2, 3)
        self.assertAlmostEqual(bbox.zmax, 0.75 * INCH - 0.284 * INCH / 2, 3)
        derived = DerivedGeometry.from_config(config)
        # keyway
        self.assertFalse(
            sprocket.isInside(Vector(-(derived.bore_radius + 1), 0, 0))
        )
        # setscrew holes through the hub wall
        self.assertFalse(
            sprocket.isInside(Vector(0, derived.bore_radius + 3, derived.setscrew_z))
        )
        self.assertFalse(
            sprocket.isInside(Vector(-(derived.bore_radius + 3), 0, derived.setscrew_z))
        )
        # solid hub wall elsewhere
        self.assertTrue(
            sprocket.isInside(Vector(derived.bore_radius + 3, 0, derived.setscrew_z))
        )

    def test_threaded_hub_sprocket(self):
        """Setscrew holes are tapped with the default thread cutter"""
        config = SprocketConfig(
            chain_size=40,
            teeth=20,
            bore_diameter=1.0,
            hub_diameter=1.75,
            hub_height=0.75,
            setscrew=True,
        )
        sprocket, warnings = generate_sprocket(config)
        self.assertEqual(warnings, [])
        self.assertTrue(sprocket.isValid())
        self.assertEqual(len(sprocket.Solids()), 1)
        derived = DerivedGeometry.from_config(config)
        mid_wall = derived.bore_radius + derived.hub_wall_thickness / 2
        # on the hole axis
        self.assertFalse(sprocket.isInside(Vector(0, mid_wall, derived.setscrew_z)))
        # beyond the thread crests
        beside_hole = derived.setscrew_width / 2 + 1
        self.assertTrue(
            sprocket.isInside(Vector(beside_hole, mid_wall, derived.setscrew_z))
        )
        # no hole on the keyway side without a keyway setscrew
        self.assertTrue(
            sprocket.isInside(Vector(-mid_wall, 0, derived.setscrew_z))
        )

    def test_warnings_still_build(self):
        """Clearance problems don't prevent the sprocket from being built"""
        config = SprocketConfig(
            chain_size=25,
            teeth=9,
            bore_diameter=0.5,
            hub_diameter=1.5,
            hub_height=0.5,
        )
        with self.assertLogs("cq_sprocket", level="WARNING"):
            sprocket, warnings = generate_sprocket(config)
        self.assertEqual([w.kind for w in warnings], [WarningKind.CHAIN_CLEARANCE])
        self.assertTrue(sprocket.isValid())

    def test_repeatable(self):
        config = SprocketConfig(chain_size=35, teeth=11, bore_diameter=0.5, keyway=True)
        first, _ = generate_sprocket(config)
        second, _ = generate_sprocket(config)
        self.assertAlmostEqual(first.Volume(), second.Volume(), 6)
        self.assertAlmostEqual(first.Area(), second.Area(), 6)
        self.assertEqual(len(first.Edges()), len(second.Edges()))

    def test_threaded_setscrew(self):
        config = SprocketConfig(
            chain_size=40,
            teeth=20,
            bore_diameter=0.5,
            hub_diameter=1.0,
            hub_height=0.6,
            setscrew=True,
        )
        threaded, _ = generate_sprocket(config)
        plain, _ = generate_sprocket(
            SprocketConfig(
                chain_size=40,
                teeth=20,
                bore_diameter=0.5,
                hub_diameter=1.0,
                hub_height=0.6,
            )
        )
        self.assertGreater(threaded.Volume(), 0)
        self.assertLess(threaded.Volume(), plain.Volume())


class TestSprocketClass(unittest.TestCase):
    def test_sprocket(self):
        spkt = Sprocket(SprocketConfig(chain_size=25, teeth=9, bore_diameter=5 / 16))
        self.assertTrue(spkt.isValid())
        self.assertAlmostEqual(spkt.pitch_radius, 9.2831, 3)
        self.assertAlmostEqual(
            spkt.pitch_circumference, 2 * math.pi * spkt.pitch_radius
        )
        self.assertGreater(spkt.outer_radius, spkt.pitch_radius)
        self.assertEqual(spkt.warnings, [])

    def test_copy(self):
        spkt = Sprocket(SprocketConfig(chain_size=25, teeth=9, bore_diameter=5 / 16))
        spkt_copy = spkt.copy()
        self.assertIsInstance(spkt_copy, Sprocket)
        self.assertEqual(spkt_copy.config, spkt.config)
        self.assertAlmostEqual(spkt_copy.Volume(), spkt.Volume(), 5)
        self.assertIsNot(spkt_copy.wrapped, spkt.wrapped)


if __name__ == "__main__":
    unittest.main()
