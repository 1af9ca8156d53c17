import unittest

import cadquery as cq

from marlin_post import motion
from marlin_post.address import AddressVector
from marlin_post.command import Circular, MultiAxisLinear, MultiAxisRapid
from marlin_post.config import PostConfig
from marlin_post.context import JobContext
from marlin_post.errors import UnsupportedFeature
from marlin_post.groups import WorkPlane


class TestMotion(unittest.TestCase):
    def setUp(self):
        self.context = JobContext(PostConfig())
        self.lines = self.context.writer.lines

    def test_rapid_xy(self):
        motion.rapid(self.context, AddressVector(10, 20))
        self.assertEqual(["G1 X10.000 Y20.000 F2500"], self.lines)

    def test_rapid_z_before_xy(self):
        motion.rapid(self.context, AddressVector(1, 2, 5))
        self.assertEqual(["G1 Z5.000 F300", "G1 X1.000 Y2.000 F2500"], self.lines)

    def test_rapid_in_place(self):
        motion.rapid(self.context, AddressVector(1, 2, 5))
        motion.rapid(self.context, AddressVector(1, 2, 5))
        self.assertEqual(2, len(self.lines))

    def test_rapid_restates_feed(self):
        motion.linear(self.context, AddressVector(x=5), 2500)
        motion.rapid(self.context, AddressVector(x=0, y=0))
        self.assertEqual(["G1 X5.000 F2500", "G1 X0.000 Y0.000 F2500"], self.lines)

    def test_rapid_updates_position(self):
        motion.rapid(self.context, AddressVector(1, 2, 5))
        self.assertEqual((1, 2, 5), self.context.machine.position.toTuple())

    def test_linear(self):
        motion.linear(self.context, AddressVector(10, 5, 1), 200)
        self.assertEqual(["G1 X10.000 Y5.000 Z1.000 F200"], self.lines)

    def test_linear_suppresses_unchanged(self):
        motion.linear(self.context, AddressVector(10, 5, 1), 200)
        motion.linear(self.context, AddressVector(10, 6, 1), 200)
        self.assertEqual("G1 Y6.000", self.lines[-1])

    def test_linear_without_motion(self):
        motion.linear(self.context, AddressVector(10, 5, 1), 200)
        motion.linear(self.context, AddressVector(10, 5, 1), 300)
        self.assertEqual(1, len(self.lines))
        # The unused feed is still pending
        motion.linear(self.context, AddressVector(x=11), 300)
        self.assertEqual("G1 X11.000 F300", self.lines[-1])

    def test_cw_arc(self):
        self.context.machine.position = cq.Vector(-1, 0, 0)
        motion.circular(self.context, Circular.abs(True, cx=0, cy=0, x=1, y=0, feed=200))
        self.assertEqual(["G17", "G2 X1.000 Y0.000 I1.000 J0.000 F200"], self.lines)

    def test_ccw_arc_after_cw(self):
        self.context.machine.position = cq.Vector(-1, 0, 0)
        motion.circular(self.context, Circular.abs(True, cx=0, cy=0, x=1, y=0, feed=200))
        motion.circular(self.context, Circular.abs(False, cx=0, cy=0, x=-1, y=0, feed=200))
        self.assertEqual("G3 X-1.000 I-1.000 J0.000", self.lines[-1])
        self.assertEqual((-1, 0, 0), self.context.machine.position.toTuple())

    def test_xz_arc_is_linearized(self):
        self.context.machine.position = cq.Vector(10, 0, 0)
        motion.circular(
            self.context,
            Circular.abs(False, cx=0, cz=0, x=-10, z=0, feed=100, plane=WorkPlane.XZ),
        )
        self.assertGreater(len(self.lines), 2)
        for line in self.lines:
            self.assertTrue(line.startswith("G1 "), line)
        self.assertIn("X-10.000", self.lines[-1])
        self.assertEqual((-10, 0, 0), self.context.machine.position.toTuple())

    def test_helical_arc_is_linearized(self):
        self.context.machine.position = cq.Vector(10, 0, 0)
        motion.circular(
            self.context,
            Circular.abs(False, cx=0, cy=0, x=0, y=10, z=-1, feed=100),
        )
        self.assertGreater(len(self.lines), 2)
        self.assertNotIn("G3", "\n".join(self.lines))
        self.assertIn("Z-1.000", self.lines[-1])

    def test_power(self):
        motion.power(self.context, True)
        motion.power(self.context, True)
        motion.power(self.context, False)
        motion.power(self.context, False)
        self.assertEqual(["M106 S200", "M107"], self.lines)

    def test_select_cutter_while_off(self):
        motion.select_cutter(self.context, "M106 S100")
        self.assertEqual([], self.lines)
        motion.power(self.context, True)
        self.assertEqual(["M106 S100"], self.lines)

    def test_select_cutter_while_on(self):
        motion.power(self.context, True)
        motion.select_cutter(self.context, "M106 S255")
        motion.select_cutter(self.context, "M106 S255")
        self.assertEqual(["M106 S200", "M106 S255"], self.lines)

    def test_dwell(self):
        motion.dwell(self.context, 1.5)
        self.assertEqual(["; Dwell", "G4 S1.500"], self.lines)

    def test_spindle_speed_always_written(self):
        motion.spindle_speed(self.context, 12000)
        motion.spindle_speed(self.context, 12000)
        self.assertEqual(["S12000", "S12000"], self.lines)

    def test_multi_axis_rejected(self):
        with self.assertRaises(UnsupportedFeature):
            motion.multi_axis(self.context, MultiAxisRapid(x=1, a=90))
        with self.assertRaises(NotImplementedError):
            motion.multi_axis(self.context, MultiAxisLinear(b=10, feed=100))
        self.assertEqual([], self.lines)
