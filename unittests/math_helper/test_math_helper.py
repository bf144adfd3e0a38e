from unittest import TestCase

import numpy as np

from gamemath import math_helper as mh


class TestConstants(TestCase):

    def test_constants(self):

        self.assertEqual(mh.PI, np.pi)
        self.assertEqual(mh.PI_OVER_2, np.pi / 2)
        self.assertEqual(mh.PI_OVER_4, np.pi / 4)
        self.assertEqual(mh.TWO_PI, 2 * np.pi)
        self.assertEqual(mh.E, np.e)
        self.assertAlmostEqual(mh.LOG10_E, 0.4342945)
        self.assertAlmostEqual(mh.LOG2_E, 1.442695)


class TestInterpolation(TestCase):

    def test_lerp(self):

        self.assertEqual(mh.lerp(2, 4, 0.5), 3)
        self.assertEqual(mh.lerp(2, 4, 0), 2)
        self.assertEqual(mh.lerp(2, 4, 1.5), 5)

        np.testing.assert_array_equal(mh.lerp([0, 10], [10, 20], 0.5), [5, 15])

    def test_hermite(self):

        self.assertEqual(mh.hermite(1.3, 0.4, 7.2, -2, 0), 1.3)
        self.assertEqual(mh.hermite(1.3, 0.4, 7.2, -2, 1), 7.2)

        # zero tangents reduce to smooth step
        self.assertAlmostEqual(mh.hermite(0, 0, 1, 0, 0.25), 0.15625)

        # a linear segment with matching tangents stays linear
        self.assertAlmostEqual(mh.hermite(0, 2, 2, 2, 0.3), 0.6)

        np.testing.assert_array_equal(mh.hermite([0, 1], 0, [1, 2], 0, [0, 1]), [0, 2])

    def test_smooth_step(self):

        self.assertEqual(mh.smooth_step(0, 10, 0.5), 5)
        self.assertEqual(mh.smooth_step(0, 10, -1), 0)
        self.assertEqual(mh.smooth_step(0, 10, 3), 10)
        self.assertAlmostEqual(mh.smooth_step(0, 1, 0.25), 0.15625)

    def test_catmull_rom(self):

        self.assertEqual(mh.catmull_rom(0, 1, 2, 3, 0), 1)
        self.assertEqual(mh.catmull_rom(0, 1, 2, 3, 1), 2)
        self.assertAlmostEqual(mh.catmull_rom(0, 1, 2, 3, 0.5), 1.5)
        self.assertAlmostEqual(mh.catmull_rom(0, 0, 1, 1, 0.5), 0.5)

    def test_barycentric(self):

        self.assertEqual(mh.barycentric(1, 2, 3, 0, 0), 1)
        self.assertEqual(mh.barycentric(1, 2, 3, 1, 0), 2)
        self.assertEqual(mh.barycentric(1, 2, 3, 0, 1), 3)
        self.assertAlmostEqual(mh.barycentric(1, 2, 3, 0.25, 0.25), 1.75)


class TestScalar(TestCase):

    def test_clamp(self):

        self.assertEqual(mh.clamp(5, 0, 1), 1)
        self.assertEqual(mh.clamp(-5, 0, 1), 0)
        self.assertEqual(mh.clamp(0.5, 0, 1), 0.5)

        np.testing.assert_array_equal(mh.clamp([-1, 0.5, 2], 0, 1), [0, 0.5, 1])

    def test_distance(self):

        self.assertEqual(mh.distance(3, -2), 5)
        self.assertEqual(mh.distance(-2, 3), 5)

    def test_angles(self):

        self.assertAlmostEqual(mh.to_degrees(np.pi), 180)
        self.assertAlmostEqual(mh.to_radians(90), np.pi / 2)

    def test_wrap_angle(self):

        self.assertAlmostEqual(mh.wrap_angle(3 * np.pi / 2), -np.pi / 2)
        self.assertAlmostEqual(mh.wrap_angle(-3 * np.pi / 2), np.pi / 2)
        self.assertAlmostEqual(mh.wrap_angle(0.5), 0.5)
        self.assertEqual(mh.wrap_angle(np.pi), np.pi)
        self.assertEqual(mh.wrap_angle(-np.pi), np.pi)

        np.testing.assert_allclose(mh.wrap_angle([0, 2 * np.pi + 0.1]), [0, 0.1])
