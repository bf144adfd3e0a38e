from unittest import TestCase

import numpy as np

from gamemath import Vector3, Quaternion, Matrix, EpsilonComparer, DegenerateInputError, InvalidArgumentError


COMPARER = EpsilonComparer()


class TestVector3(TestCase):

    def test_init(self):

        self.assertEqual(Vector3(1, 2, 3).as_array().tolist(), [1, 2, 3])
        self.assertEqual(Vector3(2).as_array().tolist(), [2, 2, 2])
        self.assertEqual(Vector3([4, 5, 6]).as_array().tolist(), [4, 5, 6])
        self.assertEqual(Vector3(np.array([[4], [5], [6]])), Vector3(4, 5, 6))
        self.assertEqual(Vector3(), Vector3.zero())

        with self.assertRaises(ValueError):
            Vector3([1, 2])

        with self.assertRaises(ValueError):
            Vector3(1, 2)

    def test_named_vectors(self):

        self.assertEqual(Vector3.one(), Vector3(1, 1, 1))
        self.assertEqual(Vector3.unit_x(), Vector3.right())
        self.assertEqual(Vector3.unit_y(), Vector3.up())
        self.assertEqual(Vector3.unit_z(), Vector3.backward())
        self.assertEqual(Vector3.forward(), Vector3(0, 0, -1))
        self.assertEqual(Vector3.down(), -Vector3.up())
        self.assertEqual(Vector3.left(), -Vector3.right())

    def test_copy_semantics(self):

        v = Vector3(1, 2, 3)

        other = Vector3(v)
        other.x = 10

        self.assertEqual(v.x, 1)

        copied = v.copy()
        copied.y = 10

        self.assertEqual(v.y, 2)

        _ = v + Vector3(1, 1, 1)

        self.assertEqual(v, Vector3(1, 2, 3))

    def test_components(self):

        v = Vector3(1, 2, 3)

        self.assertEqual((v.x, v.y, v.z), (1, 2, 3))
        self.assertEqual(v[2], 3)
        self.assertEqual(len(v), 3)
        self.assertEqual(list(v), [1, 2, 3])

        v.z = 7

        self.assertEqual(v.z, 7)

    def test_arithmetic(self):

        v1 = Vector3(1, 2, 3)
        v2 = Vector3(4, 5, 6)

        self.assertEqual(v1 + v2, Vector3(5, 7, 9))
        self.assertEqual(v2 - v1, Vector3(3, 3, 3))
        self.assertEqual(-v1, Vector3(-1, -2, -3))
        self.assertEqual(v1 * v2, Vector3(4, 10, 18))
        self.assertEqual(v1 * 2, Vector3(2, 4, 6))
        self.assertEqual(2 * v1, Vector3(2, 4, 6))
        self.assertEqual(v2 / 2, Vector3(2, 2.5, 3))
        self.assertEqual(v2 / v1, Vector3(4, 2.5, 2))

    def test_dot_cross(self):

        self.assertEqual(Vector3(1, 2, 3).dot(Vector3(4, 5, 6)), 32)
        self.assertEqual(Vector3.unit_x().cross(Vector3.unit_y()), Vector3.unit_z())
        self.assertEqual(Vector3.unit_y().cross(Vector3.unit_x()), -Vector3.unit_z())

    def test_length_distance(self):

        v1 = Vector3(0.1, 100.0, -5.5)
        v2 = Vector3(1.1, -2.0, 5.5)

        self.assertAlmostEqual(v1.distance_squared(v2), 10526)
        self.assertAlmostEqual(v1.distance(v2), np.sqrt(10526))
        self.assertEqual(Vector3(3, 4, 0).length(), 5)
        self.assertEqual(Vector3(3, 4, 0).length_squared(), 25)

    def test_normalize(self):

        v = Vector3(-10.5, 0.2, 1000.0)
        expected = Vector3(-0.0104994215, 0.000199988979, 0.999944866)

        COMPARER.assert_equal(expected, v.normalize())
        self.assertFalse(COMPARER.compare(expected, v))

        v.normalize_inplace()

        COMPARER.assert_equal(expected, v)

        with self.assertRaises(DegenerateInputError):
            Vector3.zero().normalize()

        with self.assertRaises(DegenerateInputError):
            Vector3.zero().normalize_inplace()

    def test_clamp_length(self):

        v = Vector3(1, 0, 0)

        self.assertEqual(v.clamp_length(10), Vector3(1, 0, 0))
        self.assertEqual(v.clamp_length(0.5), Vector3(0.5, 0, 0))

    def test_move_towards(self):

        position = Vector3(1, 0, 0)
        target = Vector3(10, 0, 0)

        self.assertEqual(position.move_towards(target, float('inf')), target)
        COMPARER.assert_equal(Vector3(3, 0, 0), position.move_towards(target, 2))
        self.assertEqual(target.move_towards(target, 2), target)

    def test_reflect(self):

        self.assertEqual(Vector3.reflect(Vector3(1, -1, 0), Vector3.up()), Vector3(1, 1, 0))

    def test_min_max_clamp(self):

        v1 = Vector3(1, 5, -3)
        v2 = Vector3(2, -1, 0)

        self.assertEqual(Vector3.min(v1, v2), Vector3(1, -1, -3))
        self.assertEqual(Vector3.max(v1, v2), Vector3(2, 5, 0))
        self.assertEqual(Vector3.clamp(v1, Vector3(0, 0, 0), Vector3(2, 2, 2)), Vector3(1, 2, 0))

    def test_interpolation(self):

        v1 = Vector3(0, 0, 0)
        v2 = Vector3(10, 20, 30)

        self.assertEqual(Vector3.lerp(v1, v2, 0.5), Vector3(5, 10, 15))
        self.assertEqual(Vector3.smooth_step(v1, v2, 0.5), Vector3(5, 10, 15))

        # the amount is not clamped
        self.assertEqual(Vector3.smooth_step(v1, v2, 1.5), v1)
        self.assertEqual(Vector3.smooth_step(v1, v2, 2), Vector3(-40, -80, -120))
        self.assertEqual(Vector3.smooth_step(v1, v2, 1), v2)

        self.assertEqual(Vector3.hermite(v1, Vector3.zero(), v2, Vector3.zero(), 1), v2)
        self.assertEqual(Vector3.catmull_rom(v1, v1, v2, v2, 0), v1)
        self.assertEqual(Vector3.catmull_rom(v1, v1, v2, v2, 1), v2)
        self.assertEqual(Vector3.barycentric(v1, Vector3(1, 0, 0), Vector3(0, 1, 0), 0.25, 0.5),
                         Vector3(0.25, 0.5, 0))

    def test_equality(self):

        v = Vector3(10, 10, 10)

        self.assertEqual(v, v)
        self.assertNotEqual(v, Vector3(1, 1, 1))
        self.assertTrue(v.equals(Vector3(10.0001, 10.0001, 10.0001), 0.001))
        self.assertFalse(v.equals(Vector3(10.002, 10.002, 10.002), 0.001))

    def test_repr(self):

        self.assertEqual(repr(Vector3(1, 2, 3)), 'Vector3(1.0, 2.0, 3.0)')
        self.assertEqual(str(Vector3(1, 2, 3)), '{X:1.0 Y:2.0 Z:3.0}')


class TestVector3Transform(TestCase):

    def test_transform(self):

        v = Vector3(1, 2, 3)

        COMPARER.assert_equal(Vector3(51, 58, 65), v.transform(Matrix(*range(1, 17))))
        COMPARER.assert_equal(Vector3(33, -14, -1), v.transform(Quaternion(2, 3, 4, 5)))
        COMPARER.assert_equal(Vector3(33, -14, -1), v.transform([2, 3, 4, 5]))

        self.assertEqual(v, Vector3(1, 2, 3))

    def test_quarter_turn(self):

        q = Quaternion.from_axis_angle(Vector3(0, 1, 0), np.pi / 2)

        COMPARER.assert_equal(Vector3(0, 0, -1), Vector3(1, 0, 0).transform(q))
        COMPARER.assert_equal(Vector3(0, 0, -1), Vector3(1, 0, 0).transform(q.to_matrix()))

    def test_transform_normal(self):

        m = Matrix(*range(1, 17))

        COMPARER.assert_equal(Vector3(38, 44, 50), Vector3(1, 2, 3).transform_normal(m))

        with self.assertRaises(ValueError):
            Vector3(1, 2, 3).transform_normal(Quaternion.identity())

    def test_bad_rotation(self):

        with self.assertRaises(ValueError):
            Vector3(1, 2, 3).transform([1, 2, 3])


class TestVector3TransformArray(TestCase):

    def setUp(self):

        self.source = [Vector3(1, 2, 3), Vector3(1, 0, 0), Vector3(0, 0, -1), Vector3(-4, 5, 0.5)]
        self.rotation = Quaternion.from_yaw_pitch_roll(0.15, 1.18, -0.22)

    def test_transform_array(self):

        destination = [Vector3.zero() for _ in self.source]

        Vector3.transform_array(self.source, self.rotation, destination)

        for source, result in zip(self.source, destination):
            COMPARER.assert_equal(source.transform(self.rotation), result)

    def test_matrix(self):

        matrix = Matrix(*range(1, 17))

        destination = [None] * 4

        Vector3.transform_array(self.source, matrix, destination)

        for source, result in zip(self.source, destination):
            COMPARER.assert_equal(source.transform(matrix), result)

        Vector3.transform_normal_array(self.source, matrix, destination)

        for source, result in zip(self.source, destination):
            COMPARER.assert_equal(source.transform_normal(matrix), result)

    def test_range(self):

        destination = [Vector3.zero() for _ in range(5)]

        Vector3.transform_array(self.source, self.rotation, destination, source_index=1, destination_index=3,
                                length=2)

        self.assertEqual(destination[:3], [Vector3.zero()] * 3)
        COMPARER.assert_equal(self.source[1].transform(self.rotation), destination[3])
        COMPARER.assert_equal(self.source[2].transform(self.rotation), destination[4])

    def test_in_place(self):

        expected = [v.transform(self.rotation) for v in self.source]

        Vector3.transform_array(self.source, self.rotation, self.source)

        for exp, result in zip(expected, self.source):
            COMPARER.assert_equal(exp, result)

    def test_empty(self):

        destination = []

        Vector3.transform_array([], self.rotation, destination)

        self.assertEqual(destination, [])

    def test_invalid(self):

        original = [Vector3.one() for _ in range(3)]

        for kwargs in [dict(destination_array=None),
                       dict(source_array=None),
                       dict(length=4),
                       dict(source_index=-1, length=1),
                       dict(destination_index=2),
                       dict(source_index=3, length=2)]:
            with self.subTest(**{key: value for key, value in kwargs.items() if value is not None}):
                destination = [Vector3.one() for _ in range(3)]

                arguments = dict(source_array=self.source, rotation=self.rotation, destination_array=destination)
                arguments.update(kwargs)

                with self.assertRaises(InvalidArgumentError):
                    Vector3.transform_array(**arguments)

                # nothing was written
                self.assertEqual(destination, original)
