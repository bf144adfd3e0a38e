# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`Quaternion` class, the main way rotations are expressed in gamemath.

Quaternions are stored as ``[x, y, z, w]`` where ``[x, y, z]`` is the vector part and ``w`` the scalar part.  A unit
quaternion represents the rotation by :math:`\theta` about the unit axis :math:`\hat{\mathbf{x}}` as

.. math::
    \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
    \text{cos}(\frac{\theta}{2})\end{array}\right]

Quaternions that are not of unit length are perfectly valid values (they show up as intermediate results of
arithmetic) but they are not rotations.  gamemath never renormalizes automatically; if you accumulate a rotation over
many compositions call :meth:`Quaternion.normalize` from time to time to remove the drift.

There are two ways to compose rotations.  The ``*`` operator is the hamiltonian product, so ``q2 * q1`` rotates by
``q1`` and then by ``q2``.  :meth:`Quaternion.concatenate` takes its arguments in the order they are applied, so
``Quaternion.concatenate(q1, q2) == q2 * q1``.  For example::

    >>> from gamemath import Quaternion, Vector3
    >>> from numpy import pi
    >>> quarter_turn_y = Quaternion.from_axis_angle(Vector3.up(), pi / 2)
    >>> quarter_turn_x = Quaternion.from_axis_angle(Vector3.right(), pi / 2)
    >>> both = Quaternion.concatenate(quarter_turn_y, quarter_turn_x)
    >>> both * Vector3.right()  # right -> forward -> up
    Vector3(...)
"""

import copy

from typing import Self

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike
from gamemath.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                       yaw_pitch_roll_to_quaternion, matrix_to_quaternion, look_at_quaternion)
from gamemath.core.quaternion_math import (quaternion_length, quaternion_length_squared, quaternion_dot,
                                           quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                           quaternion_multiplication, quaternion_concatenate, quaternion_divide,
                                           nlerp, slerp)
from gamemath.core.transforms import rotate_vectors
from gamemath.matrix import Matrix
from gamemath.vector3 import Vector3


class Quaternion:
    """
    A quaternion with value semantics.

    The class can be constructed from the 4 components, from a vector part and a scalar part, or from any length 4
    array like::

        >>> from gamemath import Quaternion, Vector3
        >>> Quaternion(1, 2, 3, 4)
        Quaternion(1.0, 2.0, 3.0, 4.0)
        >>> Quaternion(Vector3(1, 2, 3), 4)
        Quaternion(1.0, 2.0, 3.0, 4.0)
        >>> Quaternion([1, 2, 3, 4])
        Quaternion(1.0, 2.0, 3.0, 4.0)

    With no arguments the identity quaternion ``(0, 0, 0, 1)`` is created.

    Rotations are usually made with one of the named constructors, :meth:`from_axis_angle`,
    :meth:`from_yaw_pitch_roll`, :meth:`from_rotation_matrix`, or :meth:`look_at`.  Multiplying a quaternion by a
    :class:`.Vector3` rotates the vector.

    All operations return new quaternions.  The only methods which modify a quaternion are the explicitly named in
    place ones (:meth:`normalize_inplace`, :meth:`conjugate_inplace`) and the component setters.
    """

    def __init__(self, *values: float | ARRAY_LIKE | Vector3 | Self):
        """
        :param values: nothing for the identity, a length 4 array like, a vector part and a scalar, or 4 numbers
        :raises ValueError: if the data cannot be interpreted as 4 components
        """

        if not values:
            data = np.array([0., 0., 0., 1.])

        elif len(values) == 1:
            data = np.array(values[0], dtype=np.float64).ravel()

        elif len(values) == 2:
            data = np.concatenate([np.asarray(values[0], dtype=np.float64).ravel(), [values[1]]])

        else:
            data = np.array(values, dtype=np.float64)

        if data.size != 4:
            raise ValueError('The quaternion must be length 4')

        self._data: DOUBLE_ARRAY = data.astype(np.float64)

    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(0., 0., 0., 1.)

    @classmethod
    def from_axis_angle(cls, axis: Vector3 | ARRAY_LIKE, angle: float) -> 'Quaternion':
        """
        Creates the quaternion rotating by ``angle`` radians about ``axis``.

        The axis is not normalized for you; see :func:`.axis_angle_to_quaternion`.  A zero axis produces the identity
        quaternion along with a warning.

        :param axis: the rotation axis, which should be of unit length
        :param angle: the rotation angle in radians
        """

        return cls(axis_angle_to_quaternion(np.asarray(axis, dtype=np.float64), angle))

    @classmethod
    def from_rotation_matrix(cls, matrix: Matrix | ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the quaternion equivalent to the rotation block of a 4x4 row-vector matrix.

        See :func:`.matrix_to_quaternion` for the branches used.

        :param matrix: a :class:`.Matrix` or a 4x4 array like
        """

        return cls(matrix_to_quaternion(np.asarray(matrix, dtype=np.float64)))

    @classmethod
    def from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> 'Quaternion':
        """
        Creates the quaternion which rolls about z, then pitches about x, then yaws about y.

        This is the concatenation of the three axis quaternions in that order, see
        :func:`.yaw_pitch_roll_to_quaternion`.

        :param yaw: the rotation about the y axis in radians
        :param pitch: the rotation about the x axis in radians
        :param roll: the rotation about the z axis in radians
        """

        return cls(yaw_pitch_roll_to_quaternion(yaw, pitch, roll))

    @classmethod
    def look_at(cls, direction: Vector3 | ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the shortest arc rotation that turns :meth:`.Vector3.forward` to face ``direction``.

        Looking forward gives the identity and looking backward gives a half turn about :meth:`.Vector3.up`.  See
        :func:`.look_at_quaternion` for the details.

        :param direction: the direction to face
        """

        return cls(look_at_quaternion(np.asarray(direction, dtype=np.float64)))

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float):
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float):
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float):
        self._data[2] = value

    @property
    def w(self) -> float:
        return float(self._data[3])

    @w.setter
    def w(self, value: float):
        self._data[3] = value

    @property
    def vector(self) -> Vector3:
        """
        The vector part of the quaternion as a new :class:`.Vector3`.

        This property is read only.
        """

        return Vector3(self._data[:3])

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the components as a numpy array ``[x, y, z, w]``.
        """

        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def copy(self) -> 'Quaternion':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    # norms

    def length_squared(self) -> float:
        return float(quaternion_length_squared(self._data))

    def length(self) -> float:
        return float(quaternion_length(self._data))

    @staticmethod
    def dot(quaternion1: 'Quaternion', quaternion2: 'Quaternion') -> float:
        return float(quaternion_dot(quaternion1._data, quaternion2._data))

    def normalize(self) -> 'Quaternion':
        """
        Returns self scaled to unit length.

        :raises DegenerateInputError: if self is the zero quaternion
        """

        return Quaternion(quaternion_normalize(self._data))

    def normalize_inplace(self):
        """
        Scales self to unit length.

        :raises DegenerateInputError: if self is the zero quaternion
        """

        quaternion_normalize(self._data, out=self._data)

    def conjugate(self) -> 'Quaternion':
        """
        Returns self with the vector part negated.  For a rotation this is the inverse rotation.
        """

        return Quaternion(quaternion_conjugate(self._data))

    def conjugate_inplace(self):
        """
        Negates the vector part of self.
        """

        quaternion_conjugate(self._data, out=self._data)

    def inverse(self) -> 'Quaternion':
        """
        Returns the multiplicative inverse, the conjugate divided by the squared length.

        :raises DegenerateInputError: if self is the zero quaternion
        """

        return Quaternion(quaternion_inverse(self._data))

    # composition

    @staticmethod
    def concatenate(first: 'Quaternion', second: 'Quaternion') -> 'Quaternion':
        """
        Returns the rotation which rotates by ``first`` and then by ``second``.

        This equals ``second * first``; see :func:`.quaternion_concatenate`.
        """

        return Quaternion(quaternion_concatenate(first._data, second._data))

    @staticmethod
    def divide(quaternion1: 'Quaternion', quaternion2: 'Quaternion') -> 'Quaternion':
        """
        Returns ``quaternion1 * quaternion2.inverse()``.

        :raises DegenerateInputError: if ``quaternion2`` is the zero quaternion
        """

        return Quaternion(quaternion_divide(quaternion1._data, quaternion2._data))

    @staticmethod
    def lerp(quaternion1: 'Quaternion', quaternion2: 'Quaternion', amount: float | DatetimeLike,
             time1: float | DatetimeLike = 0, time2: float | DatetimeLike = 1) -> 'Quaternion':
        """
        Normalized linear interpolation along the shorter path.  See :func:`.nlerp`.
        """

        return Quaternion(nlerp(quaternion1._data, quaternion2._data, amount, time1, time2))

    @staticmethod
    def slerp(quaternion1: 'Quaternion', quaternion2: 'Quaternion', amount: float | DatetimeLike,
              time1: float | DatetimeLike = 0, time2: float | DatetimeLike = 1) -> 'Quaternion':
        """
        Constant angular velocity interpolation along the shorter path.  See :func:`.slerp`.
        """

        return Quaternion(slerp(quaternion1._data, quaternion2._data, amount, time1, time2))

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return Quaternion(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return Quaternion(self._data - other._data)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return Quaternion(-self._data)

    def __mul__(self, other):

        # use quaternion multiplication
        if isinstance(other, Quaternion):
            return Quaternion(quaternion_multiplication(self._data, other._data))

        elif isinstance(other, Vector3):
            return Vector3(rotate_vectors(self._data, other.as_array()))

        elif np.isscalar(other):
            return Quaternion(self._data * other)

        return NotImplemented

    def __rmul__(self, other: float) -> 'Quaternion':
        if np.isscalar(other):
            return Quaternion(self._data * other)
        return NotImplemented

    def __truediv__(self, other: 'Quaternion | float') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return Quaternion.divide(self, other)
        elif np.isscalar(other):
            return Quaternion(self._data / other)
        return NotImplemented

    # conversions

    def to_matrix(self) -> Matrix:
        """
        Returns the equivalent 4x4 row-vector rotation matrix.  See :func:`.quaternion_to_matrix`.
        """

        return Matrix.create_from_quaternion(self._data)

    def to_axis_angle(self) -> tuple[Vector3, float]:
        """
        Returns the unit rotation axis and the rotation angle in radians, in :math:`[0, 2\\pi]`.

        The axis of the identity rotation is undefined and is returned as the zero vector.

        :raises DegenerateInputError: if the quaternion has zero length
        """

        axis, angle = quaternion_to_axis_angle(self._data)

        return Vector3(axis), float(angle)

    # comparison

    def equals(self, other: 'Quaternion', tolerance: float) -> bool:
        """
        Returns whether every component of self is within ``tolerance`` of the matching component of ``other``.

        Note that ``q`` and ``-q`` are the same rotation but are not equal here.
        """

        return bool((np.abs(self._data - np.asarray(other, dtype=np.float64)) <= tolerance).all())

    def __eq__(self, other) -> bool:

        if not isinstance(other, Quaternion):
            return NotImplemented

        return bool((self._data == other._data).all())

    def __repr__(self) -> str:
        return 'Quaternion({0!r}, {1!r}, {2!r}, {3!r})'.format(self.x, self.y, self.z, self.w)

    def __str__(self) -> str:
        return '{{X:{0} Y:{1} Z:{2} W:{3}}}'.format(self.x, self.y, self.z, self.w)
