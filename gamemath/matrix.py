# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`Matrix` class, a 4x4 transform stored in row-major order.

gamemath matrices act on row vectors.  A point :math:`\mathbf{p}` is transformed through

.. math::
    \left[\begin{array}{cccc}\mathbf{p}'^T & \bullet\end{array}\right] =
    \left[\begin{array}{cccc}\mathbf{p}^T & 1\end{array}\right]\mathbf{M}

so the upper left 3x3 block holds the rotation (its rows are the images of the x, y, and z axes) and the fourth row
holds the translation.  Composing matrices therefore reads left to right: ``a @ b`` applies ``a`` first and then ``b``.

Only the rotation relevant part of a general 4x4 matrix library is provided here.
"""

import copy

from typing import Self

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from gamemath.core.conversions import axis_angle_to_quaternion, quaternion_to_matrix
from gamemath.core.elementals import rotation_x, rotation_y, rotation_z
from gamemath.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape


class Matrix:
    """
    A 4x4 row-major matrix with value semantics.

    A matrix can be built from 16 values given in row-major order, from any 4x4 array like, or (with no arguments) as
    the identity::

        >>> from gamemath import Matrix
        >>> m = Matrix(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16)
        >>> m.m23
        7.0
        >>> m[1, 2]
        7.0

    Elements are available through 0 based ``m[row, column]`` indexing and through the 1 based ``m11`` to ``m44``
    properties.
    """

    def __init__(self, *values: float | ARRAY_LIKE | Self):
        """
        :param values: nothing for the identity, a single 4x4 array like (or 16 element sequence), or 16 numbers
        :raises ValueError: if the values cannot be interpreted as a 4x4 matrix
        """

        if not values:
            data = np.eye(4)

        elif len(values) == 1:
            data = np.array(values[0], dtype=np.float64)

        else:
            data = np.array(values, dtype=np.float64)

        if data.size != 16:
            raise ValueError('A Matrix must be built from 16 values')

        self._data: DOUBLE_ARRAY = data.reshape(4, 4)

    @classmethod
    def identity(cls) -> 'Matrix':
        return cls()

    @classmethod
    def create_rotation_x(cls, radians: float) -> 'Matrix':
        """
        Creates a matrix rotating right handed about the x axis.  See :func:`.rotation_x`.
        """
        return cls(rotation_x(radians))

    @classmethod
    def create_rotation_y(cls, radians: float) -> 'Matrix':
        """
        Creates a matrix rotating right handed about the y axis.  See :func:`.rotation_y`.
        """
        return cls(rotation_y(radians))

    @classmethod
    def create_rotation_z(cls, radians: float) -> 'Matrix':
        """
        Creates a matrix rotating right handed about the z axis.  See :func:`.rotation_z`.
        """
        return cls(rotation_z(radians))

    @classmethod
    def create_from_quaternion(cls, quaternion: ARRAY_LIKE) -> 'Matrix':
        """
        Creates the rotation matrix equivalent to a quaternion ``[x, y, z, w]``.

        See :func:`.quaternion_to_matrix` for the formula.

        :param quaternion: a :class:`.Quaternion` or any length 4 array like
        """

        return cls(quaternion_to_matrix(_check_quaternion_array_and_shape(np.asarray(quaternion).ravel())))

    @classmethod
    def create_from_axis_angle(cls, axis: ARRAY_LIKE, angle: float) -> 'Matrix':
        """
        Creates a matrix rotating by ``angle`` radians about ``axis``.

        As for :meth:`.Quaternion.from_axis_angle`, the axis should be of unit length.
        """

        return cls(quaternion_to_matrix(axis_angle_to_quaternion(_check_vector_array_and_shape(np.asarray(axis)),
                                                                 angle)))

    @classmethod
    def create_from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> 'Matrix':
        """
        Creates the matrix which rolls about z, then pitches about x, then yaws about y.

        This is the product of the elemental rotations ``Rz(roll) @ Rx(pitch) @ Ry(yaw)`` and represents the same
        rotation as :meth:`.Quaternion.from_yaw_pitch_roll` with the same angles.
        """

        return cls(rotation_z(roll) @ rotation_x(pitch) @ rotation_y(yaw))

    def __getitem__(self, index) -> float | DOUBLE_ARRAY:
        value = self._data[index]
        return float(value) if np.ndim(value) == 0 else value.copy()

    def __setitem__(self, index, value):
        self._data[index] = value

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the elements as a 4x4 numpy array.
        """

        return self._data.copy()

    @property
    def rotation(self) -> DOUBLE_ARRAY:
        """
        A copy of the upper left 3x3 rotation block.

        Setting this property overwrites the rotation block and leaves the rest of the matrix alone.
        """

        return self._data[:3, :3].copy()

    @rotation.setter
    def rotation(self, value: ARRAY_LIKE):

        value = np.asarray(value, dtype=np.float64)

        if value.shape != (3, 3):
            raise ValueError('The rotation block must be 3x3')

        self._data[:3, :3] = value

    @property
    def translation(self) -> DOUBLE_ARRAY:
        """
        A copy of the first three elements of the fourth row.

        This property is read only.
        """

        return self._data[3, :3].copy()

    def __matmul__(self, other: 'Matrix') -> 'Matrix':
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        return NotImplemented

    __mul__ = __matmul__

    def copy(self) -> 'Matrix':
        return copy.deepcopy(self)

    def equals(self, other: 'Matrix', tolerance: float) -> bool:
        """
        Returns whether every element of self is within ``tolerance`` of the matching element of ``other``.
        """

        return bool((np.abs(self._data - np.asarray(other, dtype=np.float64)) <= tolerance).all())

    def __eq__(self, other) -> bool:

        if not isinstance(other, Matrix):
            return NotImplemented

        return bool((self._data == other._data).all())

    def __repr__(self) -> str:
        return 'Matrix({0!r})'.format(self._data)

    def __str__(self) -> str:
        return str(self._data)


def _element_property(row: int, column: int) -> property:

    def getter(self: Matrix) -> float:
        return float(self._data[row, column])

    def setter(self: Matrix, value: float):
        self._data[row, column] = value

    return property(getter, setter, doc=f'The element in row {row + 1}, column {column + 1}')


for _row in range(4):
    for _column in range(4):
        setattr(Matrix, f'm{_row + 1}{_column + 1}', _element_property(_row, _column))

del _row, _column
