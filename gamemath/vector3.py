# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Vector3` class, a 3 component value type used for points, directions, and normals.
"""

import copy

import logging

from typing import MutableSequence, Sequence, Self

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from gamemath.errors import DegenerateInputError, InvalidArgumentError
from gamemath import math_helper
from gamemath.core.transforms import (rotate_vectors, transform_vectors, transform_normals, reflect_vectors,
                                      check_batch_range)


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
The logger used to report batch transforms.
"""


def _apply_rotation(rotation: ARRAY_LIKE, vectors: DOUBLE_ARRAY, normals: bool = False) -> DOUBLE_ARRAY:
    """
    Applies a rotation to ``3 x n`` vectors, interpreting the rotation by its size.

    A size of 4 is a quaternion and a size of 16 is a 4x4 matrix.

    :raises ValueError: If the size of the rotation is not 4 or 16, or a quaternion is used to transform normals
    """

    data = np.asarray(rotation, dtype=np.float64)

    if data.size == 16:
        matrix = data.reshape(4, 4)
        return transform_normals(matrix, vectors) if normals else transform_vectors(matrix, vectors)

    elif data.size == 4 and not normals:
        return rotate_vectors(data.ravel(), vectors)

    raise ValueError('The specified rotation data cannot be interpreted.')


class Vector3:
    """
    A 3 component vector with value semantics.

    A :class:`Vector3` owns a copy of its data; constructing one from another vector or an array copies the values,
    and every operation returns a new vector rather than changing its operands.  The only methods which modify a
    vector are the explicitly named in place ones (:meth:`normalize_inplace`) and the component setters.

    The class can be constructed in several ways::

        >>> from gamemath import Vector3
        >>> Vector3(1, 2, 3)
        Vector3(1.0, 2.0, 3.0)
        >>> Vector3(2)
        Vector3(2.0, 2.0, 2.0)
        >>> Vector3([4, 5, 6])
        Vector3(4.0, 5.0, 6.0)

    Vectors support the usual arithmetic operators (``+``, ``-``, ``*`` and ``/`` by scalars or componentwise by other
    vectors) and convert to numpy arrays through ``numpy.asarray``.
    """

    def __init__(self, x: float | ARRAY_LIKE | Self = 0.0, y: float | None = None, z: float | None = None):
        """
        :param x: the x component, a single value to use for every component, or any length 3 array like
        :param y: the y component
        :param z: the z component
        :raises ValueError: if the data cannot be interpreted as 3 components
        """

        if y is None and z is None:

            data = np.array(x, dtype=np.float64)

            if data.ndim == 0:
                data = np.repeat(data, 3)

            elif data.size == 3:
                data = data.ravel()

            else:
                raise ValueError('A Vector3 must be built from 1 or 3 values')

        elif y is None or z is None:
            raise ValueError('Both y and z must be specified with x')

        else:
            data = np.array([x, y, z], dtype=np.float64)

        self._data: DOUBLE_ARRAY = data

    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0., 0., 0.)

    @classmethod
    def one(cls) -> 'Vector3':
        return cls(1., 1., 1.)

    @classmethod
    def unit_x(cls) -> 'Vector3':
        return cls(1., 0., 0.)

    @classmethod
    def unit_y(cls) -> 'Vector3':
        return cls(0., 1., 0.)

    @classmethod
    def unit_z(cls) -> 'Vector3':
        return cls(0., 0., 1.)

    @classmethod
    def up(cls) -> 'Vector3':
        return cls(0., 1., 0.)

    @classmethod
    def down(cls) -> 'Vector3':
        return cls(0., -1., 0.)

    @classmethod
    def right(cls) -> 'Vector3':
        return cls(1., 0., 0.)

    @classmethod
    def left(cls) -> 'Vector3':
        return cls(-1., 0., 0.)

    @classmethod
    def forward(cls) -> 'Vector3':
        """
        The reference forward direction, ``(0, 0, -1)``, of the right handed frame.
        """
        return cls(0., 0., -1.)

    @classmethod
    def backward(cls) -> 'Vector3':
        return cls(0., 0., 1.)

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

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the components as a numpy array.
        """

        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __len__(self) -> int:
        return 3

    def copy(self) -> 'Vector3':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    # arithmetic

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3(self._data - other._data)
        return NotImplemented

    def __neg__(self) -> 'Vector3':
        return Vector3(-self._data)

    def __mul__(self, other: 'Vector3 | float') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3(self._data * other._data)
        elif np.isscalar(other):
            return Vector3(self._data * other)
        return NotImplemented

    def __rmul__(self, other: float) -> 'Vector3':
        if np.isscalar(other):
            return Vector3(self._data * other)
        return NotImplemented

    def __truediv__(self, other: 'Vector3 | float') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3(self._data / other._data)
        elif np.isscalar(other):
            return Vector3(self._data / other)
        return NotImplemented

    def dot(self, other: 'Vector3') -> float:
        return float(self._data @ other._data)

    def cross(self, other: 'Vector3') -> 'Vector3':
        """
        Returns the right handed cross product ``self x other``.
        """

        return Vector3(np.cross(self._data, other._data))

    def length_squared(self) -> float:
        return float(self._data @ self._data)

    def length(self) -> float:
        return float(np.sqrt(self.length_squared()))

    def distance_squared(self, other: 'Vector3') -> float:
        return (self - other).length_squared()

    def distance(self, other: 'Vector3') -> float:
        return (self - other).length()

    def normalize(self) -> 'Vector3':
        """
        Returns a unit length vector pointing in the same direction as self.

        :raises DegenerateInputError: if self is the zero vector
        """

        length = self.length()

        if length == 0:
            raise DegenerateInputError('Cannot normalize a zero length vector')

        return Vector3(self._data / length)

    def normalize_inplace(self):
        """
        Scales self to unit length.

        :raises DegenerateInputError: if self is the zero vector
        """

        self._data = self.normalize()._data

    def clamp_length(self, max_length: float) -> 'Vector3':
        """
        Returns self scaled down to ``max_length`` if it is longer than that, or an unchanged copy otherwise.
        """

        length = self.length()

        if length > max_length:
            return Vector3(self._data * (max_length / length))

        return self.copy()

    def move_towards(self, target: 'Vector3', max_delta: float) -> 'Vector3':
        """
        Returns the point reached by moving from self straight towards ``target`` by at most ``max_delta``.

        The target itself is returned once it is within ``max_delta``, so repeated calls arrive exactly.
        """

        to_target = target - self
        distance = to_target.length()

        if distance <= max_delta or distance == 0:
            return target.copy()

        return self + to_target * (max_delta / distance)

    @staticmethod
    def reflect(vector: 'Vector3', normal: 'Vector3') -> 'Vector3':
        """
        Reflects ``vector`` off the plane with unit normal ``normal``: ``v - 2 dot(v, n) n``.
        """

        return Vector3(reflect_vectors(vector._data, normal._data))

    @staticmethod
    def min(value1: 'Vector3', value2: 'Vector3') -> 'Vector3':
        return Vector3(np.minimum(value1._data, value2._data))

    @staticmethod
    def max(value1: 'Vector3', value2: 'Vector3') -> 'Vector3':
        return Vector3(np.maximum(value1._data, value2._data))

    @staticmethod
    def clamp(value: 'Vector3', minimum: 'Vector3', maximum: 'Vector3') -> 'Vector3':
        return Vector3(math_helper.clamp(value._data, minimum._data, maximum._data))

    # interpolation, see gamemath.math_helper for the definitions

    @staticmethod
    def lerp(value1: 'Vector3', value2: 'Vector3', amount: float) -> 'Vector3':
        return Vector3(math_helper.lerp(value1._data, value2._data, amount))

    @staticmethod
    def smooth_step(value1: 'Vector3', value2: 'Vector3', amount: float) -> 'Vector3':
        """
        Interpolates with the cubic :math:`a^2(3-2a)`.

        Unlike :func:`.math_helper.smooth_step` the amount is not clamped, so amounts outside ``[0, 1]`` follow the cubic
        beyond the end points.
        """

        return Vector3(math_helper.lerp(value1._data, value2._data, amount * amount * (3 - 2 * amount)))

    @staticmethod
    def hermite(value1: 'Vector3', tangent1: 'Vector3', value2: 'Vector3', tangent2: 'Vector3',
                amount: float) -> 'Vector3':
        return Vector3(math_helper.hermite(value1._data, tangent1._data, value2._data, tangent2._data, amount))

    @staticmethod
    def catmull_rom(value1: 'Vector3', value2: 'Vector3', value3: 'Vector3', value4: 'Vector3',
                    amount: float) -> 'Vector3':
        return Vector3(math_helper.catmull_rom(value1._data, value2._data, value3._data, value4._data, amount))

    @staticmethod
    def barycentric(value1: 'Vector3', value2: 'Vector3', value3: 'Vector3',
                    amount1: float, amount2: float) -> 'Vector3':
        return Vector3(math_helper.barycentric(value1._data, value2._data, value3._data, amount1, amount2))

    # transforms

    def transform(self, rotation: ARRAY_LIKE) -> 'Vector3':
        """
        Returns self transformed by a rotation quaternion or a 4x4 matrix.

        The rotation is interpreted by its size, in the same way for :class:`.Quaternion` and :class:`.Matrix` objects
        as for plain arrays: 4 values are a quaternion ``[x, y, z, w]`` and 16 values are a row-major matrix.  A matrix
        transforms self as a point, so its translation row is applied.  Use :meth:`transform_normal` for directions.

        Self is not modified.

        :param rotation: the quaternion or matrix to apply
        :return: the transformed vector
        :raises ValueError: if the rotation cannot be interpreted
        """

        return Vector3(_apply_rotation(rotation, self._data))

    def transform_normal(self, matrix: ARRAY_LIKE) -> 'Vector3':
        """
        Returns self transformed as a direction by the 3x3 rotation block of a 4x4 matrix, ignoring translation.

        :param matrix: the 16 element matrix to apply
        :return: the transformed vector
        :raises ValueError: if the matrix does not have 16 elements
        """

        return Vector3(_apply_rotation(matrix, self._data, normals=True))

    @staticmethod
    def _transform_batch(source_array: Sequence['Vector3'], rotation: ARRAY_LIKE,
                         destination_array: MutableSequence['Vector3'], source_index: int, destination_index: int,
                         length: int | None, normals: bool):

        if source_array is None:
            raise InvalidArgumentError('source_array must not be None')

        if destination_array is None:
            raise InvalidArgumentError('destination_array must not be None')

        if length is None:
            length = len(source_array) - source_index

        check_batch_range(len(source_array), source_index, len(destination_array), destination_index, length)

        if length == 0:
            return

        _LOGGER.debug(f'transforming {length} vectors')

        vectors = np.array([source_array[ind]._data for ind in range(source_index, source_index + length)]).T

        transformed = _apply_rotation(rotation, vectors, normals=normals)

        for offset, column in enumerate(transformed.T):
            destination_array[destination_index + offset] = Vector3(column)

    @staticmethod
    def transform_array(source_array: Sequence['Vector3'], rotation: ARRAY_LIKE,
                        destination_array: MutableSequence['Vector3'], source_index: int = 0,
                        destination_index: int = 0, length: int | None = None):
        """
        Transforms a range of vectors by one shared quaternion or matrix, writing into ``destination_array``.

        Element ``source_index + i`` of the source is transformed exactly as :meth:`transform` would and the result
        stored at ``destination_index + i`` of the destination, for ``i`` in ``range(length)``.  When ``length`` is
        not given the rest of the source, from ``source_index``, is transformed.  The source and destination may be
        the same list.

        The arguments are validated before anything is written, so on failure the destination is untouched.

        :param source_array: the vectors to transform
        :param rotation: the quaternion or matrix to apply
        :param destination_array: the list receiving the transformed vectors
        :param source_index: the first source element to transform
        :param destination_index: the first destination element to write
        :param length: the number of vectors to transform
        :raises InvalidArgumentError: if either list is None or the range does not fit in either list
        """

        Vector3._transform_batch(source_array, rotation, destination_array, source_index, destination_index, length,
                                 normals=False)

    @staticmethod
    def transform_normal_array(source_array: Sequence['Vector3'], matrix: ARRAY_LIKE,
                               destination_array: MutableSequence['Vector3'], source_index: int = 0,
                               destination_index: int = 0, length: int | None = None):
        """
        Transforms a range of direction vectors by the rotation block of one shared matrix.

        This is the batch form of :meth:`transform_normal` and follows the same rules as :meth:`transform_array`.

        :raises InvalidArgumentError: if either list is None or the range does not fit in either list
        """

        Vector3._transform_batch(source_array, matrix, destination_array, source_index, destination_index, length,
                                 normals=True)

    # comparison

    def equals(self, other: 'Vector3', tolerance: float) -> bool:
        """
        Returns whether every component of self is within ``tolerance`` of the matching component of ``other``.
        """

        return bool((np.abs(self._data - np.asarray(other, dtype=np.float64)) <= tolerance).all())

    def __eq__(self, other) -> bool:

        if not isinstance(other, Vector3):
            return NotImplemented

        return bool((self._data == other._data).all())

    def __repr__(self) -> str:
        return 'Vector3({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)

    def __str__(self) -> str:
        return '{{X:{0} Y:{1} Z:{2}}}'.format(self.x, self.y, self.z)
