"""
This module applies rotations and matrices to 3 element vectors stored as numpy arrays.

Vectors may be given one at a time as 3 element arrays, or many at once as ``3 x n`` arrays with one vector per column.
"""

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from gamemath.errors import InvalidArgumentError

from gamemath.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                    _check_vector_array_and_shape, _write_output)


__all__ = ['rotate_vectors', 'transform_vectors', 'transform_normals', 'reflect_vectors', 'check_batch_range']


def rotate_vectors(quaternion: ARRAY_LIKE, vectors: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Rotates the vector(s) by the quaternion.

    Rotation by a quaternion is :math:`\mathbf{q}\otimes[\mathbf{v}, 0]\otimes\mathbf{q}^*`.  Expanding the two
    products and dropping the terms which cancel gives the direct form used here, which needs no intermediate
    quaternion:

    .. math::
        \mathbf{t} = 2\,\mathbf{q}_v\times\mathbf{v}\\
        \mathbf{v}' = \mathbf{v} + q_s\mathbf{t} + \mathbf{q}_v\times\mathbf{t}

    The quaternion is used as given.  For a non-unit quaternion the formula is still evaluated but the result is not
    a pure rotation of the input.

    :param quaternion: the rotation quaternion, ``[x, y, z, w]``
    :param vectors: the vector(s) to rotate, as a ``3`` or ``3 x n`` array
    :param out: optional array to receive the result
    :return: the rotated vector(s), with the same shape as ``vectors``
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vectors = _check_vector_array_and_shape(vectors)

    if quaternion.ndim != 1:
        raise ValueError('A single quaternion must be used to rotate the vectors')

    q_vec = quaternion[:3].reshape((3,) + (1,) * (vectors.ndim - 1))
    q_scal = quaternion[-1]

    temp = 2 * np.cross(q_vec, vectors, axis=0)

    return _write_output(vectors + q_scal * temp + np.cross(q_vec, temp, axis=0), out)


def transform_vectors(matrix: ARRAY_LIKE, vectors: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Transforms position vector(s) by a 4x4 row-vector matrix, including its translation row.

    .. math::
        \left[\begin{array}{cccc}\mathbf{v}'^T & \bullet\end{array}\right] =
        \left[\begin{array}{cccc}\mathbf{v}^T & 1\end{array}\right]\mathbf{M}

    The fourth component of the product is discarded (no perspective divide).

    :param matrix: the ``4 x 4`` matrix
    :param vectors: the position vector(s), as a ``3`` or ``3 x n`` array
    :param out: optional array to receive the result
    :return: the transformed vector(s), with the same shape as ``vectors``
    """

    matrix = _check_matrix_array_and_shape(matrix)
    vectors = _check_vector_array_and_shape(vectors)

    result = (vectors.T @ matrix[:3, :3] + matrix[3, :3]).T

    return _write_output(result, out)


def transform_normals(matrix: ARRAY_LIKE, normals: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Transforms direction vector(s) by the upper left 3x3 block of a 4x4 row-vector matrix.

    Unlike :func:`transform_vectors` the translation row is ignored, which is what is wanted for directions and
    normals.

    :param matrix: the ``4 x 4`` matrix
    :param normals: the direction vector(s), as a ``3`` or ``3 x n`` array
    :param out: optional array to receive the result
    :return: the transformed vector(s), with the same shape as ``normals``
    """

    matrix = _check_matrix_array_and_shape(matrix)
    normals = _check_vector_array_and_shape(normals)

    return _write_output((normals.T @ matrix[:3, :3]).T, out)


def reflect_vectors(vectors: ARRAY_LIKE, normal: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Reflects the vector(s) off a plane with the given unit normal.

    .. math::
        \mathbf{r} = \mathbf{v} - 2(\mathbf{v}^T\hat{\mathbf{n}})\hat{\mathbf{n}}

    :param vectors: the vector(s) to reflect
    :param normal: the unit normal of the reflecting plane
    :param out: optional array to receive the result
    :return: the reflected vector(s)
    """

    vectors = _check_vector_array_and_shape(vectors)
    normal = _check_vector_array_and_shape(normal)

    if normal.ndim == 1 and vectors.ndim > 1:
        normal = normal.reshape(3, 1)

    return _write_output(vectors - 2 * (vectors * normal).sum(axis=0) * normal, out)


def check_batch_range(source_length: int, source_index: int, destination_length: int, destination_index: int,
                      length: int) -> None:
    """
    Validates the range arguments of a batch operation before anything is written.

    :param source_length: the number of elements in the source
    :param source_index: the first source element to process
    :param destination_length: the number of elements in the destination
    :param destination_index: the first destination element to write
    :param length: the number of elements to process
    :raises InvalidArgumentError: if any index or length is negative, the source is smaller than the requested range,
                                  or the destination is smaller than required
    """

    if min(source_index, destination_index, length) < 0:
        raise InvalidArgumentError('Indices and length must not be negative')

    if source_index + length > source_length:
        raise InvalidArgumentError('Source is smaller than specified length and index')

    if destination_index + length > destination_length:
        raise InvalidArgumentError('Destination is smaller than specified length and index')
