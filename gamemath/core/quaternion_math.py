"""
This module provides the algebra of quaternions stored as numpy arrays of the form ``[x, y, z, w]``.

Every function here is vectorized: multiple quaternions may be supplied as a ``4 x n`` array where each column is an
independent quaternion.  Functions which build a new quaternion also accept an optional ``out`` array which receives
the result; the returned value and ``out`` are then the same object.
"""

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike, SCALAR_OR_ARRAY
from gamemath.errors import DegenerateInputError

from gamemath.core._helpers import _check_quaternion_array_and_shape, _write_output

__all__ = ["quaternion_length_squared", "quaternion_length", "quaternion_dot", "quaternion_normalize",
           "quaternion_conjugate", "quaternion_inverse", "quaternion_multiplication", "quaternion_concatenate",
           "quaternion_divide", "nlerp", "slerp"]


def quaternion_length_squared(quaternion: ARRAY_LIKE) -> SCALAR_OR_ARRAY:
    """
    Returns the squared euclidean norm of the quaternion(s).

    :param quaternion: the quaternion(s) to measure
    :return: the squared length as a float, or an array with one entry per column
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return (quaternion * quaternion).sum(axis=0)


def quaternion_length(quaternion: ARRAY_LIKE) -> SCALAR_OR_ARRAY:
    """
    Returns the euclidean norm of the quaternion(s).

    :param quaternion: the quaternion(s) to measure
    :return: the length as a float, or an array with one entry per column
    """

    return np.sqrt(quaternion_length_squared(quaternion))


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> SCALAR_OR_ARRAY:
    """
    Returns the 4 dimensional inner product of two quaternions (or of corresponding columns).
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2)

    return (quaternion_1 * quaternion_2).sum(axis=0)


def _checked_length_squared(quaternion: DOUBLE_ARRAY, operation: str) -> DOUBLE_ARRAY:
    length_squared = (quaternion * quaternion).sum(axis=0, keepdims=True)

    if (length_squared == 0).any():
        raise DegenerateInputError(f'Cannot {operation} a zero length quaternion')

    return length_squared


def quaternion_normalize(quaternion: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Scales the quaternion(s) to unit length.

    .. math::
        \hat{\mathbf{q}} = \frac{\mathbf{q}}{\left\|\mathbf{q}\right\|}

    Unlike some attitude libraries the sign of the quaternion is left alone, so a quaternion with a negative scalar
    part stays negative.

    :param quaternion: the quaternion(s) to normalize
    :param out: optional array to receive the result
    :return: The normalized quaternion(s)
    :raises DegenerateInputError: if any quaternion has zero length, since it has no normalized form
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    work_quaternion /= np.sqrt(_checked_length_squared(work_quaternion, 'normalize'))

    return _write_output(work_quaternion, out)


def quaternion_conjugate(quaternion: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function returns the conjugate of the quaternion(s), which negates the vector portion and keeps the scalar
    portion:

    .. math::
        \mathbf{q}^*=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    For a unit quaternion the conjugate is the inverse rotation.

    :param quaternion: The quaternion(s) to conjugate
    :param out: optional array to receive the result
    :return: the conjugated quaternion(s)
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return _write_output(quaternion, out)


def quaternion_inverse(quaternion: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.
    Mathematically this is the conjugate scaled by the inverse of the squared length:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    so for unit quaternions it is identical to :func:`quaternion_conjugate`.

    :param quaternion: The quaternion(s) to be inverted
    :param out: optional array to receive the result
    :return: the inverse quaternion(s)
    :raises DegenerateInputError: if any quaternion has zero length
    """

    conjugate = quaternion_conjugate(quaternion)

    conjugate /= _checked_length_squared(conjugate, 'invert')

    return _write_output(conjugate, out)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE,
                              out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    When both quaternions are rotations, the product rotates by :math:`\mathbf{q}_2` first and then by
    :math:`\mathbf{q}_1`.  See :func:`quaternion_concatenate` for the "first, then" ordering.

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :param out: optional array to receive the result
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)

    return _write_output(qout, out)


def quaternion_concatenate(first: ARRAY_LIKE, second: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Composes two rotations so that the result rotates by ``first`` and then by ``second``.

    This is the hamiltonian product with the operands swapped:

    .. math::
        \text{concatenate}(\mathbf{q}_1, \mathbf{q}_2) = \mathbf{q}_2\otimes\mathbf{q}_1

    so that rotating a vector by the concatenated quaternion is the same as rotating it by ``first`` and then rotating
    the result by ``second``.  For example::

        >>> from gamemath.core import quaternion_concatenate
        >>> quaternion_concatenate([1, 2.5, 3, 4], [1, 2, -3.8, 2])
        array([21.5,  6.2, -8.7, 13.4])

    :param first: the rotation(s) applied first
    :param second: the rotation(s) applied second
    :param out: optional array to receive the result
    :return: the composed rotation(s)
    """

    return quaternion_multiplication(second, first, out=out)


def quaternion_divide(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE,
                      out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    Divides ``quaternion_1`` by ``quaternion_2``, defined as
    :math:`\mathbf{q}_1\otimes\mathbf{q}_2^{-1}` (see :func:`quaternion_inverse`).

    :param quaternion_1: the dividend(s)
    :param quaternion_2: the divisor(s)
    :param out: optional array to receive the result
    :return: the quotient(s)
    :raises DegenerateInputError: if a divisor has zero length
    """

    return quaternion_multiplication(quaternion_1, quaternion_inverse(quaternion_2), out=out)


def _fractional_time(time: float | DatetimeLike, time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:
    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division. Typically this means they should all be floats or all be DatetimeLike objects')


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1,
          out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)\pm\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)\pm\mathbf{q}_1p\right\|}

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1`.  The
    sign of the :math:`\mathbf{q}_1` term is chosen to be the sign of :math:`\mathbf{q}_0^T\mathbf{q}_1` so that the
    interpolation follows the shorter path.

    You can either specify `time` as the fractional percent, or specify `time0` and `time1` as the times
    corresponding to the first and second quaternion and the fractional percent will be computed for you.  All three
    may also be datetime objects.

    .. warning::
        NLERP does not perform a constant angular velocity interpolation.  Use :func:`slerp` when that matters.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at
    :param time0: the time corresponding to the first quaternion(s)
    :param time1: the time corresponding to the second quaternion(s)
    :param out: optional array to receive the result
    :return: The interpolated quaternion(s)
    """

    dt = _fractional_time(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    # take the shorter path around the hypersphere
    signs = np.where(quaternion_dot(q0, q1) >= 0, 1.0, -1.0)

    q = q0 * (1 - dt) + signs * q1 * dt

    return quaternion_normalize(q, out=out)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1,
          out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions.

    SLERP of quaternions involves performing a linear interpolation along the great circle arc connecting the two
    quaternions. That is:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\mathbf{q}_0\text{cos}(p\omega)+
        \text{sin}(p\omega)\frac{\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)}
        {\left\|\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)\right\|}

    The inputs are normalized first, and any pair of quaternions which is nearly parallel falls back to :func:`nlerp`.
    Multiple pairs may be interpolated at once by supplying them as the columns of ``4 x n`` arrays.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at
    :param time0: the time corresponding to the first quaternion(s)
    :param time1: the time corresponding to the second quaternion(s)
    :param out: optional array to receive the result
    :return: The interpolated quaternion(s)
    """

    dt = _fractional_time(time, time0, time1)

    # enforce unit normalization
    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    cos_angle = quaternion_dot(q0, q1)

    # negate the second quaternion(s) to ensure the shorter path is taken
    q1 = q1 * np.where(cos_angle < 0, -1.0, 1.0)
    cos_angle = np.abs(cos_angle)

    # if the quaternions are really close revert to nlerp
    close = cos_angle > 0.9995

    angle0 = np.arccos(np.clip(cos_angle, -1, 1))  # angle between q0 and q1
    angle = angle0 * dt  # angle between q0 and q

    # form an orthonormal basis
    qb = q1 - q0 * cos_angle

    qb /= np.where(close, 1.0, np.linalg.norm(qb, axis=0))

    q = q0 * np.cos(angle) + qb * np.sin(angle)

    q = np.where(close, q0 * (1 - dt) + q1 * dt, q)

    return quaternion_normalize(q, out=out)
