# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between the rotation representations used in gamemath: axis-angle
pairs, yaw/pitch/roll angles, quaternions, 4x4 row-vector matrices, and look-at directions.
All routines are implemented purely on numpy arrays (or array like objects).
"""

import logging

import warnings

import numpy as np

from gamemath._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY
from gamemath.errors import DegenerateInputError

from gamemath.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                    _check_vector_array_and_shape, _write_output)
from gamemath.core.quaternion_math import quaternion_concatenate


__all__ = ['FORWARD', 'UP', 'axis_angle_to_quaternion', 'quaternion_to_axis_angle', 'yaw_pitch_roll_to_quaternion',
           'quaternion_to_matrix', 'matrix_to_quaternion', 'look_at_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
The logger used to report the degenerate branches taken by the conversions.
"""

FORWARD: DOUBLE_ARRAY = np.array([0., 0., -1.])
"""
The reference forward direction of the right handed gamemath frame.
"""

UP: DOUBLE_ARRAY = np.array([0., 1., 0.])
"""
The reference up direction of the right handed gamemath frame.
"""


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY,
                             out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a quaternion.

    The quaternion is formed by:

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\mathbf{x} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is used as given and is **not** normalized.  If it is not of unit length the result is still a valid
    quaternion, but it is not a pure rotation by ``angle``; callers should normalize the axis first.  A zero axis
    has no rotation associated with it, so the identity quaternion is returned in its place and a warning is issued.

    This function is vectorized.  Multiple axes can be supplied as a ``3 x n`` array with one angle per column, or a
    single axis can be paired with an array of ``n`` angles.

    :param axis: The rotation axis(es)
    :param angle: The rotation angle(s) in radians
    :param out: optional array to receive the result
    :return: the quaternion(s) corresponding to the axis-angle pair(s)
    """

    axis = _check_vector_array_and_shape(axis)

    half_angle = np.asarray(angle, dtype=np.float64) / 2

    if axis.ndim == 1 and half_angle.ndim == 1:
        axis = axis.reshape(3, 1)

    q_vec = axis * np.sin(half_angle)
    q_scal = np.broadcast_to(np.cos(half_angle), q_vec.shape[1:]).copy()

    zero_axis = (axis == 0).all(axis=0)

    if np.any(zero_axis):
        warnings.warn('zero length rotation axis, returning the identity quaternion')

        if q_vec.ndim > 1:
            zero_axis = np.broadcast_to(zero_axis, q_vec.shape[1:])
            q_vec[:, zero_axis] = 0
            q_scal[zero_axis] = 1
        else:
            q_vec = np.zeros(3)
            q_scal = np.ones(())

    return _write_output(np.concatenate([q_vec, q_scal[np.newaxis]], axis=0), out)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation quaternion into a unit rotation axis and a rotation angle.

    The quaternion is normalized and then:

    .. math::
        \theta = 2\text{tan}^{-1}\left(\frac{\left\|\mathbf{q}_v\right\|}{q_s}\right) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    The two argument arctangent keeps full precision for small angles.  The returned angle lies in :math:`[0, 2\pi]`.
    For the identity rotation the axis is undefined and the zero vector is returned for it.

    This function is vectorized, with quaternions as columns of a ``4 x n`` array.

    :param quaternion: the rotation quaternion(s) to convert
    :return: the axis(es) as a ``3`` or ``3 x n`` array and the angle(s)
    :raises DegenerateInputError: if any quaternion has zero length, since it describes no rotation
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.linalg.norm(quaternion, axis=0, keepdims=True)

    if (length == 0).any():
        raise DegenerateInputError('Cannot convert a zero length quaternion to an axis and angle')

    quaternion = quaternion / length

    vector_length = np.linalg.norm(quaternion[:3], axis=0)

    theta = 2 * np.arctan2(vector_length, quaternion[-1])

    identity_check = vector_length == 0

    with np.errstate(divide='ignore', invalid='ignore'):
        axis = quaternion[:3] / vector_length

    if quaternion.ndim > 1:
        axis[:, identity_check] = 0
    elif identity_check:
        axis = np.zeros(3)

    return axis, theta


def yaw_pitch_roll_to_quaternion(yaw: SCALAR_OR_ARRAY, pitch: SCALAR_OR_ARRAY, roll: SCALAR_OR_ARRAY,
                                 out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts yaw, pitch, and roll angles into a rotation quaternion.

    Yaw rotates about the y (up) axis, pitch about the x (right) axis, and roll about the z (backward) axis.  The
    rotations are applied roll first, then pitch, then yaw, so the result is built by concatenating the three axis
    quaternions in that order:

    .. math::
        \mathbf{q} = \mathbf{q}_y(\psi)\otimes\mathbf{q}_x(\theta)\otimes\mathbf{q}_z(\phi)

    This is the same rotation as the matrix produced by :meth:`.Matrix.create_from_yaw_pitch_roll`.  The angles may be
    arrays of the same length, in which case the quaternions are returned as columns.

    :param yaw: the rotation about the y axis in radians
    :param pitch: the rotation about the x axis in radians
    :param roll: the rotation about the z axis in radians
    :param out: optional array to receive the result
    :return: the rotation quaternion(s)
    """

    q_roll = axis_angle_to_quaternion([0, 0, 1], roll)
    q_pitch = axis_angle_to_quaternion([1, 0, 0], pitch)
    q_yaw = axis_angle_to_quaternion([0, 1, 0], yaw)

    return quaternion_concatenate(quaternion_concatenate(q_roll, q_pitch), q_yaw, out=out)


def quaternion_to_matrix(quaternion: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a quaternion into the equivalent 4x4 row-vector rotation matrix.

    With :math:`\mathbf{q}=[x, y, z, w]^T` the rotation block is

    .. math::
        \left[\begin{array}{ccc} 1-2(y^2+z^2) & 2(xy+zw) & 2(xz-yw) \\
        2(xy-zw) & 1-2(x^2+z^2) & 2(yz+xw) \\
        2(xz+yw) & 2(yz-xw) & 1-2(x^2+y^2) \end{array}\right]

    which rotates a row vector :math:`\mathbf{y}` through :math:`\mathbf{y}\mathbf{M}`.  The translation row is zero.
    The quaternion is used as given; a non-unit quaternion does not produce an orthonormal block.

    This function is vectorized.  When converting multiple quaternions (as columns), the matrices are stacked down the
    first axis of the output.

    :param quaternion: The quaternion(s) to be converted to rotation matrix(ces)
    :param out: optional array to receive the result
    :return: the ``4 x 4`` or ``n x 4 x 4`` rotation matrix(ces)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    x, y, z, w = quaternion.reshape(4, -1)

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    xw, yw, zw = x * w, y * w, z * w

    matrix = np.zeros((x.size, 4, 4))

    matrix[:, 0, 0] = 1 - 2 * (yy + zz)
    matrix[:, 0, 1] = 2 * (xy + zw)
    matrix[:, 0, 2] = 2 * (xz - yw)

    matrix[:, 1, 0] = 2 * (xy - zw)
    matrix[:, 1, 1] = 1 - 2 * (xx + zz)
    matrix[:, 1, 2] = 2 * (yz + xw)

    matrix[:, 2, 0] = 2 * (xz + yw)
    matrix[:, 2, 1] = 2 * (yz - xw)
    matrix[:, 2, 2] = 1 - 2 * (xx + yy)

    matrix[:, 3, 3] = 1

    return _write_output(matrix.squeeze(axis=0) if quaternion.ndim == 1 else matrix, out)


def _matrix_branch(m11: DOUBLE_ARRAY, m22: DOUBLE_ARRAY, m33: DOUBLE_ARRAY) -> np.ndarray:
    """
    Chooses which component of the quaternion to solve for first when extracting it from a rotation block.

    The component solved first is the one whose square root argument is largest, so that the other components are
    divided by a value well away from zero.  The predicates are evaluated in order and the first that holds wins:

    * ``0``: ``trace > 0``.  Solve for ``w``.
    * ``1``: ``m11 >= m22`` and ``m11 >= m33``.  Solve for ``x``.
    * ``2``: ``m22 > m33``.  Solve for ``y``.
    * ``3``: otherwise.  Solve for ``z``.

    :return: the branch number for each set of diagonal elements
    """

    return np.select([m11 + m22 + m33 > 0,
                      (m11 >= m22) & (m11 >= m33),
                      m22 > m33],
                     [0, 1, 2], default=3)


def matrix_to_quaternion(rotation_matrix: ARRAY_LIKE, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a 4x4 row-vector rotation matrix into a rotation quaternion.

    Only the upper left 3x3 block is read.  Writing :math:`m_{ij}` for its 1 based elements and
    :math:`t=m_{11}+m_{22}+m_{33}` for its trace, one of four branches is used (see :func:`_matrix_branch`):

    ========================================  ==========================================  ===========================
    Predicate                                 :math:`s`                                   solved component
    ========================================  ==========================================  ===========================
    :math:`t>0`                               :math:`\sqrt{t+1}`                          :math:`w=s/2`
    :math:`m_{11}\ge m_{22}, m_{11}\ge m_{33}`  :math:`\sqrt{1+m_{11}-m_{22}-m_{33}}`       :math:`x=s/2`
    :math:`m_{22}>m_{33}`                     :math:`\sqrt{1+m_{22}-m_{11}-m_{33}}`       :math:`y=s/2`
    otherwise                                 :math:`\sqrt{1+m_{33}-m_{11}-m_{22}}`       :math:`z=s/2`
    ========================================  ==========================================  ===========================

    The remaining components then follow from the off diagonal sums and differences divided by :math:`2s`:

    .. math::
        4wx = m_{23}-m_{32}\quad 4wy = m_{31}-m_{13}\quad 4wz = m_{12}-m_{21}\\
        4xy = m_{12}+m_{21}\quad 4xz = m_{13}+m_{31}\quad 4yz = m_{23}+m_{32}

    This function is vectorized, meaning that you can specify multiple matrices stacked down the first axis, in which
    case the quaternions are returned as columns.

    :param rotation_matrix: The rotation matrix(ces) to convert
    :param out: optional array to receive the result
    :return: the rotation quaternion(s) corresponding to the input matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    matrices = rotation_matrix.reshape(-1, 4, 4)

    m11, m12, m13 = matrices[:, 0, 0], matrices[:, 0, 1], matrices[:, 0, 2]
    m21, m22, m23 = matrices[:, 1, 0], matrices[:, 1, 1], matrices[:, 1, 2]
    m31, m32, m33 = matrices[:, 2, 0], matrices[:, 2, 1], matrices[:, 2, 2]

    branch = _matrix_branch(m11, m22, m33)

    quaternion = np.empty((4, matrices.shape[0]))

    # each entry is the (component index, diagonal signs) of the solved component followed by the numerators of the
    # remaining components in x, y, z, w order
    for number, solved, signs, numerators in [
            (0, 3, (1, 1, 1), (m23 - m32, m31 - m13, m12 - m21, None)),
            (1, 0, (1, -1, -1), (None, m12 + m21, m13 + m31, m23 - m32)),
            (2, 1, (-1, 1, -1), (m21 + m12, None, m32 + m23, m31 - m13)),
            (3, 2, (-1, -1, 1), (m31 + m13, m32 + m23, None, m12 - m21))]:

        mask = branch == number

        if not mask.any():
            continue

        s = np.sqrt(1 + signs[0] * m11[mask] + signs[1] * m22[mask] + signs[2] * m33[mask])

        for component, numerator in enumerate(numerators):
            if component == solved:
                quaternion[component, mask] = 0.5 * s
            else:
                quaternion[component, mask] = numerator[mask] * 0.5 / s

    if rotation_matrix.ndim == 2:
        quaternion = quaternion.ravel()

    return _write_output(quaternion, out)


def _perpendicular_axis(forward: DOUBLE_ARRAY, up: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # the part of up orthogonal to forward, falling back to the x axis when they are parallel
    for candidate in (up, np.array([1., 0., 0.]), np.array([0., 1., 0.])):
        axis = candidate - forward * (candidate @ forward)
        length = np.linalg.norm(axis)
        if length > 1e-6:
            return axis / length

    raise ValueError('could not find an axis perpendicular to forward')  # pragma: no cover


def look_at_quaternion(direction: ARRAY_LIKE, forward: ARRAY_LIKE = FORWARD, up: ARRAY_LIKE = UP,
                       tolerance: float = 1e-12, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function returns the shortest arc rotation which carries ``forward`` onto ``direction``.

    The rotation axis and angle are

    .. math::
        \hat{\mathbf{x}} = \frac{\mathbf{f}\times\mathbf{d}}{\left\|\mathbf{f}\times\mathbf{d}\right\|}\\
        \theta = \text{tan}^{-1}\left(\frac{\left\|\mathbf{f}\times\mathbf{d}\right\|}{\mathbf{f}^T\mathbf{d}}\right)

    where :math:`\mathbf{f}` is the forward direction and :math:`\mathbf{d}` the direction (both taken as unit
    vectors).  The cross product vanishes when the two directions are parallel, so those cases are decided explicitly
    when :math:`s=\left\|\mathbf{f}\times\mathbf{d}\right\| \le \epsilon`:

    * :math:`\mathbf{f}^T\mathbf{d} > 0`: the directions agree and the identity quaternion is returned.
    * :math:`\mathbf{f}^T\mathbf{d} < 0`: the directions are opposite.  Every axis perpendicular to forward gives a
      valid half turn; the part of ``up`` perpendicular to forward is always used, so with the defaults the result is
      a rotation of :math:`\pi` about :math:`[0, 1, 0]`.
    * a zero direction has no rotation associated with it, so the identity quaternion is returned and a warning is
      issued.

    :param direction: the direction to look at.  It is normalized before use
    :param forward: the reference forward direction, unit length
    :param up: the reference up direction used to choose the half turn axis
    :param tolerance: the :math:`\epsilon` on the cross product length used to decide that the directions are parallel
    :param out: optional array to receive the result
    :return: the rotation quaternion
    """

    direction = _check_vector_array_and_shape(direction)
    forward = _check_vector_array_and_shape(forward)
    up = _check_vector_array_and_shape(up)

    length = np.linalg.norm(direction)

    if length == 0:
        warnings.warn('cannot look at a zero length direction, returning the identity quaternion')
        return _write_output(np.array([0., 0., 0., 1.]), out)

    direction = direction / length

    cos_angle = float(forward @ direction)

    axis = np.cross(forward, direction)
    sin_angle = float(np.linalg.norm(axis))

    if sin_angle <= tolerance:
        if cos_angle > 0:
            _LOGGER.debug('look at direction matches forward')
            return _write_output(np.array([0., 0., 0., 1.]), out)

        _LOGGER.debug('look at direction is opposite forward, using a half turn')
        return axis_angle_to_quaternion(_perpendicular_axis(forward, up), np.pi, out=out)

    axis = axis / sin_angle

    return axis_angle_to_quaternion(axis, np.arctan2(sin_angle, cos_angle), out=out)
