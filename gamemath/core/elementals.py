import numpy as np

from gamemath._typing import SCALAR_OR_ARRAY, DOUBLE_ARRAY

from gamemath.core._helpers import _write_output


__all__ = ["rotation_x", "rotation_y", "rotation_z"]


def _homogeneous_stack(*elements: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Builds ``n x 4 x 4`` homogeneous matrices from the 9 row-major elements of their rotation blocks.

    The translation row is zero and the last column is ``[0, 0, 0, 1]``.  A single matrix is returned as ``4 x 4``.
    """

    blocks = np.vstack(elements).T.reshape(-1, 3, 3)

    out = np.zeros((blocks.shape[0], 4, 4))
    out[:, :3, :3] = blocks
    out[:, 3, 3] = 1

    return out.squeeze(axis=0) if out.shape[0] == 1 else out


def rotation_x(theta: SCALAR_OR_ARRAY, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function forms the row-vector rotation matrix that rotates right handed about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{cccc} 1 & 0 & 0 & 0\\
        0 & \text{cos}(\theta) & \text{sin}(\theta) & 0\\
        0 & -\text{sin}(\theta) & \text{cos}(\theta) & 0\\
        0 & 0 & 0 & 1\end{array}\right]

    which rotates a row vector through :math:`\mathbf{y}\mathbf{R}_x(\theta)`.  This is the transpose of the more
    common column-vector form.

    Theta should be in units of radians and can be a scalar or a vector.  If theta is a vector then each theta value
    will have a corresponding rotation matrix down the first axis of the output.  For example::

        >>> from gamemath.core import rotation_x
        >>> rotation_x(0.5)
        array([[ 1.        ,  0.        ,  0.        ,  0.        ],
               [ 0.        ,  0.87758256,  0.47942554,  0.        ],
               [ 0.        , -0.47942554,  0.87758256,  0.        ],
               [ 0.        ,  0.        ,  0.        ,  1.        ]])

    :param theta: The angles to form the rotation matrix(ces) for
    :param out: optional array to receive the result
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    # ensure we have an array of theta(s)
    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return _write_output(_homogeneous_stack(ones, zeros, zeros, zeros, ctheta, stheta, zeros, -stheta, ctheta), out)


def rotation_y(theta: SCALAR_OR_ARRAY, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function forms the row-vector rotation matrix that rotates right handed about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{cccc} \text{cos}(\theta) & 0 & -\text{sin}(\theta) & 0\\
        0 & 1 & 0 & 0\\
        \text{sin}(\theta) & 0 & \text{cos}(\theta) & 0\\
        0 & 0 & 0 & 1\end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :param out: optional array to receive the result
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return _write_output(_homogeneous_stack(ctheta, zeros, -stheta, zeros, ones, zeros, stheta, zeros, ctheta), out)


def rotation_z(theta: SCALAR_OR_ARRAY, out: DOUBLE_ARRAY | None = None) -> DOUBLE_ARRAY:
    r"""
    This function forms the row-vector rotation matrix that rotates right handed about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{cccc} \text{cos}(\theta) & \text{sin}(\theta) & 0 & 0\\
        -\text{sin}(\theta) & \text{cos}(\theta) & 0 & 0\\
        0 & 0 & 1 & 0\\
        0 & 0 & 0 & 1\end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :param out: optional array to receive the result
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    ones = np.ones(theta.shape)
    zeros = np.zeros(theta.shape)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return _write_output(_homogeneous_stack(ctheta, stheta, zeros, -stheta, ctheta, zeros, zeros, zeros, ones), out)
