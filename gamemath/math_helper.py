# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides scalar interpolation and clamping helpers together with some commonly used constants.

Every function accepts python floats or numpy arrays and operates elementwise, so the same helper can be used on a
single number or on all components of a vector at once.  Scalar inputs give scalar (0 dimensional) outputs.

The interpolation helpers are:

==============  =====================================================================================================
Helper          Description
==============  =====================================================================================================
lerp            straight line interpolation :math:`v_1 + (v_2-v_1)t`
smooth_step     cubic ease in/ease out between two values, with the amount clamped to :math:`[0, 1]`
hermite         cubic Hermite spline through two values with the given tangents
catmull_rom     Catmull-Rom spline through the middle two of four values
barycentric     the point with barycentric weights :math:`a_1, a_2` in a triangle of values
==============  =====================================================================================================
"""

import numpy as np

from gamemath._typing import SCALAR_OR_ARRAY


E: float = float(np.e)
LOG10_E: float = float(np.log10(np.e))
LOG2_E: float = float(np.log2(np.e))
PI: float = float(np.pi)
PI_OVER_2: float = PI / 2
PI_OVER_4: float = PI / 4
TWO_PI: float = PI * 2


__all__ = ['E', 'LOG10_E', 'LOG2_E', 'PI', 'PI_OVER_2', 'PI_OVER_4', 'TWO_PI',
           'lerp', 'smooth_step', 'hermite', 'catmull_rom', 'barycentric', 'clamp', 'distance',
           'to_degrees', 'to_radians', 'wrap_angle']


def lerp(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Linearly interpolates between two values.

    An amount of 0 gives ``value1`` and 1 gives ``value2``.  Amounts outside of that range extrapolate.
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return value1 + (np.asarray(value2, dtype=np.float64) - value1) * amount


def hermite(value1: SCALAR_OR_ARRAY, tangent1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, tangent2: SCALAR_OR_ARRAY,
            amount: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    r"""
    Performs cubic Hermite spline interpolation.

    .. math::
        h(s) = (2v_1 - 2v_2 + t_2 + t_1)s^3 + (3v_2 - 3v_1 - 2t_1 - t_2)s^2 + t_1 s + v_1

    The end points are returned exactly when the amount is exactly 0 or 1.

    :param value1: the value at an amount of 0
    :param tangent1: the tangent at ``value1``
    :param value2: the value at an amount of 1
    :param tangent2: the tangent at ``value2``
    :param amount: the interpolation amount
    :return: the interpolated value(s)
    """

    v1, t1, v2, t2, s = np.broadcast_arrays(*(np.asarray(value, dtype=np.float64)
                                              for value in (value1, tangent1, value2, tangent2, amount)))

    s_squared = s * s
    s_cubed = s_squared * s

    result = ((2 * v1 - 2 * v2 + t2 + t1) * s_cubed +
              (3 * v2 - 3 * v1 - 2 * t1 - t2) * s_squared +
              t1 * s +
              v1)

    return np.where(s == 0, v1, np.where(s == 1, v2, result))


def smooth_step(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Interpolates between two values with a cubic that has zero slope at both ends.

    The amount is clamped to ``[0, 1]`` so the result never leaves the range spanned by the two values.
    """

    return hermite(value1, 0, value2, 0, clamp(amount, 0, 1))


def catmull_rom(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, value3: SCALAR_OR_ARRAY, value4: SCALAR_OR_ARRAY,
                amount: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    r"""
    Performs Catmull-Rom spline interpolation between ``value2`` (amount 0) and ``value3`` (amount 1).

    .. math::
        c(t) = \frac{1}{2}\left(2v_2 + (v_3-v_1)t + (2v_1-5v_2+4v_3-v_4)t^2 + (3v_2-v_1-3v_3+v_4)t^3\right)

    :param value1: the control value before ``value2``
    :param value2: the first value on the interpolated segment
    :param value3: the second value on the interpolated segment
    :param value4: the control value after ``value3``
    :param amount: the interpolation amount
    :return: the interpolated value(s)
    """

    v1, v2, v3, v4 = (np.asarray(value, dtype=np.float64) for value in (value1, value2, value3, value4))

    amount_squared = np.multiply(amount, amount)
    amount_cubed = amount_squared * amount

    return 0.5 * (2.0 * v2 +
                  (v3 - v1) * amount +
                  (2.0 * v1 - 5.0 * v2 + 4.0 * v3 - v4) * amount_squared +
                  (3.0 * v2 - v1 - 3.0 * v3 + v4) * amount_cubed)


def barycentric(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, value3: SCALAR_OR_ARRAY,
                amount1: SCALAR_OR_ARRAY, amount2: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Returns the value at barycentric coordinates ``(amount1, amount2)`` of the triangle ``value1, value2, value3``.

    The weight of ``value2`` is ``amount1`` and the weight of ``value3`` is ``amount2``.
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return value1 + (np.asarray(value2) - value1) * amount1 + (np.asarray(value3) - value1) * amount2


def clamp(value: SCALAR_OR_ARRAY, minimum: SCALAR_OR_ARRAY, maximum: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Restricts the value(s) to the range ``[minimum, maximum]``.
    """

    return np.minimum(np.maximum(np.asarray(value, dtype=np.float64), minimum), maximum)


def distance(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Returns the absolute difference of the two values.
    """

    return np.abs(np.subtract(value1, value2, dtype=np.float64))


def to_degrees(radians: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    return np.degrees(radians)


def to_radians(degrees: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    return np.radians(degrees)


def wrap_angle(angle: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    """
    Reduces the angle(s) in radians to the interval ``(-pi, pi]``.
    """

    wrapped = np.remainder(np.asarray(angle, dtype=np.float64) + PI, TWO_PI) - PI

    # the remainder maps an odd multiple of pi to -pi, which lies outside of the interval
    return np.where(wrapped == -PI, PI, wrapped)
