"""
This package contains the array level routines that the gamemath value classes are built on.

Everything here operates purely on numpy arrays (or array like objects), is vectorized where it makes sense, and has no
dependency on the value classes so that it can be used directly on large batches of data.
"""

import gamemath.core.conversions
import gamemath.core.elementals
import gamemath.core.quaternion_math
import gamemath.core.transforms

from gamemath.core.conversions import (FORWARD, UP, axis_angle_to_quaternion, quaternion_to_axis_angle,
                                       yaw_pitch_roll_to_quaternion, quaternion_to_matrix, matrix_to_quaternion,
                                       look_at_quaternion)

from gamemath.core.elementals import rotation_x, rotation_y, rotation_z

from gamemath.core.quaternion_math import (quaternion_length_squared, quaternion_length, quaternion_dot,
                                           quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                           quaternion_multiplication, quaternion_concatenate, quaternion_divide,
                                           nlerp, slerp)

from gamemath.core.transforms import (rotate_vectors, transform_vectors, transform_normals, reflect_vectors,
                                      check_batch_range)

__all__ = ['FORWARD', 'UP', 'axis_angle_to_quaternion', 'quaternion_to_axis_angle', 'yaw_pitch_roll_to_quaternion',
           'quaternion_to_matrix', 'matrix_to_quaternion', 'look_at_quaternion',
           'rotation_x', 'rotation_y', 'rotation_z',
           'quaternion_length_squared', 'quaternion_length', 'quaternion_dot', 'quaternion_normalize',
           'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication', 'quaternion_concatenate',
           'quaternion_divide', 'nlerp', 'slerp',
           'rotate_vectors', 'transform_vectors', 'transform_normals', 'reflect_vectors', 'check_batch_range']
