# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
gamemath provides 3D vectors, quaternions, and 4x4 matrices for rotating and transforming points and directions.

The value classes :class:`.Vector3`, :class:`.Quaternion`, and :class:`.Matrix` are the usual entry points.  The array
level routines they are built on live in :mod:`gamemath.core` and operate directly on (batches of) numpy arrays, while
:mod:`gamemath.math_helper` provides the scalar interpolation helpers and constants.
"""

from gamemath import core, math_helper

from gamemath.errors import DegenerateInputError, InvalidArgumentError
from gamemath.vector3 import Vector3
from gamemath.matrix import Matrix
from gamemath.quaternion import Quaternion
from gamemath.comparison import EpsilonComparer, EpsilonComparerOptions

__all__ = ['core', 'math_helper', 'DegenerateInputError', 'InvalidArgumentError', 'Vector3', 'Matrix', 'Quaternion',
           'EpsilonComparer', 'EpsilonComparerOptions']
