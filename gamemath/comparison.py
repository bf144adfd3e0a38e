# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`EpsilonComparer` class, a configurable tolerance comparison of gamemath values.

Floating point results should never be compared exactly.  The comparer checks every component of two values (anything
which converts to a numpy array of the same shape, including :class:`.Vector3`, :class:`.Quaternion` and
:class:`.Matrix`) against a tolerance that is configured through :class:`EpsilonComparerOptions`::

    >>> from gamemath import EpsilonComparer, EpsilonComparerOptions, Vector3
    >>> comparer = EpsilonComparer()
    >>> comparer.compare(Vector3(1, 2, 3), Vector3(1, 2, 3.000001))
    True
    >>> strict = EpsilonComparer(options=EpsilonComparerOptions(tolerance=1e-9, relative=False))
    >>> strict.compare(Vector3(1, 2, 3), Vector3(1, 2, 3.000001))
    False
"""

from dataclasses import dataclass

import numpy as np

from gamemath._typing import ARRAY_LIKE
from gamemath.utilities.options import UserOptions
from gamemath.utilities.mixin_classes import UserOptionConfigured


@dataclass
class EpsilonComparerOptions(UserOptions):
    """
    Options for configuring the :class:`EpsilonComparer` class.
    """

    tolerance: float = 1e-5
    """
    The largest difference between two components which still counts as equal.
    """

    relative: bool = True
    """
    Whether the tolerance also scales with the magnitude of the expected component.

    When ``True`` two components are equal if ``|actual - expected| <= tolerance * (1 + |expected|)``.  When ``False``
    they are equal if ``|actual - expected| <= tolerance``.
    """


class EpsilonComparer(UserOptionConfigured[EpsilonComparerOptions], EpsilonComparerOptions):
    """
    Compares expected and computed values componentwise within a tolerance.

    The tolerance and whether it is relative are set through :class:`EpsilonComparerOptions`.  The settings may be
    changed on the instance and restored with :meth:`reset_settings`.
    """

    def __init__(self, options: EpsilonComparerOptions | None = None):
        """
        :param options: the options to configure the comparer with.  If ``None`` the defaults are used.
        """

        super().__init__(EpsilonComparerOptions, options=options)

    def _within(self, expected: ARRAY_LIKE, actual: ARRAY_LIKE) -> np.ndarray:

        expected = np.asarray(expected, dtype=np.float64)
        actual = np.asarray(actual, dtype=np.float64)

        if expected.shape != actual.shape:
            raise ValueError(f'Cannot compare values of shape {expected.shape} and {actual.shape}')

        return np.isclose(actual, expected, rtol=self.tolerance if self.relative else 0, atol=self.tolerance)

    def compare(self, expected: ARRAY_LIKE, actual: ARRAY_LIKE) -> bool:
        """
        Returns whether every component of ``actual`` is within tolerance of the matching component of ``expected``.

        :raises ValueError: if the two values do not have the same shape
        """

        return bool(self._within(expected, actual).all())

    def assert_equal(self, expected: ARRAY_LIKE, actual: ARRAY_LIKE):
        """
        Raises an :exc:`AssertionError` naming the mismatched components when :meth:`compare` would return ``False``.

        This can be used directly inside of ``unittest`` or ``pytest`` tests.
        """

        within = self._within(expected, actual)

        if not within.all():
            mismatched = np.argwhere(~np.atleast_1d(within)).tolist()
            raise AssertionError(f'{actual!r} is not equal to {expected!r} within {self.tolerance} '
                                 f'(mismatched components {mismatched})')
