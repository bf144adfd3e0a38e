"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be configured using
:class:`.UserOptions`-derived classes while keeping the ability to reset to the original configuration.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from dataclasses import dataclass

        from gamemath.utilities.options import UserOptions
        from gamemath.utilities.mixin_classes.user_option_configured import UserOptionConfigured

        @dataclass
        class MyOptions(UserOptions):
            tolerance: float = 1e-5

        class MyComparer(UserOptionConfigured[MyOptions], MyOptions):
            def __init__(self, options: MyOptions | None = None):
                super().__init__(MyOptions, options=options)

        my_comparer = MyComparer()
        my_comparer.tolerance = 1e-3  # make a change
        my_comparer.reset_settings()  # back to 1e-5

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order due to Method Resolution Order
    (MRO) requirements.
"""

import copy

from typing import Generic, TypeVar

from gamemath.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    The options given at initialization (or the defaults of ``options_type`` when none are given) are applied as
    attributes of the instance and a deep copy of them is kept so that :meth:`reset_settings` can restore them after
    the attributes have been changed.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the instance to the state it was originally initialized with.
        """

        self.original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The original configuration options.
        """
        return self._original_options
