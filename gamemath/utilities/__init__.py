# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the configuration machinery shared by the configurable classes of gamemath.

:mod:`.options` provides the :class:`.UserOptions` dataclass base for default settings and :mod:`.mixin_classes`
provides the :class:`.UserOptionConfigured` mixin which applies them.
"""

from gamemath.utilities.options import UserOptions
from gamemath.utilities.mixin_classes import UserOptionConfigured

__all__ = ['UserOptions', 'UserOptionConfigured']
