# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the exceptions raised by gamemath.

Both exceptions derive from :class:`ValueError` so that code which already guards calls with ``except ValueError``
continues to work.
"""


class DegenerateInputError(ValueError):
    """
    Raised when an input has no well defined result and no sentinel value is documented for it.

    Examples are normalizing a zero length quaternion or vector, or dividing by a zero quaternion.
    """


class InvalidArgumentError(ValueError):
    """
    Raised when the arguments to a batch operation violate its contract.

    This is always raised before any element of the destination has been written.
    """
