"""
This module provides the :class:`UserOptions` base used to give configurable classes their default settings.
"""

from dataclasses import dataclass, fields

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    The fields of the dataclass are the defaults for the attributes of the class the options configure.  Custom
    options classes follow the naming scheme ``<class_name>Options`` and are applied with :meth:`apply_options`,
    usually through the :class:`.UserOptionConfigured` mixin.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var: float = 1e-5

        >>> class Example:
        >>>     def __init__(self, options=None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self)  # apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1e-05
    """

    def override_options(self):
        """
        This method is used for special cases when certain options should be adjusted before they are applied
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the target

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict:
        """
        The current value of each dataclass field of the options, keyed by field name.

        Attributes that are not dataclass fields are ignored.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
