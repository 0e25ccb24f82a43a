"""
exceptions.py — Custom exception classes for nnoptions

This module defines the exception classes raised by the option records and
the helpers around them. Option records fail at construction only when a
per-dimension value has the wrong shape; every other misuse is left to the
torch layer or functional call that consumes the record.
"""


class OptionsError(Exception):
    """Base exception for all nnoptions errors.

    Catching this exception will catch every custom error raised by the
    package.
    """
    pass


class ShapeMismatchError(OptionsError, ValueError):
    """Raised when a per-dimension sequence has the wrong length.

    This exception is raised when:
    - A 2-D record is given a kernel size, stride, padding or output size
      with one or three entries
    - An optional per-dimension field is assigned a sequence that does not
      match the record's dimensionality
    """
    pass


class InvalidDimensionalityError(OptionsError, ValueError):
    """Raised when a generic record is specialized with a bad dimensionality.

    Dimensionality must be an integer between 1 and 3.
    """
    pass


class ConfigurationError(OptionsError):
    """Raised when a record cannot be built from external configuration.

    This exception is raised when:
    - A mapping names a field the record does not have
    - A mapping omits a required field
    - A record name given on the command line is unknown
    """
    pass


class UnsupportedOptionsError(OptionsError, TypeError):
    """Raised when a record has no module or functional counterpart in torch."""
    pass
