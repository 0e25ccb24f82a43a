"""
validators.py — Input validation utilities for nnoptions

This module provides the few checks option records perform themselves: the
dimensionality of a generic record specialization, the numeric type of a
per-dimension entry, and the keys of a mapping used to build a record.
Cross-field checks such as bounds ordering or head divisibility are not
performed here; the torch layer consuming a record performs them.

Classes
-------
InputValidator
    Static methods for validating dimensionalities, numeric entries and
    configuration mappings.
"""

import logging
import numbers
from typing import Any, Iterable, Mapping

from . import constants
from .exceptions import InvalidDimensionalityError, ConfigurationError

logger = logging.getLogger(__name__)


class InputValidator(object):
    """Input validation helper class."""

    @staticmethod
    def validate_dims(dims: Any) -> None:
        """Validate the dimensionality of a generic record specialization.

        Parameters
        ----------
        dims : Any
            Requested dimensionality.

        Raises
        ------
        InvalidDimensionalityError
            If dims is not an integer in the supported range.
        """
        if isinstance(dims, bool) or not isinstance(dims, numbers.Integral):
            raise InvalidDimensionalityError(
                f"dimensionality must be an integer, got {type(dims).__name__}"
            )
        if dims not in constants.SUPPORTED_DIMS:
            raise InvalidDimensionalityError(
                f"dimensionality must be between {constants.MIN_DIMS} and "
                f"{constants.MAX_DIMS}, got {dims}"
            )

    @staticmethod
    def validate_number(value: Any, name: str) -> None:
        """Validate that a per-dimension entry is a real number.

        Booleans are rejected even though Python treats them as integers.

        Parameters
        ----------
        value : Any
            Value to validate.
        name : str
            Name of the field for error messages.

        Raises
        ------
        TypeError
            If value is not a real number.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"{name} entries must be numbers, got {type(value).__name__}"
            )

    @staticmethod
    def validate_integral(value: Any, name: str) -> None:
        """Validate that a per-dimension entry has an integral value.

        Floats such as ``3.0`` pass; ``2.7`` does not.

        Raises
        ------
        TypeError
            If value is not a number or has a fractional part.
        """
        InputValidator.validate_number(value, name)
        if not isinstance(value, numbers.Integral) and not float(value).is_integer():
            raise TypeError(
                f"{name} entries must be integers, got {value!r}"
            )

    @staticmethod
    def validate_mapping_keys(mapping: Mapping[str, Any], allowed: Iterable[str],
                              required: Iterable[str], record: str) -> None:
        """Validate the keys of a mapping used to construct a record.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Field values keyed by field name.
        allowed : Iterable[str]
            Every field name the record accepts.
        required : Iterable[str]
            Field names with no default.
        record : str
            Record class name for error context.

        Raises
        ------
        ConfigurationError
            If the mapping has unknown keys or lacks required ones.
        """
        allowed = list(allowed)
        unknown = [k for k in mapping if k not in allowed]
        if unknown:
            logger.error('[%s] Unknown fields: %s', record, ', '.join(unknown))
            raise ConfigurationError(
                f"[{record}] unknown fields: {', '.join(unknown)}. "
                f"Available fields: {', '.join(allowed)}"
            )
        missing = [k for k in required if k not in mapping]
        if missing:
            logger.error('[%s] Missing required fields: %s', record, ', '.join(missing))
            raise ConfigurationError(
                f"[{record}] missing required fields: {', '.join(missing)}"
            )
