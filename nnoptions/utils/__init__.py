"""
utils package for nnoptions

This package contains utility modules shared by the option records:
- cli: Command-line interface
- constants: Default values and logging configuration
- exceptions: Custom exception classes
- validators: Input validation utilities
"""

from . import constants
from .cli import main, parse_arguments
from .validators import InputValidator
from .exceptions import (
    OptionsError,
    ShapeMismatchError,
    InvalidDimensionalityError,
    ConfigurationError,
    UnsupportedOptionsError,
)

__all__ = [
    'constants',
    'main',
    'parse_arguments',
    'InputValidator',
    'OptionsError',
    'ShapeMismatchError',
    'InvalidDimensionalityError',
    'ConfigurationError',
    'UnsupportedOptionsError',
]
