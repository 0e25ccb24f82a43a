"""
cli.py — Command-line interface for nnoptions

This module resolves an option record by name, fills it from
``field=value`` pairs and prints the resulting fields. With ``--build`` it
also prints the torch module built from the record, which is a quick way to
see how a configuration maps onto ``torch.nn``.

Usage examples:
    # Defaults of a record
    nnoptions LeakyReLU

    # Broadcast kernel size, explicit stride, build the module
    nnoptions MaxPool2d kernel_size=3 stride=[2,1] --build

    # Functional record with a dtype
    nnoptions SoftmaxFunc dim=1 dtype=torch.float64

Values are parsed as Python literals; ``torch.<dtype>`` names are resolved
to the torch dtype; anything else is kept as a string.

Dependencies: argparse, torch
"""

import argparse
import ast
import logging
import sys
from typing import Any, Dict, List, Optional

import torch

from . import constants
from .exceptions import ConfigurationError, OptionsError

# Module-level logger for CLI operations
logger = logging.getLogger(__name__)


def _record_registry() -> Dict[str, type]:
    # lazy: the record modules import this package
    from .. import activation, functional, pixelshuffle, pooling
    from ..arg import is_option_record

    registry = {}
    for module in (activation, pooling, pixelshuffle, functional):
        for name, obj in vars(module).items():
            if not isinstance(obj, type) or not is_option_record(obj):
                continue
            # generic dimensional records cannot be built without a dimensionality
            if getattr(obj, '_dims', 0) is None:
                continue
            registry.setdefault(name, obj)
    return registry


def resolve_record(name: str) -> type:
    """
    Look up an option record class by name.

    Parameters
    ----------
    name : str
        Record name with or without the ``Options`` suffix, e.g.
        ``MaxPool2d``, ``MaxPool2dOptions`` or ``SoftmaxFunc``.

    Returns
    -------
    type
        The record class.

    Raises
    ------
    ConfigurationError
        If no record has that name.
    """
    registry = _record_registry()
    for candidate in (name, f"{name}Options"):
        if candidate in registry:
            return registry[candidate]
    raise ConfigurationError(
        f"unknown option record {name!r}. Available: {', '.join(sorted(registry))}"
    )


def parse_value(text: str) -> Any:
    """Parse a command-line value into a Python object."""
    if text.startswith(constants.TORCH_DTYPE_PREFIX):
        dtype = getattr(torch, text[len(constants.TORCH_DTYPE_PREFIX):], None)
        if isinstance(dtype, torch.dtype):
            return dtype
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


def parse_assignments(assignments: List[str]) -> Dict[str, Any]:
    """
    Turn ``field=value`` strings into a mapping.

    Raises
    ------
    ConfigurationError
        If an assignment has no ``=`` or an empty field name.
    """
    values = {}
    for assignment in assignments:
        key, sep, raw = assignment.partition(constants.FIELD_ASSIGNMENT_SEP)
        key = key.strip()
        if not sep or not key:
            raise ConfigurationError(f"expected field=value, got {assignment!r}")
        values[key] = parse_value(raw.strip())
    return values


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns a namespace with:
        - record (str): Option record name.
        - fields (list[str]): ``field=value`` assignments.
        - build (bool): Also build and print the torch module.
        - verbose (bool): Enable DEBUG level logging.
    """
    parser = argparse.ArgumentParser(
        prog=constants.PROG_NAME,
        description='Build an nn option record from field=value pairs and print it.',
    )
    parser.add_argument('record', help='Option record name, e.g. MaxPool2d or SoftmaxFunc')
    parser.add_argument('fields', nargs='*', metavar='field=value',
                        help='Field assignments applied at construction')
    parser.add_argument('--build', action='store_true',
                        help='Also build and print the torch.nn module')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable DEBUG level logging')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``nnoptions`` console script."""
    from ..arg import options_from_dict, options_to_dict
    from ..builders import build_module

    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=constants.LOG_FORMAT,
    )
    logger.info('Resolving record=%s fields=%s build=%s', args.record, args.fields, args.build)

    try:
        cls = resolve_record(args.record)
        record = options_from_dict(cls, parse_assignments(args.fields))
        print(cls.__name__)
        for name, value in options_to_dict(record).items():
            print(f"  {name} = {value!r}")
        if args.build:
            print(build_module(record))
    except (OptionsError, TypeError, ValueError, RuntimeError, AssertionError) as e:
        logger.error('Failed to build %s: %s', args.record, e)
        print(f"[X] {e}", file=sys.stderr)
        return 1
    return 0
