"""
arg.py — Option record machinery for nnoptions

This module turns a plain annotated class into an option record: a
dataclass whose fields are public attributes, each with a fluent setter
``set_<field>`` that returns the record so calls can be chained.

Fields are declared with :func:`arg`, which attaches per-field behaviour:

- ``expand``: the field holds one entry per spatial dimension. Scalars are
  broadcast and sequences of the wrong length are rejected, both at
  construction and on every later assignment.
- ``optional``: ``None`` means "absent" and is stored unchanged.
- ``derived_from``: when left unset at construction, the field copies the
  value of another field once, at construction time. Assigning ``None``
  later copies the current value of that field again.

Generic pooling records are declared once with ``@options(dimensional=True)``
and specialized with ``Record[D]``. Each specialization is created once and
cached, so ``MaxPoolOptions[2] is MaxPoolOptions[2]``.

Functions
---------
options
    Class decorator creating an option record.
arg
    Field declaration with expanding, optional and derived behaviour.
option_fields
    Ordered field names of a record or record class.
options_to_dict
    Shallow field-name to value mapping of a record.
options_from_dict
    Construct a record from a mapping of field values.
is_option_record
    Whether an object or class is an option record.
"""

import dataclasses
import logging
from dataclasses import MISSING, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .expanding_array import expanding_array
from .utils.exceptions import ConfigurationError
from .utils.validators import InputValidator

logger = logging.getLogger(__name__)

_ARG_KEY = 'nnoptions.arg'
_RECORD_MARKER = '__nnoptions_record__'

# (generic class, dims) -> specialized class
_specializations: Dict[Tuple[type, int], type] = {}


class _ArgSpec(object):
    """Per-field conversion rules attached to dataclass field metadata."""

    __slots__ = ('expand', 'dtype', 'optional', 'derived_from')

    def __init__(self, expand: bool, dtype: Callable, optional: bool,
                 derived_from: Optional[str]) -> None:
        self.expand = expand
        self.dtype = dtype
        self.optional = optional
        self.derived_from = derived_from

    def convert(self, record: type, name: str, value: Any) -> Any:
        if value is None and (self.optional or self.derived_from is not None):
            return None
        if not self.expand:
            return value
        dims = getattr(record, '_dims', None)
        if dims is None:
            raise TypeError(
                f"{record.__name__} has per-dimension fields; specialize it "
                f"first, e.g. {record.__name__}[2]"
            )
        return expanding_array(value, dims, dtype=self.dtype, name=name)


def arg(default: Any = MISSING, *, expand: bool = False, dtype: Callable = int,
        optional: bool = False, derived_from: Optional[str] = None,
        compare: bool = True) -> Any:
    """
    Declare a field of an option record.

    Parameters
    ----------
    default : Any, optional
        Default value. Omit for required fields.
    expand : bool, optional
        Whether the field holds one entry per spatial dimension.
    dtype : callable, optional
        Conversion applied to every entry of an expanding field.
    optional : bool, optional
        Whether ``None`` is a legal "absent" value.
    derived_from : str, optional
        Name of the field whose value is copied at construction time when
        this one is left unset.
    compare : bool, optional
        Whether the field takes part in record equality. Tensor fields pass
        False since tensors do not compare to a single boolean.

    Returns
    -------
    dataclasses.Field
        Field declaration carrying the conversion rules.
    """
    if derived_from is not None:
        default = None
    spec = _ArgSpec(expand, dtype, optional, derived_from)
    return field(default=default, compare=compare, metadata={_ARG_KEY: spec})


def _record_setattr(self, name: str, value: Any) -> None:
    record_field = type(self).__dataclass_fields__.get(name)
    if record_field is not None:
        spec = record_field.metadata.get(_ARG_KEY)
        if spec is not None:
            if value is None and spec.derived_from is not None and not spec.optional:
                # None re-derives; stays None only until the source is set
                value = vars(self).get(spec.derived_from)
            value = spec.convert(type(self), name, value)
    object.__setattr__(self, name, value)


def _record_post_init(self) -> None:
    for record_field in fields(self):
        spec = record_field.metadata.get(_ARG_KEY)
        if spec is None or spec.derived_from is None:
            continue
        if getattr(self, record_field.name) is None:
            setattr(self, record_field.name, getattr(self, spec.derived_from))


def _fluent_setter(name: str) -> Callable:
    def setter(self, value):
        setattr(self, name, value)
        return self

    setter.__name__ = setter.__qualname__ = f"set_{name}"
    setter.__doc__ = f"Set ``{name}`` and return this record for chaining."
    return setter


def _specialized_name(name: str, dims: int) -> str:
    for suffix in ('FuncOptions', 'Options'):
        if name.endswith(suffix):
            return f"{name[:-len(suffix)]}{dims}d{suffix}"
    return f"{name}{dims}d"


def _specialize(cls: type, dims: int) -> type:
    if cls._dims is not None:
        raise TypeError(f"{cls.__name__} is already specialized to {cls._dims} dimension(s)")
    InputValidator.validate_dims(dims)

    key = (cls, dims)
    special = _specializations.get(key)
    if special is None:
        name = _specialized_name(cls.__name__, dims)
        special = type(name, (cls,), {
            '_dims': dims,
            '__module__': cls.__module__,
            '__qualname__': name,
            '__doc__': f"``{cls.__name__}`` with {dims} spatial dimension(s).",
        })
        _specializations[key] = special
        logger.debug('Specialized %s to %s', cls.__name__, name)
    return special


def options(cls: Optional[type] = None, *, dimensional: bool = False) -> Any:
    """
    Class decorator turning an annotated class into an option record.

    Parameters
    ----------
    cls : type
        Class whose annotated attributes, declared with :func:`arg` or plain
        defaults, become the record fields.
    dimensional : bool, optional
        Whether the record is generic over the number of spatial
        dimensions. Such records gain ``Record[D]`` specialization.

    Returns
    -------
    type
        The same class, now a dataclass with fluent setters.

    Examples
    --------
    >>> @options
    ... class DropoutOptions:
    ...     p: float = arg(0.5)
    ...     inplace: bool = arg(False)
    >>> DropoutOptions().set_p(0.1).set_inplace(True)
    DropoutOptions(p=0.1, inplace=True)
    """
    def wrap(cls: type) -> type:
        cls.__post_init__ = _record_post_init
        cls = dataclasses.dataclass(cls)
        cls.__setattr__ = _record_setattr
        setattr(cls, _RECORD_MARKER, True)
        for record_field in fields(cls):
            setter_name = f"set_{record_field.name}"
            if setter_name not in cls.__dict__:
                setattr(cls, setter_name, _fluent_setter(record_field.name))
        if dimensional:
            cls._dims = None
            cls.__class_getitem__ = classmethod(_specialize)
        return cls

    if cls is None:
        return wrap
    return wrap(cls)


def is_option_record(obj: Any) -> bool:
    """Return True if ``obj`` is an option record class or instance."""
    return bool(getattr(obj, _RECORD_MARKER, False))


def option_fields(record: Any) -> List[str]:
    """Return the ordered field names of a record or record class."""
    return [record_field.name for record_field in fields(record)]


def options_to_dict(record: Any) -> Dict[str, Any]:
    """
    Return a shallow mapping of field names to values.

    Tensor values are returned as-is, not copied.
    """
    return {record_field.name: getattr(record, record_field.name)
            for record_field in fields(record)}


def options_from_dict(cls: type, mapping: Mapping[str, Any]) -> Any:
    """
    Construct a record of type ``cls`` from a mapping of field values.

    Parameters
    ----------
    cls : type
        Option record class, specialized if it is dimensional.
    mapping : Mapping[str, Any]
        Field values keyed by field name.

    Returns
    -------
    Any
        The constructed record.

    Raises
    ------
    ConfigurationError
        If ``cls`` is not a record, or the mapping has unknown keys or lacks
        required ones.
    ShapeMismatchError
        If a per-dimension value has the wrong length.
    """
    if not is_option_record(cls) or not isinstance(cls, type):
        raise ConfigurationError(f"{cls!r} is not an option record class")
    required = [record_field.name for record_field in fields(cls)
                if record_field.default is MISSING and record_field.default_factory is MISSING]
    InputValidator.validate_mapping_keys(mapping, option_fields(cls), required, cls.__name__)
    record = cls(**mapping)
    logger.debug('Built %r from mapping', record)
    return record
