"""
Varbrowse value classifier.

Maps an arbitrary Python value to exactly one Kind. Classification happens once
per value, the renderer then dispatches on the Kind alone. The tests run in a
fixed priority order since the structural checks overlap: bool is an int,
classes and callable objects may also be mappings or sequences, and any object
with an instance __dict__ looks like a mapping of its attributes.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import numbers
import textwrap
import types
import warnings

from enum import Enum, unique
from typing import Any, Tuple

# Local ----------------------------------------------------------------------------------------------------------------
from .options import InspectOptions, OnError, get_options
from .sentinels import UNDEFINED
from .utils import class_name, safe_repr

_TEXTUAL_TYPES = (str, bytes, bytearray)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(str, Enum):
    """
    The nine value kinds in dispatch priority order.
    """
    STR = "string"
    NUM = "number"
    ABSENT = "undefined"
    BOOL = "boolean"
    CALLABLE = "function"
    LIST = "array"
    NULL = "null"
    MAPPING = "object"
    UNKNOWN = "unknown"


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: Any, options: InspectOptions | None = None) -> Kind:
    """
    Classify a value into one of the nine kinds.

    Total over all Python values: no user code (__len__, __iter__, properties)
    is invoked, so classification itself never raises.

    Args:
        value: Any Python object.
        options: Controls whether attribute-carrying objects count as mappings.
                 Module defaults are used if None.

    Returns:
        The Kind of value.

    Dispatch Logic:
        - str → STR
        - numbers.Number except bool → NUM
        - UNDEFINED sentinel → ABSENT
        - bool → BOOL
        - callable() → CALLABLE
        - non-textual Sequence or Set → LIST
        - None → NULL
        - Mapping, or object with instance __dict__ (if options.expand_objects) → MAPPING
        - anything else → UNKNOWN

    Examples:
        >>> classify("ab")
        <Kind.STR: 'string'>
        >>> classify(True)
        <Kind.BOOL: 'boolean'>
        >>> classify(b"ab")
        <Kind.UNKNOWN: 'unknown'>
    """
    if isinstance(value, str):
        return Kind.STR
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return Kind.NUM
    if value is UNDEFINED:
        return Kind.ABSENT
    if isinstance(value, bool):
        return Kind.BOOL
    if callable(value):
        return Kind.CALLABLE
    if isinstance(value, (abc.Sequence, abc.Set)) and not isinstance(value, _TEXTUAL_TYPES):
        return Kind.LIST
    if value is None:
        return Kind.NULL
    if isinstance(value, abc.Mapping):
        return Kind.MAPPING
    if _is_attribute_object(value, options or get_options()):
        return Kind.MAPPING
    return Kind.UNKNOWN


def list_items(value: abc.Sequence | abc.Set) -> list[Any]:
    """Return elements of a LIST value in iteration order."""
    return list(value)


def mapping_items(value: Any, options: InspectOptions | None = None) -> list[Tuple[str, Any]]:
    """
    Return (key, value) pairs of a MAPPING value in iteration order.

    Keys are converted with str(). For attribute objects the instance __dict__
    is used, skipping names starting with '_' unless options.include_private.
    """
    opt = options or get_options()
    if isinstance(value, abc.Mapping):
        return [(str(k), v) for k, v in value.items()]

    return [
        (name, attr)
        for name, attr in vars(value).items()
        if opt.include_private or not str(name).startswith("_")
    ]


def function_source(fn: Any, options: InspectOptions | None = None) -> str:
    """
    Return the source text of a callable.

    Source is taken from inspect.getsource(), dedented and stripped of trailing
    whitespace. Builtins, C extensions, callables defined in a REPL and callable
    instances have no retrievable source; for them repr() is used, subject to
    options.on_error.

    Raises:
        OSError, TypeError: Only when options.on_error is "raise".
    """
    opt = options or get_options()
    target = fn if _has_source_object(fn) else type(fn)

    try:
        return textwrap.dedent(inspect.getsource(target)).rstrip()
    except (OSError, TypeError) as e:
        if opt.on_error == OnError.RAISE:
            raise
        elif opt.on_error == OnError.WARN:
            warnings.warn(
                f"Failed to get source of {class_name(fn, fully_qualified=True)}: {type(e).__name__}: {e}",
                RuntimeWarning,
                stacklevel=2
            )
    return safe_repr(fn)


# Private Methods ------------------------------------------------------------------------------------------------------

def _has_source_object(fn: Any) -> bool:
    """Check whether inspect.getsource() accepts fn directly."""
    return inspect.isroutine(fn) or inspect.isclass(fn)


def _is_attribute_object(value: Any, options: InspectOptions) -> bool:
    """Check if value is a plain object whose instance attributes can be listed."""
    if not options.expand_objects or isinstance(value, types.ModuleType):
        return False
    try:
        return isinstance(vars(value), dict)
    except Exception:
        return False

