"""
Varbrowse utilities shared across the package.

Contains naming and repr helpers used by the classifier, the renderer and
option validation, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    Builtin classes are never module-qualified.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the module-qualified name for non-builtin classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(b"raw")
        'bytes'
        >>> class_name(x for x in ())
        'generator'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", None) or "object"
    module = getattr(cls, "__module__", None)

    if not fully_qualified or module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def fmt_type(obj: Any) -> str:
    """Format type information for exception messages, e.g. '<int>'."""
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any) -> str:
    """Format a value as a type-value pair for exception messages, e.g. "<str: 'abc'>"."""
    return f"<{class_name(obj)}: {safe_repr(obj)}>"


def safe_repr(obj: Any) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        return repr(obj)
    except Exception as e:
        return f"<{class_name(obj)} object (repr failed: {type(e).__name__})>"
