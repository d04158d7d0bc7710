"""
Sentinel objects for the inspector.

Python has a single "no value" object, None, which the inspector renders as
``null``. The UNDEFINED sentinel plays the role of an absent value and renders
as ``undefined``. UNSET marks keyword arguments that were not provided, so that
None stays a valid explicit argument.

All sentinels use identity checks (using 'is') rather than equality checks.

Sentinels:
    UNDEFINED: An absent value, displayed as ``undefined``
    UNSET: Represents an unprovided optional argument (distinguishes from None)

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> from varbrowse.render import render
    >>> render({"name": UNDEFINED}, markup="text")
    'object<1>(\\n  ["name"] => undefined\\n)\\n'
"""

from typing import Any, Callable, Final

__all__ = [
    'UNDEFINED',
    'UNSET',
    'UndefinedType',
    'UnsetType',
    'ifnotunset',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for all sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UndefinedType(_SentinelBase):
    """
    Sentinel type for UNDEFINED.

    Marks a slot that holds no value at all, as opposed to one explicitly
    set to None. The classifier maps it to the Absent kind.
    """
    __slots__ = ()
    _instance: 'UndefinedType | None' = None

    def __new__(cls) -> 'UndefinedType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNDEFINED")


class UnsetType(_SentinelBase):
    """
    Sentinel type for UNSET.

    Used to distinguish between 'not provided' and 'explicitly set to None'.
    """
    __slots__ = ()
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNSET")


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNDEFINED: Final[UndefinedType] = UndefinedType()
"""
Sentinel representing an absent value.

Rendered by the inspector as the ``undefined`` literal.
"""

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None, default_factory: Callable[[], Any] | None = None) -> Any:
    """
    Return value unless it is UNSET, otherwise return default.

    Args:
        value: The value to check.
        default: Value returned when value is UNSET.
        default_factory: Callable producing the default.

    Raises:
        ValueError: If both default and default_factory are provided.

    Examples:
        >>> ifnotunset(UNSET, default="html")
        'html'
        >>> ifnotunset(None, default="html") is None
        True
    """
    if value is not UNSET:
        return value
    if default_factory is not None and default is not None:
        raise ValueError("Cannot specify both default and default_factory")
    if default_factory is not None:
        return default_factory()
    return default
