"""
Varbrowse inspection options.

InspectOptions controls how values are classified and how the rendered token
stream is turned into markup. Module-level defaults are managed with
configure(), get_options() and reset(); an explicit options argument always
takes precedence over them.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, fields, replace as dataclasses_replace
from enum import Enum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class MarkupFormat(str, Enum):
    """
    Output markup produced from the token stream:
        - "html": span-tagged markup for a document view
        - "text": plain text for terminals and logs
    """
    HTML = "html"
    TEXT = "text"


@unique
class OnError(str, Enum):
    """
    Policy for failures while extracting a callable's source text:
        - "ignore": fall back to repr() silently
        - "warn": emit a RuntimeWarning, then fall back to repr()
        - "raise": propagate the original exception
    """
    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"


@dataclass(frozen=True)
class InspectOptions:
    """
    Configuration options for value inspection.

    Attributes:
        markup: Output markup, "html" or "text".
        indent: Whitespace units per nesting level (default: 2).
        escape: HTML-escape string literals, mapping keys, unknown type names and
                function source when markup is "html". Has no effect on "text".
        expand_objects: Render objects carrying an instance __dict__ as mappings
                of their attributes. When False such objects are Unknown.
        include_private: Include attributes starting with "_" for expanded objects.
        on_error: Policy for callables whose source cannot be retrieved,
                one of "ignore", "warn", "raise".

    Class Methods:
        html(): Defaults, span-tagged HTML with escaping.
        text(): Plain text output.
        debug(): Plain text, private attributes shown, source failures warned.

    Examples:
        >>> opts = InspectOptions.text().merge(indent=4)
        >>> opts.markup, opts.indent
        (<MarkupFormat.TEXT: 'text'>, 4)
    """
    markup: MarkupFormat = MarkupFormat.HTML
    indent: int = 2
    escape: bool = True
    expand_objects: bool = True
    include_private: bool = False
    on_error: OnError = OnError.IGNORE

    def __post_init__(self) -> None:
        """Validate field types and normalize enum-valued fields."""
        object.__setattr__(self, "markup", _as_enum(MarkupFormat, self.markup, "markup"))
        object.__setattr__(self, "on_error", _as_enum(OnError, self.on_error, "on_error"))

        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError(f"InspectOptions.indent must be an int, got {fmt_type(self.indent)}")
        if self.indent < 0:
            raise ValueError(f"InspectOptions.indent must be >=0, but got {fmt_value(self.indent)}")

        for name in ("escape", "expand_objects", "include_private"):
            val = getattr(self, name)
            if not isinstance(val, bool):
                raise TypeError(f"InspectOptions.{name} must be a bool, got {fmt_type(val)}")

    # Class Methods ------------------------------------

    @classmethod
    def html(cls) -> "InspectOptions":
        """Create options producing escaped, span-tagged HTML."""
        return cls()

    @classmethod
    def text(cls) -> "InspectOptions":
        """Create options producing plain text."""
        return cls(markup=MarkupFormat.TEXT)

    @classmethod
    def debug(cls) -> "InspectOptions":
        """Create plain text options showing private attributes and warning on source failures."""
        return cls(markup=MarkupFormat.TEXT, include_private=True, on_error=OnError.WARN)

    # Methods ------------------------------------------

    def merge(self, **kwargs: Any) -> "InspectOptions":
        """
        Return a validated copy with the given fields replaced.

        Arguments equal to UNSET are ignored, so callers can forward optional
        keyword arguments without filtering them first.

        Raises:
            TypeError: If an unknown option name is given.
        """
        names = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - names)
        if unknown:
            raise TypeError(f"Unknown InspectOptions field(s): {', '.join(unknown)}")
        changes = {k: v for k, v in kwargs.items() if v is not UNSET}
        if not changes:
            return self
        return dataclasses_replace(self, **changes)


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    """Coerce a str or enum member to enum_cls, raising a descriptive error otherwise."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise TypeError(f"InspectOptions.{name} must be a str, got {fmt_type(value)}")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"InspectOptions.{name} must be one of: {allowed}, but got {fmt_value(value)}") from None


# Module Config --------------------------------------------------------------------------------------------------------

_PRESETS = {
    "default": InspectOptions,
    "html": InspectOptions.html,
    "text": InspectOptions.text,
    "debug": InspectOptions.debug,
}

_options: InspectOptions = InspectOptions()


def configure(preset: str | None = None, **kwargs: Any) -> InspectOptions:
    """
    Update module-level default options.

    Args:
        preset: One of "default", "html", "text", "debug". When None, the current
                module defaults are used as the base.
        **kwargs: InspectOptions fields applied on top of the base.

    Returns:
        The new module-level options.

    Raises:
        ValueError: If preset is not a known preset name.
        TypeError: If an unknown option name is given.

    Examples:
        >>> configure(preset="text", indent=4).indent
        4
        >>> configure(escape=False).indent  # incremental update keeps indent=4
        4
    """
    global _options

    if preset is None:
        base = _options
    elif preset in _PRESETS:
        base = _PRESETS[preset]()
    else:
        raise ValueError(f"Unknown preset {fmt_value(preset)}, expected one of: {', '.join(_PRESETS)}")

    _options = base.merge(**kwargs)
    return _options


def get_options() -> InspectOptions:
    """Return module-level default options."""
    return _options


def reset() -> InspectOptions:
    """Restore module-level default options."""
    global _options
    _options = InspectOptions()
    return _options


def resolve_options(options: InspectOptions | None = None, **kwargs: Any) -> InspectOptions:
    """
    Return options to use for a single call: explicit options or module defaults, with kwargs merged.

    Raises:
        TypeError: If options is not an InspectOptions instance or None.
    """
    if not isinstance(options, (InspectOptions, type(None))):
        raise TypeError(f"options must be an InspectOptions instance, but found {fmt_type(options)}")
    return (options or _options).merge(**kwargs)
