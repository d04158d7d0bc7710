"""
Varbrowse entry points.

Renders arbitrary Python values as nested, indentation-aware, type-annotated
markup for debugging, as span-tagged HTML or plain text.

    >>> from varbrowse.inspector import inspect
    >>> print(inspect({"id": 7, "tags": ["a"]}, markup="text"), end="")
    object<2>(
      ["id"] => number(7)
      ["tags"] => array<1>(
        [0] => string<1>("a")
      )
    )
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import InspectOptions
from .render import render
from .sentinels import UNSET, ifnotunset
from .sinks import Sink, StreamSink
from .utils import fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def inspect(value: Any, *, options: InspectOptions | None = None, **kwargs: Any) -> str:
    """
    Inspect any value and return its nested, type-annotated markup.

    Main entry point. Performs no I/O; hand the result to a Sink or use show().

    Args:
        value: Any Python object.
        options: InspectOptions for this call, module defaults (see configure()) if None.
        **kwargs: InspectOptions fields overriding options for this call.

    Returns:
        HTML markup by default, plain text with markup="text".

    Examples:
        >>> inspect("ab", markup="text")
        'string<2>("ab")\\n'
        >>> inspect({"a": [], "b": None}, markup="text")
        'object<2>(\\n  ["a"] => array<0>()\\n  ["b"] => null\\n)\\n'
        >>> inspect(42)
        "<span class='keyword'>number</span><span class='other'>(</span><span class='number'>42</span><span class='other'>)</span><br />"
    """
    return render(value, options=options, **kwargs)


def show(value: Any, sink: Sink | None = None, *, options: InspectOptions | None = None, **kwargs: Any) -> str:
    """
    Render a value in the sink's markup and write it to the sink.

    Args:
        value: Any Python object.
        sink: Any object with a write(markup) method, a StreamSink on stdout if None.
              A markup attribute, when present, names the markup the sink displays.
        options: InspectOptions for this call. When None, module defaults are used
                 with markup taken from the sink if it declares one.
        **kwargs: InspectOptions fields overriding options for this call.

    Returns:
        The markup written to the sink.
    """
    sink = sink if sink is not None else StreamSink()
    if not callable(getattr(sink, "write", None)):
        raise TypeError(f"sink must provide a write() method, but found {fmt_type(sink)}")

    if options is None:
        kwargs["markup"] = ifnotunset(kwargs.get("markup", UNSET), default=getattr(sink, "markup", UNSET))
    markup = inspect(value, options=options, **kwargs)
    sink.write(markup)
    return markup
