"""
Varbrowse renderer.

Walks a value depth-first and emits the token stream described below; the
formatters in varbrowse.markup turn the stream into HTML or plain text.

    string<2>("ab")
    number(42)
    boolean(true)
    null
    undefined
    array<2>(
      [0] => number(1)
      [1] => string<1>("x")
    )
    object<1>(
      ["key"] => array<0>()
    )
    function(
      lambda x: x
    )
    unknown bytes

Empty arrays close inline, empty objects always break the line before the
closing parenthesis. Cyclic values recurse until RecursionError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from . import tokens as T
from .kinds import Kind, classify, function_source, list_items, mapping_items
from .markup import format_tokens
from .options import InspectOptions, resolve_options
from .scope import RenderContext
from .tokens import Token
from .utils import class_name, fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def render(value: Any, *, options: InspectOptions | None = None, **kwargs: Any) -> str:
    """
    Render a value into markup text.

    Args:
        value: Any Python object.
        options: InspectOptions for this call. Module defaults (see configure()) are used if None.
        **kwargs: InspectOptions fields overriding options for this call, e.g. markup="text".

    Returns:
        Composed markup text, ready to be handed to a Sink.

    Raises:
        TypeError, ValueError: Invalid options.
        RecursionError: value contains a reference cycle.

    Examples:
        >>> render([1, "x"], markup="text")
        'array<2>(\\n  [0] => number(1)\\n  [1] => string<1>("x")\\n)\\n'
    """
    opt = resolve_options(options, **kwargs)
    return format_tokens(iter_tokens(value, options=opt), options=opt)


def iter_tokens(value: Any,
                context: RenderContext | None = None,
                options: InspectOptions | None = None) -> Iterator[Token]:
    """
    Yield tokens for value in emission order.

    Args:
        value: Any Python object.
        context: Nesting state of the current call. A fresh RenderContext is
                 created when None, so every top-level call is independent.
        options: InspectOptions, module defaults if None.

    Yields:
        Token instances; depth of context is back to its starting value once
        the iterator is exhausted or closed.
    """
    if not isinstance(context, (RenderContext, type(None))):
        raise TypeError(f"context must be a RenderContext instance, but found {fmt_type(context)}")

    opt = resolve_options(options)
    ctx = context or RenderContext(indent=opt.indent)
    yield from _expr(value, ctx, opt)


# Private Methods ------------------------------------------------------------------------------------------------------

def _expr(value: Any, ctx: RenderContext, opt: InspectOptions) -> Iterator[Token]:
    """Dispatch on the kind of value."""
    kind = classify(value, opt)

    if kind is Kind.STR:
        yield from _string(value)
    elif kind is Kind.NUM:
        yield from _number(value)
    elif kind is Kind.ABSENT:
        yield T.absent_literal()
        yield T.LINE_BREAK
    elif kind is Kind.BOOL:
        yield from _boolean(value)
    elif kind is Kind.CALLABLE:
        yield from _function(value, ctx, opt)
    elif kind is Kind.LIST:
        yield from _array(list_items(value), ctx, opt)
    elif kind is Kind.NULL:
        yield T.null_literal()
        yield T.LINE_BREAK
    elif kind is Kind.MAPPING:
        yield from _object(mapping_items(value, opt), ctx, opt)
    else:
        yield T.keyword("unknown")
        yield T.unknown_payload(class_name(value))
        yield T.LINE_BREAK


def _arity(n: int) -> Iterator[Token]:
    yield T.delimiter("<")
    yield T.number_literal(n)
    yield T.delimiter(">")


def _indent(ctx: RenderContext) -> Iterator[Token]:
    for _ in range(ctx.indent_width()):
        yield T.WHITESPACE


def _entry_arrow() -> Iterator[Token]:
    yield T.WHITESPACE
    yield T.OPERATOR
    yield T.WHITESPACE


def _string(value: str) -> Iterator[Token]:
    yield T.keyword("string")
    yield from _arity(len(value))
    yield T.delimiter("(")
    yield T.string_literal(value)
    yield T.delimiter(")")
    yield T.LINE_BREAK


def _number(value: Any) -> Iterator[Token]:
    yield T.keyword("number")
    yield T.delimiter("(")
    yield T.number_literal(value)
    yield T.delimiter(")")
    yield T.LINE_BREAK


def _boolean(value: bool) -> Iterator[Token]:
    yield T.keyword("boolean")
    yield T.delimiter("(")
    yield T.boolean_literal(value)
    yield T.delimiter(")")
    yield T.LINE_BREAK


def _function(value: Any, ctx: RenderContext, opt: InspectOptions) -> Iterator[Token]:
    yield T.keyword("function")
    yield T.delimiter("(")
    yield T.LINE_BREAK

    with ctx.scope():
        yield from _indent(ctx)
        yield T.function_body(function_source(value, opt))
        yield T.LINE_BREAK

    yield from _indent(ctx)
    yield T.delimiter(")")
    yield T.LINE_BREAK


def _array(items: list[Any], ctx: RenderContext, opt: InspectOptions) -> Iterator[Token]:
    yield T.keyword("array")
    yield from _arity(len(items))
    yield T.delimiter("(")

    # Empty arrays close on the same line
    if not items:
        yield T.delimiter(")")
        yield T.LINE_BREAK
        return

    yield T.LINE_BREAK
    with ctx.scope():
        for index, item in enumerate(items):
            yield from _indent(ctx)
            yield T.delimiter("[")
            yield T.number_literal(index)
            yield T.delimiter("]")
            yield from _entry_arrow()
            yield from _expr(item, ctx, opt)

    yield from _indent(ctx)
    yield T.delimiter(")")
    yield T.LINE_BREAK


def _object(items: list[tuple[str, Any]], ctx: RenderContext, opt: InspectOptions) -> Iterator[Token]:
    yield T.keyword("object")
    yield from _arity(len(items))
    yield T.delimiter("(")
    # Unlike arrays, always break the line, even with no keys
    yield T.LINE_BREAK

    with ctx.scope():
        for key, item in items:
            yield from _indent(ctx)
            yield T.delimiter("[")
            yield T.string_literal(key)
            yield T.delimiter("]")
            yield from _entry_arrow()
            yield from _expr(item, ctx, opt)

    yield from _indent(ctx)
    yield T.delimiter(")")
    yield T.LINE_BREAK
