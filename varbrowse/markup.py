"""
Token stream formatters.

HTML output wraps every token in a span whose class names its category, the
same vocabulary the stylesheet in varbrowse.sinks targets:

    <span class='keyword'>number</span><span class='other'>(</span>...<br />

Plain text output concatenates token text, using a space per whitespace unit
and a newline per line break.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import html
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .options import InspectOptions, MarkupFormat, resolve_options
from .tokens import Token, TokenCategory

# Categories whose text comes from the inspected value rather than from the renderer
PAYLOAD_CATEGORIES = frozenset({
    TokenCategory.STRING,
    TokenCategory.UNKNOWN,
    TokenCategory.FUNCTION,
})


# Methods --------------------------------------------------------------------------------------------------------------

def format_tokens(tokens: Iterable[Token], options: InspectOptions | None = None) -> str:
    """
    Compose tokens into markup text according to options.markup.

    Args:
        tokens: Tokens in emission order.
        options: InspectOptions, module defaults if None.

    Returns:
        HTML or plain text markup.
    """
    opt = resolve_options(options)
    if opt.markup == MarkupFormat.TEXT:
        return to_text(tokens)
    return to_html(tokens, escape=opt.escape)


def to_html(tokens: Iterable[Token], escape: bool = True) -> str:
    """
    Compose tokens into span-tagged HTML.

    With escape=False string literals, unknown type names and function source
    are embedded as-is, so markup inside inspected strings is interpreted by
    the browser. Only pass escape=False for trusted values.
    """
    return "".join(html_token(t, escape=escape) for t in tokens)


def html_token(token: Token, escape: bool = True) -> str:
    """Return the HTML markup of a single token."""
    category = token.category
    if category is TokenCategory.LINE_BREAK:
        return "<br />"
    if category is TokenCategory.WHITESPACE:
        return "<span class='whitespace'>&nbsp;</span>"
    if category is TokenCategory.DELIMITER and token.text in ("<", ">"):
        # Markup-significant delimiters are always escaped
        text = html.escape(token.text)
    elif escape and category in PAYLOAD_CATEGORIES:
        text = html.escape(token.text, quote=False)
    else:
        text = token.text
    return f"<span class='{category.value}'>{text}</span>"


def to_text(tokens: Iterable[Token]) -> str:
    """Compose tokens into plain text; an unknown type name is separated from its keyword by a space."""
    parts = []
    for t in tokens:
        if t.category is TokenCategory.UNKNOWN:
            parts.append(" ")
        parts.append(t.text)
    return "".join(parts)
