"""
Markup tokens emitted by the renderer.

A Token is an immutable (category, text) pair. The renderer produces tokens in
emission order and a formatter from varbrowse.markup turns them into HTML or
plain text. Constructor functions below are the only way the renderer builds
tokens, and they enforce the fixed vocabulary of keywords and delimiters.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import numbers
from dataclasses import dataclass
from enum import Enum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

KEYWORDS = frozenset({"string", "number", "boolean", "array", "object", "function", "unknown"})
DELIMITERS = frozenset("<>()[]")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class TokenCategory(str, Enum):
    """Category of an emitted token; the value doubles as its HTML class name."""
    KEYWORD = "keyword"
    DELIMITER = "other"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ABSENT = "undefined"
    UNKNOWN = "unknown"
    OPERATOR = "operator"
    WHITESPACE = "whitespace"
    LINE_BREAK = "breakline"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class Token:
    """
    An atomic piece of emitted markup.

    Attributes:
        category: What the token represents.
        text: Raw token text, before any markup-specific escaping.
    """
    category: TokenCategory
    text: str = ""


# Methods --------------------------------------------------------------------------------------------------------------

def keyword(name: str) -> Token:
    """Kind keyword such as 'string' or 'array'."""
    if name not in KEYWORDS:
        raise ValueError(f"Unknown keyword {fmt_value(name)}, expected one of: {', '.join(sorted(KEYWORDS))}")
    return Token(TokenCategory.KEYWORD, name)


def delimiter(char: str) -> Token:
    """One of the delimiter characters < > ( ) [ ]"""
    if char not in DELIMITERS:
        raise ValueError(f"Unknown delimiter {fmt_value(char)}, expected one of: {' '.join(sorted(DELIMITERS))}")
    return Token(TokenCategory.DELIMITER, char)


def string_literal(text: str) -> Token:
    """Text wrapped in double quotes, embedded quotes are not escaped."""
    return Token(TokenCategory.STRING, f'"{text}"')


def number_literal(value: numbers.Number) -> Token:
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"number literal expects a number, got {fmt_type(value)}")
    return Token(TokenCategory.NUMBER, str(value))


def boolean_literal(flag: bool) -> Token:
    return Token(TokenCategory.BOOLEAN, "true" if flag else "false")


def null_literal() -> Token:
    return Token(TokenCategory.NULL, "null")


def absent_literal() -> Token:
    return Token(TokenCategory.ABSENT, "undefined")


def unknown_payload(type_name: str) -> Token:
    """Type name reported for a value no other kind matches."""
    return Token(TokenCategory.UNKNOWN, type_name)


def operator() -> Token:
    return Token(TokenCategory.OPERATOR, "=>")


def whitespace() -> Token:
    """One indentation unit."""
    return Token(TokenCategory.WHITESPACE, " ")


def line_break() -> Token:
    return Token(TokenCategory.LINE_BREAK, "\n")


def function_body(source: str) -> Token:
    """A callable's source text, embedded verbatim."""
    return Token(TokenCategory.FUNCTION, source)


# Shared immutable instances for the parameterless tokens
OPERATOR = operator()
WHITESPACE = whitespace()
LINE_BREAK = line_break()
