"""
Display surfaces for inspector output.

A Sink receives finished markup and makes it visible verbatim. The inspector
core never performs I/O itself; show() renders a value in the sink's preferred
markup and hands the text over.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import html
import os
import sys
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .options import MarkupFormat
from .utils import fmt_type

DEFAULT_STYLESHEET = """\
.varbrowse { font-family: monospace; }
.varbrowse .keyword { color: #0000aa; font-weight: bold; }
.varbrowse .other { color: #555555; }
.varbrowse .string { color: #008800; }
.varbrowse .number { color: #aa5500; }
.varbrowse .boolean { color: #aa00aa; }
.varbrowse .null, .varbrowse .undefined { color: #888888; font-style: italic; }
.varbrowse .unknown { color: #aa0000; }
.varbrowse .operator { color: #555555; }
.varbrowse .function { white-space: pre; color: #333333; }
"""


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class Sink(Protocol):
    """
    Anything that accepts inspector markup.

    Attributes:
        markup: Markup format the sink displays, "html" or "text".
    """
    markup: MarkupFormat

    def write(self, markup: str) -> None:
        ...


class StreamSink:
    """
    Writes markup immediately to a text stream, stdout by default.

    Examples:
        >>> sink = StreamSink()
        >>> sink.write('number(42)\\n')
        number(42)
    """

    def __init__(self, stream: IO[str] | None = None, markup: MarkupFormat | str = MarkupFormat.TEXT) -> None:
        self.stream = stream
        self.markup = MarkupFormat(markup)

    def write(self, markup: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(markup)
        stream.flush()


class HtmlPageSink:
    """
    Collects HTML markup and places it into a dedicated container element of a standalone page.

    Args:
        element_id: id attribute of the container element.
        title: Page title.
        stylesheet: CSS embedded into the page head, DEFAULT_STYLESHEET if None.

    Examples:
        >>> from varbrowse.inspector import show
        >>> sink = HtmlPageSink()
        >>> _ = show(None, sink)
        >>> sink.content
        "<span class='null'>null</span><br />"
        >>> sink.save("inspect.html")
        PosixPath('inspect.html')
    """

    markup = MarkupFormat.HTML

    def __init__(self, element_id: str = "varbrowse", title: str = "varbrowse", stylesheet: str | None = None) -> None:
        if not isinstance(element_id, str) or not element_id:
            raise ValueError(f"element_id must be a non-empty str, but found {fmt_type(element_id)}")
        self.element_id = element_id
        self.title = title
        self.stylesheet = DEFAULT_STYLESHEET if stylesheet is None else stylesheet
        self._chunks: list[str] = []

    def write(self, markup: str) -> None:
        self._chunks.append(markup)

    def clear(self) -> None:
        """Drop all collected markup."""
        self._chunks.clear()

    @property
    def content(self) -> str:
        """Collected markup in write order."""
        return "".join(self._chunks)

    def page(self) -> str:
        """Return a complete HTML document with the collected markup inside the container element."""
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            "<meta charset='utf-8' />\n"
            f"<title>{html.escape(self.title)}</title>\n"
            f"<style>\n{self.stylesheet}</style>\n"
            "</head>\n"
            "<body>\n"
            f"<div id='{html.escape(self.element_id)}' class='varbrowse'>{self.content}</div>\n"
            "</body>\n"
            "</html>\n"
        )

    def save(self, path: str | os.PathLike[str]) -> Path:
        """Write the page to path and return it as a Path."""
        path = Path(path)
        path.write_text(self.page(), encoding="utf-8")
        return path
