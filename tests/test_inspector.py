#
# Varbrowse - Inspector Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varbrowse.inspector import inspect, show
from varbrowse.options import InspectOptions, configure
from varbrowse.render import render
from varbrowse.sentinels import UNDEFINED
from varbrowse.sinks import HtmlPageSink, StreamSink


# Tests ----------------------------------------------------------------------------------------------------------------

class TestInspect:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("ab", 'string<2>("ab")\n', id="str"),
            pytest.param(42, "number(42)\n", id="num"),
            pytest.param(True, "boolean(true)\n", id="bool"),
            pytest.param(None, "null\n", id="null"),
            pytest.param(UNDEFINED, "undefined\n", id="absent"),
            pytest.param([], "array<0>()\n", id="list-empty"),
        ],
    )
    def test_text(self, value, expected):
        """Entry point renders the documented text forms."""
        assert inspect(value, markup="text") == expected

    def test_matches_render(self):
        """inspect and render agree."""
        value = {"id": 7, "tags": ["a"], "missing": UNDEFINED}
        assert inspect(value) == render(value)
        assert inspect(value, options=InspectOptions.text()) == render(value, markup="text")

    def test_nested_document(self):
        """A realistic nested value renders fully."""
        value = {"id": 7, "tags": ["a"], "owner": None}
        assert inspect(value, markup="text") == (
            "object<3>(\n"
            '  ["id"] => number(7)\n'
            '  ["tags"] => array<1>(\n'
            '    [0] => string<1>("a")\n'
            "  )\n"
            '  ["owner"] => null\n'
            ")\n"
        )

    def test_default_is_html(self):
        """Default markup is HTML."""
        assert inspect(None) == "<span class='null'>null</span><br />"


class TestShow:
    def test_stream_sink(self):
        """show writes text to a stream sink and returns it."""
        buf = io.StringIO()
        out = show([1], StreamSink(buf))
        assert out == "array<1>(\n  [0] => number(1)\n)\n"
        assert buf.getvalue() == out

    def test_default_sink_stdout(self, capsys):
        """Without a sink, text goes to stdout."""
        show("x")
        assert capsys.readouterr().out == 'string<1>("x")\n'

    def test_html_sink_uses_html(self):
        """The sink's markup wins over module text config."""
        configure(preset="text")
        sink = HtmlPageSink()
        show(False, sink)
        assert sink.content == inspect(False, markup="html")

    def test_explicit_markup_overrides_sink(self):
        """An explicit markup argument overrides the sink's markup."""
        buf = io.StringIO()
        show(1, StreamSink(buf), markup="html")
        assert buf.getvalue().startswith("<span class='keyword'>")

    def test_invalid_sink(self):
        """Objects without write() are rejected."""
        with pytest.raises(TypeError, match="sink must provide write"):
            show(1, sink=object())

    def test_write_only_sink(self):
        """A sink with only write() receives module-default markup."""

        class WriteOnlySink:
            def __init__(self):
                self.chunks = []

            def write(self, markup):
                self.chunks.append(markup)

        configure(preset="text")
        sink = WriteOnlySink()
        out = show(42, sink)
        assert out == "number(42)\n"
        assert sink.chunks == [out]

    def test_explicit_options_override_sink(self):
        """Explicit options win over the sink's declared markup."""
        buf = io.StringIO()
        out = show(42, StreamSink(buf), options=InspectOptions.html())
        assert out == inspect(42, markup="html")
        assert buf.getvalue() == out
