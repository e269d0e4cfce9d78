"""Test writing JSON text sequence records."""

import io
import re

import pytest

from jsonseq import Encoder, RecordWriter, dump, load, record_value, write_record
from jsonseq.scanner import iter_records


RS = b"\x1e"

# Independent record slicing, just for testing
SLICER = re.compile(b"\x1e([^\x1e\n]*)\n")


class FlushTracker(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushed = 0

    def flush(self):
        self.flushed += 1
        super().flush()


class BrokenSink:
    def write(self, data):
        raise OSError("disk full")


def test_write_record():
    """Each record is framed by RS and LF."""
    sink = io.BytesIO()
    for _ in range(3):
        write_record(sink, b'{"s":"trivial"}')

    records = SLICER.findall(sink.getvalue())
    assert records == [b'{"s":"trivial"}'] * 3
    assert sink.getvalue() == (RS + b'{"s":"trivial"}\n') * 3


def test_write_record_propagates_sink_errors():
    with pytest.raises(OSError):
        write_record(BrokenSink(), b"1")


class TestRecordWriter:

    def test_prefixes_each_write(self):
        sink = io.BytesIO()
        writer = RecordWriter(sink)
        assert writer.write(b"[1]\n") == 5
        assert writer.write(b"2\n") == 3
        assert sink.getvalue() == RS + b"[1]\n" + RS + b"2\n"

    def test_caller_supplies_line_feed(self):
        sink = io.BytesIO()
        RecordWriter(sink).write(b"true")
        assert sink.getvalue() == RS + b"true"

    def test_flush(self):
        sink = FlushTracker()
        RecordWriter(sink).flush()
        assert sink.flushed == 1

    def test_flush_without_sink_flush(self):
        class Sink:
            def write(self, data):
                pass

        RecordWriter(Sink()).flush()


class TestEncoder:

    def test_encode_values(self):
        sink = io.BytesIO()
        encoder = Encoder(sink)
        encoder.encode("Test")
        encoder.encode(123.456)
        encoder.encode({"Id": 1})
        assert sink.getvalue() == RS + b'"Test"\n' + RS + b"123.456\n" + RS + b'{"Id":1}\n'

    def test_escape_html(self):
        sink = io.BytesIO()
        Encoder(sink).encode("<a&b>")
        assert sink.getvalue() == RS + b'"\\u003ca\\u0026b\\u003e"\n'

    def test_escape_html_disabled(self):
        sink = io.BytesIO()
        encoder = Encoder(sink)
        encoder.set_escape_html(False)
        encoder.encode("<a&b>")
        assert sink.getvalue() == RS + b'"<a&b>"\n'

    def test_indent_with_prefix(self):
        sink = io.BytesIO()
        encoder = Encoder(sink)
        encoder.set_indent(">", "  ")
        encoder.encode({"a": [1]})
        assert sink.getvalue() == RS + b'{\n>  "a": [\n>    1\n>  ]\n>}\n'

    def test_prefix_is_not_html_escaped(self):
        """Only the JSON text is escaped, never the line prefix."""
        sink = io.BytesIO()
        encoder = Encoder(sink)
        encoder.set_indent("<", "  ")
        encoder.encode({"a": "&"})
        assert sink.getvalue() == RS + b'{\n<  "a": "\\u0026"\n<}\n'

    def test_set_indent_empty_is_compact(self):
        sink = io.BytesIO()
        encoder = Encoder(sink, indent=2)
        encoder.set_indent("", "")
        encoder.encode({"a": 1})
        assert sink.getvalue() == RS + b'{"a":1}\n'

    def test_sort_keys(self):
        sink = io.BytesIO()
        Encoder(sink, sort_keys=True).encode({"b": 1, "a": 2})
        assert sink.getvalue() == RS + b'{"a":2,"b":1}\n'

    def test_non_ascii(self):
        sink = io.BytesIO()
        Encoder(sink).encode("café")
        assert sink.getvalue() == RS + '"café"\n'.encode("utf-8")

        sink = io.BytesIO()
        Encoder(sink, ensure_ascii=True).encode("café")
        assert sink.getvalue() == RS + b'"caf\\u00e9"\n'

    def test_unserializable_writes_nothing(self):
        sink = io.BytesIO()
        with pytest.raises(TypeError):
            Encoder(sink).encode(object())
        assert sink.getvalue() == b""


@pytest.mark.parametrize("values", [
    [{"id": 1}, [1, 2, 3], "text"],
    [0, -1.5, 12341234, True, False, None],
    [{}, [], "", {"nested": {"deep": [None, {"x": "<&>"}]}}],
    ["café", "line\nbreak", "sep\u001einside"],
])
def test_dump_then_load(values):
    """Everything written decodes back, scalars included."""
    sink = io.BytesIO()
    dump(values, sink)
    assert list(load(io.BytesIO(sink.getvalue()))) == values


def test_dump_with_indent():
    sink = io.BytesIO()
    dump([{"a": 1}, [2]], sink, indent=2)
    assert list(load(io.BytesIO(sink.getvalue()))) == [{"a": 1}, [2]]


@pytest.mark.parametrize("text", [b'{"a":1}', b"[1, 2]", b'"s"', b"12.5", b"null", b"false"])
def test_write_record_then_classify(text):
    """A written record splits into one token whose value is the original text."""
    sink = io.BytesIO()
    write_record(sink, text)
    tokens = list(iter_records(sink.getvalue()))
    assert len(tokens) == 1
    assert record_value(tokens[0]) == (text, True)
