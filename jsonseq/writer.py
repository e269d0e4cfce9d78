"""
Writer - Emits JSON text sequence records.

Each record is written as RS + JSON text + LF.
"""

import json as json_module
from typing import Any, Iterable, Optional, Union

from .constants import LF_BYTE, RS_BYTE


def write_record(sink, json: bytes) -> None:
    """
    Write one record with its leading RS and trailing LF markers.

    Args:
        sink: Object with a write(bytes) method
        json: Encoded JSON text
    """
    sink.write(RS_BYTE)
    sink.write(json)
    sink.write(LF_BYTE)


class RecordWriter:
    """
    Prefix every write with a record separator.

    The caller is responsible for the trailing line feed. Encoders that
    write exactly once per value, ending in a line feed, produce a valid
    sequence through this wrapper.
    """

    def __init__(self, sink):
        self.sink = sink

    def write(self, record: bytes) -> int:
        """Write RS followed by record, returning the number of bytes written."""
        self.sink.write(RS_BYTE)
        self.sink.write(record)
        return len(record) + 1

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()


_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class Encoder:
    """
    Encode Python values as JSON text sequence records.

    Options mirror a streaming JSON encoder: compact output by default,
    optional indentation with a line prefix, and HTML-safe escaping of
    <, > and &.
    """

    def __init__(
        self,
        sink,
        escape_html: bool = True,
        indent: Optional[Union[str, int]] = None,
        prefix: str = "",
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ):
        self._writer = RecordWriter(sink)
        self.escape_html = escape_html
        self.indent = indent
        self.prefix = prefix
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    def set_indent(self, prefix: str, indent: Optional[Union[str, int]]) -> None:
        """Indent nested values by indent, starting every new line with prefix."""
        self.prefix = prefix
        self.indent = indent if indent not in ("", None) else None

    def set_escape_html(self, escape_html: bool) -> None:
        self.escape_html = escape_html

    def dumps(self, value: Any) -> str:
        """Serialize value to JSON text without framing."""
        if self.indent is None:
            text = json_module.dumps(
                value,
                separators=(",", ":"),
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
            )
        else:
            text = json_module.dumps(
                value,
                indent=self.indent,
                separators=(",", ": "),
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
            )

        if self.escape_html:
            for char, escaped in _HTML_ESCAPES.items():
                text = text.replace(char, escaped)
        if self.indent is not None and self.prefix:
            text = text.replace("\n", "\n" + self.prefix)
        return text

    def encode(self, value: Any) -> None:
        """Write value as one record. Nothing is written if serialization fails."""
        data = (self.dumps(value) + "\n").encode("utf-8")
        self._writer.write(data)


def dump(values: Iterable[Any], sink, **options) -> None:
    """Write each value as one record. Keyword arguments are passed to Encoder."""
    encoder = Encoder(sink, **options)
    for value in values:
        encoder.encode(value)
