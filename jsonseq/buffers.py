"""
Record Buffer - Holds the unconsumed tail of a byte stream.

Bytes read from the source are appended at the end; the scanner reports
how many leading bytes to drop once a record has been taken.
"""

from typing import Optional, Tuple

from .scanner import scan_record


class RecordBuffer:
    """
    Unconsumed stream bytes between scanner calls.

    The buffer only ever contains bytes that have not yet been handed out
    as part of a record, so its size stays bounded by the longest record
    plus one read chunk.
    """

    def __init__(self):
        self._data = bytearray()

    @property
    def data(self) -> bytes:
        """Get a copy of the buffered bytes."""
        return bytes(self._data)

    def extend(self, chunk: bytes) -> None:
        """Add bytes read from the stream."""
        self._data += chunk

    def advance(self, count: int) -> None:
        """Drop count bytes from the front of the buffer."""
        if count:
            del self._data[:count]

    def next_token(self, at_eof: bool) -> Tuple[int, Optional[bytes]]:
        """Scan the buffer and consume the next record, if one is ready."""
        advance, token = scan_record(self._data, at_eof)
        self.advance(advance)
        return advance, token

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"RecordBuffer({len(self._data)} bytes)"
