"""
Record Scanner - Splits a byte stream into candidate JSON text sequence records.

The scanner is a pure function over the caller's buffer: it never keeps state
between calls. The caller appends newly read bytes to its buffer, calls
scan_record(), and drops `advance` bytes from the front of the buffer.
Tokens must then be checked with record.record_value().
"""

from typing import Optional, Tuple

from .constants import RS


def scan_record(data: bytes, at_eof: bool) -> Tuple[int, Optional[bytes]]:
    """
    Find the next record in data.

    Args:
        data: Unconsumed bytes buffered from the stream
        at_eof: True when no more bytes will ever arrive

    Returns:
        (advance, token) where advance is the number of leading bytes the
        caller must drop and token is the record slice, or None when more
        data is needed (advance is then 0) or the stream is exhausted.
    """
    if at_eof and not data:
        return 0, None

    # Find record start
    i = data.find(RS)
    if i < 0:
        if at_eof:
            # Partial record, no separator ever arrived
            return len(data), bytes(data)
        return 0, None
    if i > 0:
        # Partial record before the next separator. The byte in front of
        # the separator is the missing terminator's slot.
        end = i - 1 if i > 1 else i
        return i, bytes(data[:end])

    # Collapse consecutive leading separators into one
    start = 0
    while start + 1 < len(data) and data[start + 1] == RS:
        start += 1

    # Find end of this record, i.e. the start of the next one
    j = data.find(RS, start + 1)
    if j < 0:
        if at_eof:
            return len(data), bytes(data[start:])
        return 0, None
    return j, bytes(data[start:j])


def iter_records(data: bytes):
    """Yield every token of a complete in-memory stream."""
    while True:
        advance, token = scan_record(data, True)
        if token is None:
            return
        data = data[advance:]
        yield token
