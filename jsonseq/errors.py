"""
Errors raised while reading and writing JSON text sequences.

A bad record never stops the stream; only RecordTooLargeError and errors
from the underlying source or sink are fatal.
"""


class JSONSeqError(Exception):
    """Base class for JSON text sequence errors."""


class InvalidRecordError(JSONSeqError, ValueError):
    """A record was truncated or is missing its leading separator."""

    def __init__(self, data: bytes):
        super().__init__(f"invalid record: {data!r}")
        self.data = data


class RecordDecodeError(JSONSeqError, ValueError):
    """A complete-looking record could not be decoded as JSON."""

    def __init__(self, data: bytes, reason: str = ""):
        message = f"cannot decode record {data!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.data = data


class RecordTooLargeError(JSONSeqError):
    """The buffered record exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"record of {size} bytes exceeds limit of {limit} bytes")
        self.size = size
        self.limit = limit
