"""
Decode Results - What a decoder returns for each step of a stream.

Every call yields exactly one of:

    Record       a decoded JSON value
    Invalid      a record that cannot be used, with its raw bytes
    EndOfStream  no more records will follow
"""

from enum import Enum
from typing import Any, Optional

from .errors import InvalidRecordError, JSONSeqError, RecordDecodeError


class InvalidReason(Enum):
    """Why a record was rejected."""

    TRUNCATED = "truncated"    # framing: cut off or missing its separator
    MALFORMED = "malformed"    # content: the JSON decoder rejected it


class Result:
    """Base class for decode results."""

    is_record = False
    is_end = False

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        # Raises TypeError for records holding unhashable values (dict, list)
        return hash((type(self), self._key()))

    def _key(self):
        return ()


class Record(Result):
    """A successfully decoded record."""

    is_record = True

    def __init__(self, value: Any, raw: bytes = b""):
        self.value = value
        self.raw = raw

    def _key(self):
        return (self.value,)

    def __repr__(self) -> str:
        return f"Record({self.value!r})"


class Invalid(Result):
    """
    A record that could not be used.

    Attributes:
        data: The raw bytes of the record (value bytes when framing was
              found, the whole token otherwise)
        reason: InvalidReason.TRUNCATED or InvalidReason.MALFORMED
        error: The matching exception, for callers that prefer to raise
    """

    def __init__(self, data: bytes, reason: InvalidReason, error: Optional[JSONSeqError] = None):
        self.data = data
        self.reason = reason
        if error is None:
            if reason is InvalidReason.TRUNCATED:
                error = InvalidRecordError(data)
            else:
                error = RecordDecodeError(data)
        self.error = error

    def _key(self):
        return (self.data, self.reason)

    def __repr__(self) -> str:
        return f"Invalid({self.data!r}, {self.reason.value})"


class EndOfStream(Result):
    """The stream is exhausted."""

    is_end = True

    def __repr__(self) -> str:
        return "EndOfStream()"
