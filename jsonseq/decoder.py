"""
Decoder - Pulls records out of a byte source one at a time.

The decoder reads chunks from the source only when the buffered bytes do not
yet contain a complete record, so a slow producer is consumed incrementally.
"""

import json as json_module
import logging
from typing import Any, Callable, Iterator, List, Optional, Union

from .buffers import RecordBuffer
from .errors import RecordDecodeError, RecordTooLargeError
from .record import record_value
from .results import EndOfStream, Invalid, InvalidReason, Record, Result
from .scanner import iter_records


logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096

_json_decoder = json_module.JSONDecoder()


def default_unmarshal(data: bytes) -> Any:
    """
    Decode the first JSON value in data, ignoring anything after it.

    Raises:
        ValueError: If data is not UTF-8 or does not start with a JSON value
    """
    text = data.decode("utf-8")
    value, _ = _json_decoder.raw_decode(text)
    return value


def decode_token(token: bytes, unmarshal: Callable[[bytes], Any] = default_unmarshal) -> Union[Record, Invalid]:
    """Classify a scanned token and decode it when it is complete."""
    value, complete = record_value(token)
    if not complete:
        logger.debug("Truncated record: %r", value)
        return Invalid(value, InvalidReason.TRUNCATED)

    try:
        decoded = unmarshal(value)
    except ValueError as e:
        logger.debug("Malformed record %r: %s", value, e)
        error = RecordDecodeError(value, str(e))
        error.__cause__ = e
        return Invalid(value, InvalidReason.MALFORMED, error)

    return Record(decoded, value)


class Decoder:
    """
    Read and decode JSON text sequence records from a byte source.

    Usage:
        decoder = Decoder(open("events.json-seq", "rb"))
        for result in decoder:
            if result.is_record:
                print(result.value)
    """

    def __init__(
        self,
        source,
        unmarshal: Optional[Callable[[bytes], Any]] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_record_size: Optional[int] = None,
    ):
        """
        Args:
            source: Object with a read(n) method returning bytes; an empty
                    read signals end of input
            unmarshal: Function turning value bytes into a Python value.
                       Must raise ValueError on bad input.
            buffer_size: Number of bytes requested per read
            max_record_size: Largest number of bytes buffered while waiting
                             for a record boundary, or None for no limit
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.unmarshal = unmarshal or default_unmarshal
        self.buffer_size = buffer_size
        self.max_record_size = max_record_size
        self._buffer = RecordBuffer()
        self._at_eof = False
        self._done = False

    @property
    def exhausted(self) -> bool:
        """True once EndOfStream has been returned."""
        return self._done

    def _fill(self) -> None:
        chunk = self.source.read(self.buffer_size)
        if not chunk:
            self._at_eof = True
            return
        self._buffer.extend(chunk)

    def _next_token(self) -> Optional[bytes]:
        while True:
            _, token = self._buffer.next_token(self._at_eof)
            if token is not None or self._at_eof:
                return token
            # Everything buffered belongs to one unfinished record
            if self.max_record_size is not None and len(self._buffer) > self.max_record_size:
                raise RecordTooLargeError(len(self._buffer), self.max_record_size)
            self._fill()

    def decode_next(self) -> Result:
        """
        Return the next result from the stream.

        Returns:
            Record for a decoded value, Invalid for an unusable record,
            EndOfStream once the source and the buffer are exhausted.
        """
        if self._done:
            return EndOfStream()

        token = self._next_token()
        if token is None:
            self._done = True
            return EndOfStream()
        return decode_token(token, self.unmarshal)

    def decode(self) -> Any:
        """
        Return the next decoded value.

        Raises:
            InvalidRecordError: The record was truncated
            RecordDecodeError: The record is not valid JSON
            EOFError: The stream is exhausted
        """
        result = self.decode_next()
        if result.is_end:
            raise EOFError("end of JSON text sequence")
        if not result.is_record:
            raise result.error
        return result.value

    def __iter__(self) -> Iterator[Union[Record, Invalid]]:
        while True:
            result = self.decode_next()
            if result.is_end:
                return
            yield result


def load(source, **options) -> Iterator[Any]:
    """
    Iterate over the values of a JSON text sequence.

    Raises the record's error at the first invalid record. Keyword
    arguments are passed to Decoder.
    """
    for result in Decoder(source, **options):
        if not result.is_record:
            raise result.error
        yield result.value


def loads(data: bytes, unmarshal: Optional[Callable[[bytes], Any]] = None) -> List[Union[Record, Invalid]]:
    """Decode every record of an in-memory stream."""
    unmarshal = unmarshal or default_unmarshal
    return [decode_token(token, unmarshal) for token in iter_records(data)]
