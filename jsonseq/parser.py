"""
Streaming Record Parser - Push-style parser for JSON text sequences.

Feed bytes as they arrive with parse_incremental(); handler callbacks fire
for every record whose end is known. Call close() at end of input to flush
the last record.
"""

import logging
from typing import Any, Callable, Optional

from .buffers import RecordBuffer
from .decoder import decode_token, default_unmarshal
from .handler import RecordHandler


logger = logging.getLogger(__name__)


class StreamingRecordParser:
    """
    Parse a JSON text sequence incrementally as it streams in.

    Output does not depend on how the input is chunked: feeding a stream
    one byte at a time fires the same callbacks as feeding it at once.
    """

    def __init__(
        self,
        handler: RecordHandler = None,
        unmarshal: Optional[Callable[[bytes], Any]] = None,
    ):
        """
        Initialize the parser with a handler for events.

        Args:
            handler: RecordHandler instance to receive parsing events
            unmarshal: Function turning value bytes into a Python value
        """
        self.handler = handler or RecordHandler()
        self.unmarshal = unmarshal or default_unmarshal
        self._buffer = RecordBuffer()
        self._closed = False
        self.records = 0
        self.invalid_records = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet part of a finished record."""
        return len(self._buffer)

    def _emit(self, token: bytes) -> None:
        result = decode_token(token, self.unmarshal)
        if result.is_record:
            self.records += 1
            self.handler.on_record(result.value, result.raw)
        else:
            self.invalid_records += 1
            self.handler.on_invalid_record(result.data, result.reason, result.error)

    def _drain(self, at_eof: bool) -> None:
        while True:
            _, token = self._buffer.next_token(at_eof)
            if token is None:
                return
            self._emit(token)

    def parse_incremental(self, delta: bytes) -> None:
        """Parse new bytes incrementally."""
        if self._closed:
            raise ValueError("parser is closed")
        if not delta:
            return

        self._buffer.extend(delta)
        self._drain(False)

    def close(self) -> None:
        """Flush the remaining bytes as the end of the stream."""
        if self._closed:
            return
        self._closed = True
        self._drain(True)
        logger.debug("Stream closed: %d records, %d invalid", self.records, self.invalid_records)
        self.handler.on_end()
