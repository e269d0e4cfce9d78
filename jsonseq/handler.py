"""
Record Handler - Base handler class for JSON text sequence events.

Clients should subclass this and override the methods they need.
"""

from typing import Any, Optional

from .errors import JSONSeqError
from .results import InvalidReason


class RecordHandler:
    """
    Base handler class for record events.
    Clients should subclass this and override the methods they need.
    """

    def on_record(self, value: Any, raw: bytes) -> None:
        """
        Called when a record has been decoded.

        Args:
            value: The decoded JSON value
            raw: The value bytes the record was decoded from
        """
        pass

    def on_invalid_record(self, data: bytes, reason: InvalidReason, error: Optional[JSONSeqError] = None) -> None:
        """
        Called for a record that is truncated or is not valid JSON.

        Args:
            data: Raw bytes of the record
            reason: InvalidReason.TRUNCATED or InvalidReason.MALFORMED
            error: Exception describing the problem
        """
        pass

    def on_end(self) -> None:
        """Called once when the stream is closed."""
        pass
