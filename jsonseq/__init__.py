"""
jsonseq - RFC 7464 JSON text sequences for incremental streams.
"""

from .constants import CONTENT_TYPE
from .decoder import Decoder, load, loads
from .errors import JSONSeqError, InvalidRecordError, RecordDecodeError, RecordTooLargeError
from .handler import RecordHandler
from .parser import StreamingRecordParser
from .record import record_value
from .results import EndOfStream, Invalid, InvalidReason, Record
from .scanner import scan_record
from .writer import Encoder, RecordWriter, dump, write_record

__all__ = [
    'CONTENT_TYPE',
    'Decoder',
    'Encoder',
    'EndOfStream',
    'Invalid',
    'InvalidReason',
    'InvalidRecordError',
    'JSONSeqError',
    'Record',
    'RecordDecodeError',
    'RecordHandler',
    'RecordTooLargeError',
    'RecordWriter',
    'StreamingRecordParser',
    'dump',
    'load',
    'loads',
    'record_value',
    'scan_record',
    'write_record',
]
__version__ = '0.1.0'
