"""
Record Value - Extracts the JSON value from a scanned record and checks
whether it may have been truncated.

Top-level numbers, true, false and null have no closing character of their
own, so a record cut off mid-value looks like a shorter valid value. Those
are only accepted when followed by whitespace. Objects, arrays and strings
are self-delimiting; truncation inside them is left to the JSON decoder.

See RFC 7464 section 2.4.
"""

from typing import Tuple

from .constants import DIGITS, LITERALS, NUMBER_CHARS, RS, WHITESPACE


# ========================================================================
# SHARED HELPERS
# ========================================================================

def is_whitespace(byte: int) -> bool:
    return byte in WHITESPACE


def is_digit(byte: int) -> bool:
    return byte in DIGITS


def skip_whitespace(data: bytes, pos: int = 0) -> int:
    """Return the index of the first non-whitespace byte at or after pos."""
    while pos < len(data) and data[pos] in WHITESPACE:
        pos += 1
    return pos


def trim_trailing_whitespace(data: bytes) -> Tuple[bytes, bool]:
    """Trim trailing whitespace, returning the result and whether anything was trimmed."""
    trimmed = data.rstrip(WHITESPACE)
    return trimmed, len(trimmed) != len(data)


# ========================================================================
# TRUNCATION CHECKS
# ========================================================================

def _literal_complete(value: bytes, literal: bytes) -> bool:
    if not value.startswith(literal):
        # "tru" is a cut-off "true"; anything else is left to the decoder
        return not literal.startswith(value)
    return len(value) > len(literal) and is_whitespace(value[len(literal)])


def _number_complete(value: bytes) -> bool:
    pos = 1 if value[0] == ord("-") else 0
    while pos < len(value) and value[pos] in NUMBER_CHARS:
        pos += 1
    return pos < len(value) and is_whitespace(value[pos])


def _is_number_start(value: bytes) -> bool:
    if is_digit(value[0]):
        return True
    return value[0] == ord("-") and len(value) > 1 and is_digit(value[1])


def record_value(token: bytes) -> Tuple[bytes, bool]:
    """
    Return the value contained in a record and whether it can be decoded.

    This is NOT a validation of the JSON value itself, which may still fail
    to decode. A False result means the record was truncated or is missing
    its framing.

    Args:
        token: A record slice produced by scanner.scan_record()

    Returns:
        (value, complete) where value has the separator and surrounding
        whitespace removed. Tokens without framing are returned unchanged.
    """
    if len(token) < 2 or token[0] != RS:
        return token, False

    start = skip_whitespace(token, 1)
    value = token[start:]
    if not value:
        return value, False

    first = value[0]
    if first in LITERALS:
        complete = _literal_complete(value, LITERALS[first])
    elif _is_number_start(value):
        complete = _number_complete(value)
    elif first == ord("-"):
        # Sign with no digit yet
        complete = len(value) > 1
    else:
        complete = True

    value, _ = trim_trailing_whitespace(value)
    return value, complete
