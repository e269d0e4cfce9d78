"""
Constants - Framing bytes and character classes for JSON text sequences.

See RFC 7464 (JSON text sequences) and RFC 7159 section 2 (whitespace).
"""

# MIME media type for JSON text sequences (RFC 7464 section 4)
CONTENT_TYPE = "application/json-seq"

RS = 0x1E
LF = 0x0A
SP = 0x20
TB = 0x09
CR = 0x0D

RS_BYTE = bytes([RS])
LF_BYTE = bytes([LF])

# Insignificant whitespace allowed around a JSON value
WHITESPACE = bytes([SP, TB, LF, CR])

DIGITS = b"0123456789"

# Everything that may appear inside a JSON number: -12.5e+3
NUMBER_CHARS = DIGITS + b".eE+-"

LITERALS = {
    ord("n"): b"null",
    ord("t"): b"true",
    ord("f"): b"false",
}
