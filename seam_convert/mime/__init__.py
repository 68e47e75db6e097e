"""
Typed Body Module

Boundary value types exchanged with the transport layer:
- TypedInput: incoming byte stream plus declared MIME type
- TypedOutput: outgoing byte payload plus MIME type and length
- TypedByteArray / TypedString: in-memory implementations of both
"""

from .mime_util import parse_charset
from .typed import TypedInput, TypedOutput, TypedByteArray, TypedString

__all__ = [
    "parse_charset",
    "TypedInput",
    "TypedOutput",
    "TypedByteArray",
    "TypedString",
]
