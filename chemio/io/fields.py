"""
Fixed-column field decoders.

MDL and PDB records are positional: every value occupies a fixed character
range of its line. The decoders here convert one such slice to a number.
The `*_default` variants treat an all-blank slice as zero, which is how the
file formats define omitted numeric fields.
"""

from __future__ import annotations

import re
from typing import Final

from ..exceptions import ParseNumericError

_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+")
_UINT_PATTERN: Final = re.compile(r"\+?[0-9]+")
_FLOAT_PATTERN: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def pad_line(line: str, width: int) -> str:
    """Right-pad a line with spaces so slices up to `width` exist."""
    return line if len(line) >= width else line.ljust(width)


def parse_int(val: str, name: str) -> int:
    """Decode a signed integer field.

    Args:
        val: Raw field text.
        name: Human-readable field name used in error messages.

    Raises:
        ParseNumericError: If the stripped text is not an integer.
    """
    text = val.strip()
    if not _INT_PATTERN.fullmatch(text):
        raise ParseNumericError(name, val)
    return int(text)


def parse_uint(val: str, name: str) -> int:
    """Decode an unsigned integer field."""
    text = val.strip()
    if not _UINT_PATTERN.fullmatch(text):
        raise ParseNumericError(name, val)
    return int(text)


def parse_float(val: str, name: str) -> float:
    """Decode a floating-point field."""
    text = val.strip()
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ParseNumericError(name, val)
    return float(text)


def parse_int_default(val: str, name: str) -> int:
    """Decode a signed integer field, blank meaning 0."""
    if not val.strip():
        return 0
    return parse_int(val, name)


def parse_uint_default(val: str, name: str) -> int:
    """Decode an unsigned integer field, blank meaning 0."""
    if not val.strip():
        return 0
    return parse_uint(val, name)


def parse_float_default(val: str, name: str) -> float:
    """Decode a floating-point field, blank meaning 0.0."""
    if not val.strip():
        return 0.0
    return parse_float(val, name)
