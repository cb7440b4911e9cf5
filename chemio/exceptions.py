"""
Custom exceptions for chemio.

This module defines a hierarchy of exceptions for handling file decoding,
element lookup and property access errors in a structured way.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""

    pass


class ParseError(ChemError):
    """Error while decoding a single field or record.

    Attributes:
        message: Description of what went wrong.
        name: Human-readable name of the field being decoded.
        value: The raw text that could not be decoded.
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: str | None = None,
    ) -> None:
        self.message = message
        self.name = name
        self.value = value
        super().__init__(message)


class ParseNumericError(ParseError):
    """Raw text could not be converted to the expected numeric type."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"'{value}' is not a valid {name}", name, value)


class InvalidValueError(ParseError):
    """A decoded code lies outside its enumerated set of values."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"'{value}' is not a valid {name}", name, value)


class LineTooShortError(ParseError):
    """A line is shorter than the minimum its record requires."""

    def __init__(self, value: str, required: int) -> None:
        self.required = required
        super().__init__(
            f"The line is too short ({len(value)} < {required} characters)",
            "line",
            value,
        )


class UnexpectedTagError(ParseError):
    """A record tag is not recognized at this point of the file."""

    def __init__(self, value: str, expected: str | None = None) -> None:
        self.expected = expected
        message = f"Unexpected tag '{value}'"
        if expected is not None:
            message += f", expected '{expected}'"
        super().__init__(message, "tag", value)


class UnterminatedQuoteError(ParseError):
    """A quoted V3000 token has no closing quote."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unterminated quoted value in: {value}", "quoted value", value)


class InvalidEncodingError(ParseError):
    """A line of a binary stream is not valid UTF-8.

    Attributes:
        value: repr() of the raw line bytes.
    """

    def __init__(self, raw: bytes) -> None:
        super().__init__(f"Line is not valid UTF-8: {raw!r}", "line", repr(raw))


class FileReadError(ChemError):
    """Error while reading a structure file."""

    pass


class LineParseError(FileReadError):
    """A decoding error attributed to a physical line of the input.

    Attributes:
        line: 1-based number of the offending line.
        source: The underlying field or lookup error.
    """

    def __init__(self, line: int, source: ChemError) -> None:
        self.line = line
        self.source = source
        super().__init__(f"Error in line {line}: {source}")


class UnexpectedEndOfInputError(FileReadError, EOFError):
    """The input ended before the record being read was complete."""

    def __init__(self, message: str = "Unexpected end of file") -> None:
        super().__init__(message)


class MoleculeError(ChemError):
    """Error building molecular entities."""

    pass


class UnknownElementError(MoleculeError):
    """Element symbol is not in the element table.

    Attributes:
        symbol: The symbol that was looked up.
    """

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown element symbol '{symbol}'")


class UnknownAtomicNumberError(MoleculeError):
    """Atomic number is not in the element table."""

    def __init__(self, atomic_number: int) -> None:
        self.atomic_number = atomic_number
        super().__init__(f"Unknown atomic number '{atomic_number}'")


class PropertyError(ChemError):
    """Error accessing an entity property."""

    pass


class PropertyTypeError(PropertyError):
    """A property is stored with a different type than requested.

    Attributes:
        key: The property key.
        expected_type: Name of the requested type.
        actual_type: Name of the stored value's type.
    """

    def __init__(self, key: object, expected_type: str, actual_type: str) -> None:
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Property {key} has type '{actual_type}', expected '{expected_type}'"
        )
